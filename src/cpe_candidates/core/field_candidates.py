#!/usr/bin/env python3
"""
Field Candidates

A FieldCandidate is one proposed vendor or product string. A FieldCandidateSet
collects them in insertion order, keyed by value. Adding a value twice keeps a
single entry; once sub-selections are disallowed for a value they stay
disallowed.

Sub-selections are shortened variants of hyphen compounds used to widen match
recall ("jenkins-ci" also yields "jenkins").
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List


@dataclass(frozen=True)
class FieldCandidate:
    value: str
    disallow_sub_selections: bool = False


CandidateFilter = Callable[[FieldCandidate], bool]


def allows_sub_selections(candidate: FieldCandidate) -> bool:
    return not candidate.disallow_sub_selections


def disallows_sub_selections(candidate: FieldCandidate) -> bool:
    return candidate.disallow_sub_selections


def generate_sub_selections(token: str) -> List[str]:
    """
    Expand a hyphen compound into itself followed by progressively shorter prefixes.

    Args:
        token: Candidate value such as "spring-boot-starter"

    Returns:
        ["spring-boot-starter", "spring-boot", "spring"]; a token without
        hyphens yields [token] and an empty token yields [].
    """
    if not token:
        return []

    results = [token]
    segments = token.split('-')
    for end in range(len(segments) - 1, 0, -1):
        candidate = '-'.join(segments[:end]).rstrip('-')
        if candidate and candidate not in results:
            results.append(candidate)
    return results


class FieldCandidateSet:
    """Insertion-ordered, deduplicating collection of FieldCandidate records."""

    def __init__(self, *candidates: FieldCandidate):
        self._entries: Dict[str, bool] = {}
        self.add(*candidates)

    @classmethod
    def from_sets(cls, *sets: "FieldCandidateSet") -> "FieldCandidateSet":
        """Union of the given sets in first-seen order."""
        merged = cls()
        for other in sets:
            if other is not None:
                merged.add(*other)
        return merged

    def add(self, *candidates: FieldCandidate):
        for candidate in candidates:
            if not candidate.value or not candidate.value.strip():
                continue
            existing = self._entries.get(candidate.value, False)
            self._entries[candidate.value] = existing or candidate.disallow_sub_selections

    def merge(self, *others: "FieldCandidateSet") -> "FieldCandidateSet":
        """Return a new set holding this set's entries followed by the others'."""
        return FieldCandidateSet.from_sets(self, *others)

    def candidates(self, *filters: CandidateFilter) -> List[FieldCandidate]:
        results = []
        for value, disallow in self._entries.items():
            candidate = FieldCandidate(value=value, disallow_sub_selections=disallow)
            if all(f(candidate) for f in filters):
                results.append(candidate)
        return results

    def values(self, *filters: CandidateFilter) -> List[str]:
        return [c.value for c in self.candidates(*filters)]

    def with_sub_selections(self) -> "FieldCandidateSet":
        """
        Return a new set where each candidate that allows sub-selections is
        followed by its generated sub-selections. The generated values are
        themselves marked as not splittable.
        """
        expanded = FieldCandidateSet()
        for candidate in self:
            expanded.add(candidate)
            if candidate.disallow_sub_selections:
                continue
            for value in generate_sub_selections(candidate.value)[1:]:
                expanded.add(FieldCandidate(value=value, disallow_sub_selections=True))
        return expanded

    def __iter__(self) -> Iterator[FieldCandidate]:
        return iter(self.candidates())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value) -> bool:
        if isinstance(value, FieldCandidate):
            value = value.value
        return value in self._entries

    def __eq__(self, other) -> bool:
        if not isinstance(other, FieldCandidateSet):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __repr__(self) -> str:
        return f"FieldCandidateSet({self.candidates()!r})"


def candidate_set_from_values(values: Iterable[str], disallow_sub_selections: bool = False) -> FieldCandidateSet:
    """Build a set from plain strings sharing one sub-selection flag."""
    return FieldCandidateSet(*(FieldCandidate(value=v, disallow_sub_selections=disallow_sub_selections)
                               for v in values))
