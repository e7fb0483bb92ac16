#!/usr/bin/env python3
"""
RPM Candidate Builders

rpm headers state the vendor directly, so the vendor candidate is the
normalized header value and nothing else.
"""

from .field_candidates import FieldCandidate, FieldCandidateSet
from .normalization import normalize_title
from .package_metadata import binary_package_metadata


def candidate_vendors_for_rpm(package) -> FieldCandidateSet:
    vendors = FieldCandidateSet()

    metadata = binary_package_metadata(package)
    if metadata is None:
        return vendors

    if metadata.vendor:
        vendors.add(FieldCandidate(value=normalize_title(metadata.vendor), disallow_sub_selections=True))

    return vendors
