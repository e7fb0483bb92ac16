#!/usr/bin/env python3
"""
Package Metadata Model

Read-only views of the metadata a cataloger attaches to a package. A Package
carries at most one metadata variant; candidate extractors check the variant
and return empty results when it does not match.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union


def _frozen_mapping(values) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class BuildCoordinateMetadata:
    """pom.properties style build coordinates"""
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""


@dataclass(frozen=True)
class ManifestMetadata:
    """MANIFEST.MF style metadata: a main section plus named sections"""
    # mapping proxies are unhashable; equality still compares them
    main: Mapping[str, str] = field(default_factory=dict, hash=False)
    named_sections: Mapping[str, Mapping[str, str]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'main', _frozen_mapping(self.main))
        sections = {name: _frozen_mapping(section) for name, section in (self.named_sections or {}).items()}
        object.__setattr__(self, 'named_sections', MappingProxyType(sections))

    def sections(self):
        """Main section followed by every named section, in order"""
        yield self.main
        yield from self.named_sections.values()


@dataclass(frozen=True)
class JavaMetadata:
    pom_properties: Optional[BuildCoordinateMetadata] = None
    manifest: Optional[ManifestMetadata] = None


@dataclass(frozen=True)
class BinaryPackageMetadata:
    """rpm header style metadata that states the vendor directly"""
    vendor: str = ""
    name: str = ""
    version: str = ""
    release: str = ""
    architecture: str = ""


PackageMetadata = Union[JavaMetadata, BinaryPackageMetadata]


@dataclass(frozen=True)
class Package:
    name: str
    version: str = ""
    type: str = ""
    metadata: Optional[PackageMetadata] = None


def java_metadata(package) -> Optional[JavaMetadata]:
    """Return the package's JavaMetadata, or None for any other variant"""
    metadata = getattr(package, 'metadata', None)
    return metadata if isinstance(metadata, JavaMetadata) else None


def binary_package_metadata(package) -> Optional[BinaryPackageMetadata]:
    """Return the package's BinaryPackageMetadata, or None for any other variant"""
    metadata = getattr(package, 'metadata', None)
    return metadata if isinstance(metadata, BinaryPackageMetadata) else None
