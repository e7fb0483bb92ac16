#!/usr/bin/env python3
"""
Java Candidate Builders

Derives vendor and product candidates for java archives from pom.properties
build coordinates and MANIFEST.MF metadata.

Group IDs are collected from:
- pom.properties groupId (when it looks like a reverse-domain namespace)
- pom.properties artifactId (when the publisher put the group ID there by mistake)
- a fixed list of manifest fields that sometimes carry namespace-like values

Vendors come from the non-TLD group ID segments (plus their sub-selections)
and from free-text Specification-Vendor / Implementation-Vendor values.
Products come from the artifact ID and from group ID segments that could name
the umbrella project.
"""

from typing import List, Optional

from .candidate_rules import (
    FORBIDDEN_PRODUCT_GROUP_ID_FIELDS,
    FORBIDDEN_VENDOR_GROUP_ID_FIELDS,
    MANIFEST_GROUP_ID_FIELDS,
    MANIFEST_NAME_FIELDS,
)
from .field_candidates import FieldCandidate, FieldCandidateSet, generate_sub_selections
from .normalization import normalize_name, starts_with_domain
from .package_metadata import BuildCoordinateMetadata, ManifestMetadata, java_metadata
from ..logging.workflow_logger import get_logger

logger = get_logger()


def _looks_like_group_id(value: str) -> bool:
    return starts_with_domain(value) and len(value.split('.')) > 1


def candidate_products_for_java(package) -> List[str]:
    return products_from_artifact_and_group_ids(
        artifact_id_from_java_package(package),
        group_ids_from_java_package(package),
    )


def candidate_vendors_for_java(package) -> FieldCandidateSet:
    gid_vendors = vendors_from_group_ids(group_ids_from_java_package(package))
    name_vendors = vendors_from_java_manifest_names(package)
    return FieldCandidateSet.from_sets(gid_vendors, name_vendors)


def vendors_from_java_manifest_names(package) -> FieldCandidateSet:
    """Vendor names declared in free text (not namespace-shaped) in the manifest"""
    vendors = FieldCandidateSet()

    metadata = java_metadata(package)
    if metadata is None or metadata.manifest is None:
        return vendors

    for name in MANIFEST_NAME_FIELDS:
        for section in metadata.manifest.sections():
            value = section.get(name)
            if value is None or starts_with_domain(value):
                # namespace-shaped values are handled as group IDs
                continue
            vendors.add(FieldCandidate(value=normalize_name(value), disallow_sub_selections=True))

    return vendors


def vendors_from_group_ids(group_ids: List[str]) -> FieldCandidateSet:
    vendors = FieldCandidateSet()
    for group_id in group_ids:
        for i, field in enumerate(group_id.split('.')):
            field = field.strip()

            if not field:
                continue

            if field.lower() in FORBIDDEN_VENDOR_GROUP_ID_FIELDS:
                continue

            # the TLD is never a vendor
            if i == 0:
                continue

            # e.g. jenkins-ci -> [jenkins-ci, jenkins]
            for value in generate_sub_selections(field):
                vendors.add(FieldCandidate(value=value, disallow_sub_selections=True))

    logger.debug(f"{len(vendors)} vendor candidates from group IDs {group_ids}", group="vendor_candidates")
    return vendors


def products_from_artifact_and_group_ids(artifact_id: str, group_ids: List[str]) -> List[str]:
    products = FieldCandidateSet()
    if artifact_id:
        products.add(FieldCandidate(value=artifact_id))

    for group_id in group_ids:
        is_plugin = 'plugin' in artifact_id or 'plugin' in group_id

        for i, field in enumerate(group_id.split('.')):
            field = field.strip()

            if not field:
                continue

            # don't add this field as a name if it implies the package is a plugin or client
            if field.lower() in FORBIDDEN_PRODUCT_GROUP_ID_FIELDS:
                continue

            # TLD and registered domain owner
            if i <= 1:
                continue

            # Umbrella projects tend to have sub components that either start or end with
            # the project name. Only fields that may represent the umbrella project are kept.
            could_be_project_name = artifact_id.startswith(field) or artifact_id.endswith(field)
            if not artifact_id or (could_be_project_name and not is_plugin):
                products.add(FieldCandidate(value=field))

    values = products.values()
    logger.debug(f"Product candidates for artifact '{artifact_id}' and group IDs {group_ids}: {values}",
                 group="product_candidates")
    return values


def artifact_id_from_java_package(package) -> str:
    metadata = java_metadata(package)
    if metadata is None or metadata.pom_properties is None:
        return ""

    artifact_id = (metadata.pom_properties.artifact_id or "").strip()
    if _looks_like_group_id(artifact_id):
        # strong indication that the artifact ID is really a group ID, don't use it
        logger.debug(f"Artifact ID '{artifact_id}' looks like a group ID - not used as a product", group="group_id")
        return ""
    return artifact_id


def group_ids_from_java_package(package) -> List[str]:
    metadata = java_metadata(package)
    if metadata is None:
        return []

    group_ids = group_ids_from_pom_properties(metadata.pom_properties)
    group_ids.extend(group_ids_from_java_manifest(metadata.manifest))
    return group_ids


def group_ids_from_pom_properties(properties: Optional[BuildCoordinateMetadata]) -> List[str]:
    if properties is None:
        return []

    group_ids = []
    if starts_with_domain(properties.group_id):
        group_ids.append(properties.group_id.strip())

    # sometimes the publisher puts the group ID in the artifact ID field unintentionally
    if _looks_like_group_id(properties.artifact_id or ""):
        group_ids.append(properties.artifact_id.strip())

    return group_ids


def group_ids_from_java_manifest(manifest: Optional[ManifestMetadata]) -> List[str]:
    if manifest is None:
        return []

    group_ids = []
    for name in MANIFEST_GROUP_ID_FIELDS:
        for section in manifest.sections():
            value = section.get(name)
            if value is not None and starts_with_domain(value):
                group_ids.append(value)

    return group_ids
