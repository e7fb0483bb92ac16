#!/usr/bin/env python3
"""
Package Record Loading and Validation

Reads package records (as produced by an SBOM cataloger) from JSON and turns
them into Package objects for candidate generation.

Record shape:
    {
        "name": "git",
        "version": "4.7.1",
        "type": "java-archive",
        "metadataType": "java-archive",
        "metadata": {
            "pomProperties": {"groupId": "org.jenkins-ci.plugins", "artifactId": "git"},
            "manifest": {"main": {...}, "namedSections": {"name": {...}}}
        }
    }

rpm records use "metadataType": "rpm" with a "vendor" field in "metadata".
Records are validated against the schema in the package_records section of
config.json. Unknown metadata types load with no metadata, which candidate
generation treats as "no candidates".
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import orjson

from .candidate_rules import load_config
from .package_metadata import (
    BinaryPackageMetadata,
    BuildCoordinateMetadata,
    JavaMetadata,
    ManifestMetadata,
    Package,
)
from ..logging.workflow_logger import get_logger, start_package_loading, end_package_loading

logger = get_logger()

JAVA_METADATA_TYPES = ('java-archive', 'java', 'JavaMetadata')
RPM_METADATA_TYPES = ('rpm', 'rpmdb', 'RpmdbMetadata', 'RpmMetadata')


class PackageRecordValidationError(Exception):
    """Raised when a package record fails validation"""
    pass


def get_record_schema() -> Optional[Dict[str, Any]]:
    """Package record schema from config.json (None = skip schema validation)"""
    return load_config().get('package_records', {}).get('schema')


def validate_package_record(record: Any, schema: Optional[Dict[str, Any]] = None, context: str = "package record") -> Dict[str, Any]:
    """
    Validate a single package record.

    Args:
        record: Parsed record
        schema: JSON schema (None = structural check only)
        context: Description for error messages

    Returns:
        The validated record

    Raises:
        PackageRecordValidationError: If the record fails validation
    """
    if not isinstance(record, dict):
        raise PackageRecordValidationError(
            f"Invalid record type: expected dict, got {type(record).__name__} - {context}")

    if schema is None:
        return record

    try:
        jsonschema.validate(instance=record, schema=schema)
    except jsonschema.ValidationError as e:
        error_path = ' -> '.join(str(p) for p in e.path) if e.path else 'root'
        raise PackageRecordValidationError(f"Schema validation failed at {error_path}: {e.message} - {context}")
    except jsonschema.SchemaError as e:
        logger.error(f"Invalid package record schema encountered: {e}", group="package_load")

    return record


def _pom_properties_from_record(raw) -> Optional[BuildCoordinateMetadata]:
    if not raw:
        return None
    return BuildCoordinateMetadata(
        group_id=raw.get('groupId', '') or '',
        artifact_id=raw.get('artifactId', '') or '',
        version=raw.get('version', '') or '',
    )


def _manifest_from_record(raw) -> Optional[ManifestMetadata]:
    if not raw:
        return None
    return ManifestMetadata(
        main=raw.get('main') or {},
        named_sections=raw.get('namedSections') or {},
    )


def package_from_record(record: Dict[str, Any]) -> Package:
    """Convert a validated record into a Package"""
    metadata_type = record.get('metadataType', '')
    raw_metadata = record.get('metadata') or {}

    if metadata_type in JAVA_METADATA_TYPES:
        metadata = JavaMetadata(
            pom_properties=_pom_properties_from_record(raw_metadata.get('pomProperties')),
            manifest=_manifest_from_record(raw_metadata.get('manifest')),
        )
    elif metadata_type in RPM_METADATA_TYPES:
        metadata = BinaryPackageMetadata(
            vendor=raw_metadata.get('vendor', '') or '',
            name=record.get('name', ''),
            version=record.get('version', ''),
            release=raw_metadata.get('release', '') or '',
            architecture=raw_metadata.get('architecture', '') or '',
        )
    else:
        if metadata_type:
            logger.debug(f"Unsupported metadata type '{metadata_type}' for package {record.get('name')}", group="package_load")
        metadata = None

    return Package(
        name=record.get('name', ''),
        version=record.get('version', '') or '',
        type=record.get('type', '') or '',
        metadata=metadata,
    )


def parse_package_records(content: Union[bytes, str], schema: Optional[Dict[str, Any]] = None) -> List[Package]:
    """
    Parse a JSON document holding package records.

    Accepts either {"packages": [...]} or a bare array.

    Raises:
        PackageRecordValidationError: If the document or any record is invalid
    """
    try:
        document = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        raise PackageRecordValidationError(f"Invalid JSON in package records: {e}")

    if isinstance(document, dict):
        records = document.get('packages')
    else:
        records = document

    if not isinstance(records, list):
        raise PackageRecordValidationError("Package records must be a list or an object with a 'packages' list")

    packages = []
    for index, record in enumerate(records):
        validate_package_record(record, schema, context=f"packages[{index}]")
        packages.append(package_from_record(record))
    return packages


def load_package_records(path: Union[str, Path], schema: Optional[Dict[str, Any]] = None) -> List[Package]:
    """Load and validate package records from a JSON file"""
    path = Path(path)
    if schema is None:
        schema = get_record_schema()

    start_package_loading(str(path))
    with open(path, 'rb') as f:
        packages = parse_package_records(f.read(), schema)

    unsupported = sum(1 for p in packages if p.metadata is None)
    if unsupported:
        logger.warning(f"{unsupported} of {len(packages)} packages carry no supported metadata", group="package_load")
    end_package_loading(f"{len(packages)} packages")
    return packages
