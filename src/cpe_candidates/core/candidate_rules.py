#!/usr/bin/env python3
"""
Candidate Rules - read-only lookup tables for candidate generation.

The tables are loaded once from the candidate_rules section of config.json and
frozen into tuples/frozensets. Built-in defaults are used for any missing key.
"""

import json
import os
from typing import Any, Dict

from ..logging.workflow_logger import get_logger

logger = get_logger()

DEFAULT_RULES = {
    'domains': ['com', 'org', 'net', 'io'],
    'forbidden_vendor_group_id_fields': ['plugin', 'plugins'],
    'forbidden_product_group_id_fields': ['plugin', 'plugins', 'client'],
    # Manifest fields that sometimes carry group-id-like values. For example
    # commons-io 2.8.0 nested inside jenkins.war only exposes its group id
    # through Automatic-Module-Name / Extension-Name.
    'manifest_group_id_fields': [
        'Extension-Name',
        'Automatic-Module-Name',
        'Specification-Vendor',
        'Implementation-Vendor',
        'Bundle-SymbolicName',
        'Implementation-Vendor-Id',
        'Package',
        'Implementation-Title',
        'Main-Class',
        'Bundle-Activator',
    ],
    'manifest_name_fields': [
        'Specification-Vendor',
        'Implementation-Vendor',
    ],
}


def load_config(config_path=None) -> Dict[str, Any]:
    """Load configuration from config.json"""
    if config_path is None:
        config_path = os.path.join(os.path.dirname(__file__), '..', 'config.json')
    try:
        with open(config_path, 'r') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning(f"Could not load config file {config_path}: {e} - using built-in candidate rules", group="INIT")
        return {}


def _rules_section(config: Dict[str, Any]) -> Dict[str, Any]:
    rules = dict(DEFAULT_RULES)
    rules.update(config.get('candidate_rules', {}))
    return rules


_rules = _rules_section(load_config())

DOMAINS = tuple(_rules['domains'])
FORBIDDEN_VENDOR_GROUP_ID_FIELDS = frozenset(f.lower() for f in _rules['forbidden_vendor_group_id_fields'])
FORBIDDEN_PRODUCT_GROUP_ID_FIELDS = frozenset(f.lower() for f in _rules['forbidden_product_group_id_fields'])
MANIFEST_GROUP_ID_FIELDS = tuple(_rules['manifest_group_id_fields'])
MANIFEST_NAME_FIELDS = tuple(_rules['manifest_name_fields'])
