#!/usr/bin/env python3
"""
CPE Candidate Package

Derives candidate vendor and product fields for CPE construction from
package metadata (pom properties, jar manifests, rpm headers).
"""

import json
from pathlib import Path

def _get_version():
    """Get version from config.json"""
    try:
        config_path = Path(__file__).parent / "config.json"
        with open(config_path, 'r') as f:
            config = json.load(f)
        return config.get("application", {}).get("version", "unknown")
    except (OSError, json.JSONDecodeError):
        return "unknown"

__version__ = _get_version()
__author__ = "Hashmire"

# Core modules available for import
__all__ = [
    'core',
    'logging',
]
