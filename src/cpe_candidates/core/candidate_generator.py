#!/usr/bin/env python3
"""
Candidate Generator

Entry points used by CPE assembly: candidate vendors and products for a
package, dispatched on the package's metadata variant, plus a batch helper
that builds a DataFrame of candidates for a list of packages.
"""

from typing import Iterable, List

import pandas as pd
from tqdm import tqdm

from .field_candidates import FieldCandidateSet, candidate_set_from_values
from .java_candidates import candidate_products_for_java, candidate_vendors_for_java
from .package_metadata import BinaryPackageMetadata, JavaMetadata
from .rpm_candidates import candidate_vendors_for_rpm
from ..logging.workflow_logger import get_logger, start_candidate_generation, end_candidate_generation

logger = get_logger()

DATASET_COLUMNS = ['name', 'version', 'type', 'vendorCandidates', 'productCandidates']


def candidate_vendor_set(package) -> FieldCandidateSet:
    """Vendor candidates with their sub-selection annotations"""
    metadata = getattr(package, 'metadata', None)
    if isinstance(metadata, JavaMetadata):
        return candidate_vendors_for_java(package)
    if isinstance(metadata, BinaryPackageMetadata):
        return candidate_vendors_for_rpm(package)
    return FieldCandidateSet()


def candidate_product_set(package) -> FieldCandidateSet:
    metadata = getattr(package, 'metadata', None)
    if isinstance(metadata, JavaMetadata):
        return candidate_set_from_values(candidate_products_for_java(package))
    # binary package metadata carries no product hints beyond the package name
    return FieldCandidateSet()


def candidate_vendors(package) -> List[str]:
    return candidate_vendor_set(package).values()


def candidate_products(package) -> List[str]:
    return candidate_product_set(package).values()


def process_package_dataset(packages: Iterable, show_progress: bool = False) -> pd.DataFrame:
    """
    Build candidate vendors/products for every package.

    Args:
        packages: Package objects
        show_progress: Wrap iteration in a tqdm progress bar

    Returns:
        DataFrame with one row per package and DATASET_COLUMNS columns
    """
    packages = list(packages)
    start_candidate_generation(f"{len(packages)} packages")

    rows = []
    iterator = tqdm(packages, desc="Generating candidates", unit="pkg") if show_progress else packages
    for package in iterator:
        rows.append({
            'name': package.name,
            'version': package.version,
            'type': package.type,
            'vendorCandidates': candidate_vendors(package),
            'productCandidates': candidate_products(package),
        })

    dataset = pd.DataFrame(rows, columns=DATASET_COLUMNS)
    without_candidates = int((dataset['vendorCandidates'].map(len) == 0).sum()) if len(dataset) else 0
    logger.data_summary("Candidate Generation", packages=len(dataset), without_vendor_candidates=without_candidates)
    end_candidate_generation(f"{len(dataset)} packages processed")
    return dataset
