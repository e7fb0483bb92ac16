#!/usr/bin/env python3
"""
CPE Candidate Tool command line interface.

Loads package records, generates vendor/product candidates, and prints them
or writes them to a JSON file.
"""

import argparse
import os
import sys
from pathlib import Path

import orjson

from .candidate_generator import process_package_dataset
from .package_loader import PackageRecordValidationError, load_package_records
from ..logging.workflow_logger import get_logger

logger = get_logger()


def write_results(dataset, output_path) -> None:
    """Write the candidate dataset as a JSON array of records"""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'wb') as f:
        f.write(orjson.dumps(dataset.to_dict(orient='records'), option=orjson.OPT_INDENT_2))
    logger.file_operation("saved", str(output_path), f"{len(dataset)} packages")


def print_results(dataset) -> None:
    for row in dataset.itertuples(index=False):
        print(f"{row.name}@{row.version}")
        print(f"  vendors:  {', '.join(row.vendorCandidates) or '-'}")
        print(f"  products: {', '.join(row.productCandidates) or '-'}")


def main(argv=None) -> int:
    """Main function to generate candidates based on command line arguments."""
    parser = argparse.ArgumentParser(description="Generate CPE vendor/product candidates for package records")
    parser.add_argument("--input", required=True, help="JSON file with package records")
    parser.add_argument("--output", help="Write candidate results to this JSON file instead of stdout")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while generating candidates")
    parser.add_argument("--log-dir", help="Also write logs to this directory")

    args = parser.parse_args(argv)

    if args.log_dir:
        logger.set_run_logs_directory(args.log_dir)
        logger.start_file_logging(os.path.basename(args.input).replace('.json', '').replace('.', '_'))

    try:
        try:
            packages = load_package_records(args.input)
        except FileNotFoundError:
            logger.error(f"Package records file not found: {args.input}", group="package_load")
            return 1
        except PackageRecordValidationError as e:
            logger.error(f"Package records rejected: {e}", group="package_load")
            return 1

        dataset = process_package_dataset(packages, show_progress=args.progress)

        if args.output:
            write_results(dataset, args.output)
        else:
            print_results(dataset)
        return 0
    finally:
        logger.stop_file_logging()


if __name__ == "__main__":
    sys.exit(main())
