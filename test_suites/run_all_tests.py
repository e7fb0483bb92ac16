#!/usr/bin/env python3
"""
Unified Test Runner for the CPE Candidate Tool

Runs every test suite as a subprocess and totals the results. Each test suite
outputs a standard results line:

    TEST_RESULTS: PASSED=X TOTAL=Y SUITE="Name"

Usage:
    python test_suites/run_all_tests.py                                       # Run all suites
    python test_suites/candidate_generation/test_java_candidates.py           # Run one suite
"""

import os
import re
import subprocess
import sys
import time
from pathlib import Path
from typing import Dict, List

PROJECT_ROOT = Path(__file__).parent.parent


class TestSuiteRunner:
    """Unified test runner that executes all standardized test suites."""

    def __init__(self):
        self.results: List[Dict] = []

        self.test_suites = [
            {'name': 'Field Candidates', 'path': 'test_suites/candidate_generation/test_field_candidates.py'},
            {'name': 'Normalization', 'path': 'test_suites/candidate_generation/test_normalization.py'},
            {'name': 'Java Candidates', 'path': 'test_suites/candidate_generation/test_java_candidates.py'},
            {'name': 'Candidate Generator', 'path': 'test_suites/candidate_generation/test_candidate_generator.py'},
            {'name': 'Package Loader', 'path': 'test_suites/tool_infrastructure/test_package_loader.py'},
            {'name': 'Workflow Logger', 'path': 'test_suites/tool_infrastructure/test_workflow_logger.py'},
            {'name': 'Candidate Tool CLI', 'path': 'test_suites/tool_infrastructure/test_candidate_tool.py'},
        ]

    def parse_standard_test_output(self, output: str) -> Dict:
        """Parse the standardized TEST_RESULTS line from suite output."""
        match = re.search(r'TEST_RESULTS: PASSED=(\d+) TOTAL=(\d+) SUITE="([^"]*)"', output or "")
        if not match:
            return {'tests_passed': 0, 'tests_total': 0, 'success': False,
                    'summary': 'ERROR: Standard test output format not found'}

        passed, total, suite_name = match.groups()
        return {
            'tests_passed': int(passed),
            'tests_total': int(total),
            'suite_name': suite_name,
            'success': int(passed) == int(total),
            'summary': f'{passed}/{total} tests passed'
        }

    def run_test_suite(self, suite: Dict) -> Dict:
        """Run a single test suite and return results."""
        print(f"Running {suite['name']}...")
        start_time = time.time()

        env = os.environ.copy()
        env['PYTHONIOENCODING'] = 'utf-8'
        env['UNIFIED_TEST_RUNNER'] = '1'

        try:
            result = subprocess.run(
                [sys.executable, suite['path']],
                cwd=PROJECT_ROOT,
                capture_output=True,
                text=True,
                timeout=300,
                env=env,
                encoding='utf-8',
                errors='replace'
            )
        except subprocess.TimeoutExpired:
            return {'name': suite['name'], 'success': False, 'execution_time': time.time() - start_time,
                    'tests_passed': 0, 'tests_total': 0, 'summary': 'Test suite timed out'}

        test_info = self.parse_standard_test_output(result.stdout)
        success = result.returncode == 0 and test_info['success']

        if not success:
            print(f"\nFAILURE in {suite['name']}:")
            if result.stderr:
                print(f"Error Details:\n{result.stderr}")
            print()

        return {
            'name': suite['name'],
            'success': success,
            'execution_time': time.time() - start_time,
            'tests_passed': test_info['tests_passed'],
            'tests_total': test_info['tests_total'],
            'summary': test_info['summary'],
        }

    def run_all_tests(self) -> bool:
        """Run all test suites and return overall success."""
        print("Running All Test Suites")
        print("=" * 50)

        for suite in self.test_suites:
            self.results.append(self.run_test_suite(suite))

        print()
        print("=" * 50)
        print("TEST SUMMARY")
        print("=" * 50)
        for result in self.results:
            status = "PASS" if result['success'] else "FAIL"
            print(f"{status:<5} {result['name']:<25} {result['summary']} ({result['execution_time']:.1f}s)")

        total_passed = sum(r['tests_passed'] for r in self.results)
        total_tests = sum(r['tests_total'] for r in self.results)
        print(f"\nTOTAL: {total_passed}/{total_tests} tests passed")

        return all(r['success'] for r in self.results)


def main():
    runner = TestSuiteRunner()
    sys.exit(0 if runner.run_all_tests() else 1)


if __name__ == "__main__":
    main()
