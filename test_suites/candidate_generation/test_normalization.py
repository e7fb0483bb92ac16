#!/usr/bin/env python3
"""
Normalization and Domain Classification Test Suite

Tests:
- Name normalization (manifest vendor names)
- Title normalization (rpm vendor headers)
- Unicode folding to ASCII
- Reverse-domain prefix detection and its boundary rules

Outputs standardized test results: TEST_RESULTS: PASSED=X TOTAL=Y SUITE="Name"

Usage:
    python test_suites/candidate_generation/test_normalization.py
"""

import sys
import unittest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.cpe_candidates.core.normalization import (
    normalize_name,
    normalize_title,
    normalize_to_ascii,
    starts_with_domain,
)


class TestNameNormalization(unittest.TestCase):

    def test_lowercase_with_separator(self):
        self.assertEqual(normalize_name("Acme Corp"), "acme_corp")

    def test_trims_and_collapses_whitespace(self):
        self.assertEqual(normalize_name("  The   Apache Software\tFoundation "), "the_apache_software_foundation")

    def test_empty_and_whitespace(self):
        self.assertEqual(normalize_name(""), "")
        self.assertEqual(normalize_name("   "), "")

    def test_non_string(self):
        self.assertEqual(normalize_name(None), "")

    def test_accents_folded(self):
        self.assertEqual(normalize_name("Société Générale"), "societe_generale")


class TestTitleNormalization(unittest.TestCase):

    def test_legal_suffix_after_comma_dropped(self):
        """Test "Red Hat, Inc." becomes a single compact token."""
        self.assertEqual(normalize_title("Red Hat, Inc."), "redhat")

    def test_trailing_inc_dropped(self):
        self.assertEqual(normalize_title("CentOS Inc."), "centos")

    def test_plain_title(self):
        self.assertEqual(normalize_title("  Fedora Project "), "fedoraproject")

    def test_empty(self):
        self.assertEqual(normalize_title(""), "")
        self.assertEqual(normalize_title("  "), "")


class TestASCIIFolding(unittest.TestCase):

    def test_diacritics_removed(self):
        self.assertEqual(normalize_to_ascii("café"), "cafe")

    def test_special_letters_transliterated(self):
        self.assertEqual(normalize_to_ascii("Straße"), "Strasse")

    def test_remaining_non_ascii_dropped(self):
        self.assertEqual(normalize_to_ascii("abc✓"), "abc")

    def test_empty(self):
        self.assertEqual(normalize_to_ascii(""), "")
        self.assertEqual(normalize_to_ascii(None), "")


class TestDomainClassifier(unittest.TestCase):

    def test_reverse_domain_namespaces(self):
        for value in ["org.apache.commons", "com.example", "net.sf.json-lib", "io.jenkins.plugins"]:
            with self.subTest(value=value):
                self.assertTrue(starts_with_domain(value))

    def test_plain_words_do_not_match(self):
        """Test the prefix must end at a boundary for undotted words."""
        for value in ["organization", "company", "network", "ionic", "Acme Corp"]:
            with self.subTest(value=value):
                self.assertFalse(starts_with_domain(value))

    def test_case_sensitive(self):
        self.assertFalse(starts_with_domain("Org.apache"))
        self.assertFalse(starts_with_domain("COM.example"))

    def test_bare_prefix(self):
        self.assertFalse(starts_with_domain("org"))
        self.assertFalse(starts_with_domain(""))

    def test_dotted_value_led_by_prefix(self):
        """Test dotted values such as commons.io are treated as namespaces."""
        self.assertTrue(starts_with_domain("commons.io"))

    def test_free_text_with_period_is_not_a_namespace(self):
        """Test prefix-led vendor names with spaces or commas before a period do not match."""
        for value in ["comScore, Inc.", "iolo technologies, LLC."]:
            with self.subTest(value=value):
                self.assertFalse(starts_with_domain(value))

    def test_leading_whitespace_not_trimmed(self):
        self.assertFalse(starts_with_domain(" org.apache"))

    def test_non_string(self):
        self.assertFalse(starts_with_domain(None))


if __name__ == "__main__":
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    suite.addTests(loader.loadTestsFromTestCase(TestNameNormalization))
    suite.addTests(loader.loadTestsFromTestCase(TestTitleNormalization))
    suite.addTests(loader.loadTestsFromTestCase(TestASCIIFolding))
    suite.addTests(loader.loadTestsFromTestCase(TestDomainClassifier))

    result = unittest.TextTestRunner(verbosity=2).run(suite)
    passed = result.testsRun - len(result.failures) - len(result.errors)

    print(f"\nTEST_RESULTS: PASSED={passed} TOTAL={result.testsRun} SUITE=\"Normalization\"")
    sys.exit(0 if result.wasSuccessful() else 1)
