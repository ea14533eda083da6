"""Tests for the keyword, constant and identifier tables."""

import unittest

import signalc.token_kinds as token_kinds
from signalc.tables import Tables, TableError, TokenRange


class TablesTests(unittest.TestCase):
    """Tests for code assignment and classification."""

    def setUp(self):
        self.tables = Tables()

    def test_keywords_bootstrapped(self):
        """Test the SIGNAL keywords are registered with their codes."""
        for kind in token_kinds.keyword_kinds:
            self.assertEqual(
                self.tables.find(TokenRange.KEYWORDS, kind.text_repr),
                kind.code)
            self.assertEqual(self.tables.name(kind.code), kind.text_repr)

        self.assertEqual(self.tables.find(TokenRange.KEYWORDS, "PROGRAM"),
                         301)
        self.assertEqual(self.tables.find(TokenRange.KEYWORDS, "LABEL"),
                         305)

    def test_codes_assigned_per_range(self):
        """Test new names get the next code of their range."""
        self.assertEqual(self.tables.add(TokenRange.IDENTIFIERS, "x"), 1001)
        self.assertEqual(self.tables.add(TokenRange.IDENTIFIERS, "y"), 1002)
        self.assertEqual(self.tables.add(TokenRange.CONSTANTS, "10"), 501)
        self.assertEqual(self.tables.add(TokenRange.KEYWORDS, "GOTO"), 306)

    def test_same_name_reuses_code(self):
        """Test registering a name twice returns its first code."""
        first = self.tables.add(TokenRange.IDENTIFIERS, "x")
        self.tables.add(TokenRange.IDENTIFIERS, "y")
        self.assertEqual(self.tables.add(TokenRange.IDENTIFIERS, "x"), first)

    def test_same_name_in_different_ranges(self):
        """Test a name may appear independently in two ranges."""
        ident = self.tables.add(TokenRange.IDENTIFIERS, "10")
        const = self.tables.add(TokenRange.CONSTANTS, "10")
        self.assertNotEqual(ident, const)
        self.assertEqual(self.tables.range_of(ident), TokenRange.IDENTIFIERS)
        self.assertEqual(self.tables.range_of(const), TokenRange.CONSTANTS)

    def test_range_of(self):
        """Test classification of registered codes."""
        x = self.tables.add(TokenRange.IDENTIFIERS, "x")
        ten = self.tables.add(TokenRange.CONSTANTS, "10")
        self.assertEqual(self.tables.range_of(301), TokenRange.KEYWORDS)
        self.assertEqual(self.tables.range_of(x), TokenRange.IDENTIFIERS)
        self.assertEqual(self.tables.range_of(ten), TokenRange.CONSTANTS)

    def test_unregistered_code_has_no_range(self):
        """Test unknown codes classify as NONE rather than failing."""
        self.assertEqual(self.tables.range_of(ord(";")), TokenRange.NONE)
        self.assertEqual(self.tables.range_of(1500), TokenRange.NONE)
        self.assertEqual(self.tables.range_of(400), TokenRange.NONE)

    def test_strict_lookups_raise(self):
        """Test strict lookups of unknown codes raise TableError."""
        with self.assertRaises(TableError):
            self.tables.get_range(ord(";"))
        with self.assertRaises(TableError):
            self.tables.name(1001)
        with self.assertRaises(LookupError):
            self.tables.name(999)

    def test_display_name(self):
        """Test delimiters are displayed as their character."""
        self.assertEqual(self.tables.display_name(ord(";")), ";")
        self.assertEqual(self.tables.display_name(303), "BEGIN")

    def test_explicit_code_outside_range(self):
        """Test an explicit code must lie in the requested range."""
        with self.assertRaises(TableError):
            self.tables.add(TokenRange.KEYWORDS, "GOTO", 501)
        with self.assertRaises(TableError):
            self.tables.add(TokenRange.KEYWORDS, "GOTO", 301)

    def test_no_range(self):
        """Test names cannot be registered without a range."""
        with self.assertRaises(TableError):
            self.tables.add(TokenRange.NONE, ";")

    def test_keyword_range_exhausted(self):
        """Test a full range raises TableError."""
        tables = Tables(keywords=[])
        for i in range(200):
            tables.add(TokenRange.KEYWORDS, f"K{i}")
        with self.assertRaises(TableError):
            tables.add(TokenRange.KEYWORDS, "ONEMORE")

    def test_custom_keywords(self):
        """Test tables can be created without the default keywords."""
        tables = Tables(keywords=[])
        self.assertIsNone(tables.find(TokenRange.KEYWORDS, "PROGRAM"))
        self.assertEqual(tables.range_of(301), TokenRange.NONE)
        self.assertEqual(tables.tokens, [])
