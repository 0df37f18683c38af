"""
Test cases for page selection parsing.
"""

import unittest

from pdfconvert.exceptions import InvalidPageExpression
from pdfconvert.pages import describe_selection, parse_page_expression, resolve_page_selection


class TestParsePageExpression(unittest.TestCase):
    """Test cases for parse_page_expression."""

    def test_single_pages(self):
        self.assertEqual(parse_page_expression("1,2,3"), [1, 2, 3])

    def test_range(self):
        self.assertEqual(parse_page_expression("1-5"), [1, 2, 3, 4, 5])

    def test_mixed_pages_and_ranges(self):
        self.assertEqual(parse_page_expression("1,3-5,7"), [1, 3, 4, 5, 7])

    def test_duplicates_are_removed(self):
        self.assertEqual(parse_page_expression("1,1,2-3,3"), [1, 2, 3])

    def test_overlapping_ranges_are_merged(self):
        self.assertEqual(parse_page_expression("4-6,1-5"), [1, 2, 3, 4, 5, 6])

    def test_result_is_sorted(self):
        self.assertEqual(parse_page_expression("9,2,5-6"), [2, 5, 6, 9])

    def test_whitespace_is_ignored(self):
        self.assertEqual(parse_page_expression(" 1 , 3 - 4 ,  8"), [1, 3, 4, 8])

    def test_single_page_range(self):
        self.assertEqual(parse_page_expression("4-4"), [4])

    def test_reversed_range_fails(self):
        with self.assertRaises(InvalidPageExpression):
            parse_page_expression("5-2")

    def test_range_starting_at_zero_fails(self):
        with self.assertRaises(InvalidPageExpression):
            parse_page_expression("0-3")

    def test_page_zero_fails(self):
        with self.assertRaises(InvalidPageExpression):
            parse_page_expression("0")

    def test_negative_page_fails(self):
        with self.assertRaises(InvalidPageExpression):
            parse_page_expression("-2")

    def test_non_numeric_fails(self):
        with self.assertRaises(InvalidPageExpression):
            parse_page_expression("abc")

    def test_non_numeric_range_bound_fails(self):
        with self.assertRaises(InvalidPageExpression):
            parse_page_expression("1-x")

    def test_open_range_fails(self):
        with self.assertRaises(InvalidPageExpression):
            parse_page_expression("3-")

    def test_empty_token_fails(self):
        with self.assertRaises(InvalidPageExpression):
            parse_page_expression("1,,2")

    def test_error_message_names_token(self):
        with self.assertRaises(InvalidPageExpression) as ctx:
            parse_page_expression("1,abc")
        self.assertIn("abc", str(ctx.exception))

    def test_parsing_is_repeatable(self):
        expression = "7,1-3,2,10-12"
        self.assertEqual(parse_page_expression(expression), parse_page_expression(expression))

    def test_output_strictly_ascending(self):
        for expression in ["3,1,2", "1-10,5-15", "20,1,1,1", "2-4,4-6,6"]:
            pages = parse_page_expression(expression)
            self.assertTrue(all(a < b for a, b in zip(pages, pages[1:])), expression)


class TestResolvePageSelection(unittest.TestCase):
    """Blank expressions select every page."""

    def test_empty_string_means_all_pages(self):
        self.assertEqual(resolve_page_selection(""), [])

    def test_whitespace_means_all_pages(self):
        self.assertEqual(resolve_page_selection("   "), [])

    def test_none_means_all_pages(self):
        self.assertEqual(resolve_page_selection(None), [])

    def test_expression_is_parsed(self):
        self.assertEqual(resolve_page_selection("2-3"), [2, 3])


class TestDescribeSelection(unittest.TestCase):

    def test_all_pages(self):
        self.assertEqual(describe_selection([]), "all")

    def test_compacts_runs(self):
        self.assertEqual(describe_selection([1, 2, 3, 7, 9, 10]), "1-3,7,9-10")

    def test_single_page(self):
        self.assertEqual(describe_selection([4]), "4")


if __name__ == '__main__':
    unittest.main()
