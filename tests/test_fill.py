"""Unit tests for fill directives."""

import unittest
import sys
import os

# Add the project root to the path so we can import termlayout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from termlayout.fill import FillDirective, fill_directive
from termlayout.geometry import Rect


class TestFillDirective(unittest.TestCase):
	"""Test the cells a fill directive describes."""
	
	def test_pattern_repeats_from_left_edge(self):
		"""The pattern restarts at the box's left edge on every row."""
		directive = FillDirective((0,), Rect(3, 1, 5, 2), None, "ab")
		self.assertEqual(directive.rows(), ["ababa", "ababa"])
		self.assertEqual(directive.cell_count, 10)
		self.assertEqual(list(directive.cells())[:3], [(3, 1, "a"), (4, 1, "b"), (5, 1, "a")])
	
	def test_content_cells_are_skipped(self):
		directive = FillDirective((0,), Rect(0, 0, 4, 2), Rect(0, 0, 2, 1), "#")
		self.assertEqual(directive.rows(), ["  ##", "####"])
		self.assertEqual(directive.cell_count, 6)
		cells = list(directive.cells())
		self.assertEqual(len(cells), 6)
		self.assertNotIn((0, 0, "#"), cells)
	
	def test_pattern_wider_than_box(self):
		"""Long patterns are cut off at the right edge."""
		directive = FillDirective((), Rect(0, 0, 3, 1), None, "+-=*")
		self.assertEqual(directive.rows(), ["+-="])
	
	def test_no_directive_without_leftover(self):
		"""Nothing is reported without a pattern or without uncovered cells."""
		self.assertIsNone(fill_directive((), Rect(0, 0, 4, 2), None, None))
		self.assertIsNone(fill_directive((), Rect(0, 0, 4, 2), None, ""))
		self.assertIsNone(fill_directive((), Rect(0, 0, 4, 2), Rect(0, 0, 4, 2), "#"))
		self.assertIsNone(fill_directive((), Rect(0, 0, 4, 0), None, "#"))
		self.assertIsNotNone(fill_directive((), Rect(0, 0, 4, 2), Rect(0, 0, 4, 1), "#"))


if __name__ == '__main__':
	unittest.main()
