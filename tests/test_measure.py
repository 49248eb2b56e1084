"""Unit tests for the default measurement context and the plugin system."""

import unittest
import json
import os
import sys
import tempfile

# Add the project root to the path so we can import termlayout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from termlayout import measure
from termlayout.exceptions import MeasurementError
from termlayout.geometry import UNBOUNDED
from termlayout.measure import (
	LayoutPluginContext, layout_context, layout_context_class, load_layout_context, set_layout_context,
)
from termlayout.settings import LayoutSettings
from termlayout.widgets import Canvas, Span, Spacer, Text


class TestTextWidth(unittest.TestCase):
	"""Test cell widths of characters and lines."""
	
	def setUp(self):
		self.context = LayoutPluginContext()
	
	def test_ascii(self):
		self.assertEqual(self.context.measure_text_width("abc"), 3)
		self.assertEqual(self.context.measure_text_width(""), 0)
	
	def test_wide_characters(self):
		"""East Asian wide characters take two cells."""
		self.assertEqual(self.context.measure_text_width("世界"), 4)
	
	def test_combining_characters(self):
		"""Combining marks take no cells of their own."""
		self.assertEqual(self.context.measure_text_width("e\u0301"), 1)
	
	def test_ambiguous_width(self):
		"""Ambiguous characters are narrow unless configured otherwise."""
		self.assertEqual(self.context.measure_text_width("±"), 1)
		wide = LayoutPluginContext(LayoutSettings(ambiguous_wide=True))
		self.assertEqual(wide.measure_text_width("±"), 2)


class TestTextExtents(unittest.TestCase):
	"""Test text wrapping and extents."""
	
	def setUp(self):
		self.context = LayoutPluginContext()
	
	def test_single_and_multi_line(self):
		self.assertEqual(self.context.get_extents("Hello", UNBOUNDED), (5, 1))
		self.assertEqual(self.context.get_extents("a\nbcd", UNBOUNDED), (3, 2))
		self.assertEqual(self.context.get_extents("", 10), (0, 0))
	
	def test_word_wrap(self):
		"""Lines wrap at word boundaries when wider than the available width."""
		self.assertEqual(self.context.wrap_text("hello world foo", 11), ("hello world", "foo"))
		self.assertEqual(self.context.get_extents("hello world foo", 11), (11, 2))
		self.assertEqual(self.context.get_extents("hello world foo", 20), (15, 1))
	
	def test_long_word_is_broken(self):
		"""Words wider than the line are broken where they run out of room."""
		self.assertEqual(self.context.wrap_text("abcdefghij", 4), ("abcd", "efgh", "ij"))
	
	def test_tabs(self):
		"""Tabs expand to the configured tab stops."""
		self.assertEqual(self.context.get_extents("a\tb", UNBOUNDED), (5, 1))
		context = LayoutPluginContext(LayoutSettings(tab_width=8))
		self.assertEqual(context.get_extents("a\tb", UNBOUNDED), (9, 1))


class TestMeasure(unittest.TestCase):
	"""Test the measurement function used by the layout engine."""
	
	def setUp(self):
		self.context = LayoutPluginContext()
	
	def test_text(self):
		"""Text wraps at the available width unless it overflows."""
		self.assertEqual(self.context.measure(Text("hello world"), 5), (5, 2))
		self.assertEqual(self.context.measure(Text("hello world", wrap="overflow"), 5), (11, 1))
		self.assertEqual(self.context.measure(Text("Hello ", Span("world")), UNBOUNDED), (11, 1))
	
	def test_wrapping_disabled(self):
		context = LayoutPluginContext(LayoutSettings(wrap=False))
		self.assertEqual(context.measure(Text("hello world"), 5), (11, 1))
	
	def test_span_and_canvas(self):
		self.assertEqual(self.context.measure(Span("abc"), 10), (3, 1))
		self.assertEqual(self.context.measure(Canvas(), 10), (0, 0))
	
	def test_unmeasurable_widget(self):
		"""Widgets the engine sizes itself cannot be measured."""
		with self.assertRaises(MeasurementError):
			self.context.measure(Spacer(), 10)


class TestPluginSystem(unittest.TestCase):
	"""Test selecting the global layout context."""
	
	def setUp(self):
		self.previous = layout_context()
	
	def tearDown(self):
		set_layout_context(self.previous)
	
	def test_default_context(self):
		"""The default context is initialized when the module is imported."""
		self.assertIsInstance(layout_context(), LayoutPluginContext)
	
	def test_context_class_decorator(self):
		"""Decorating a context class installs an instance as the global context."""
		@layout_context_class
		class FixedContext(LayoutPluginContext):
			def measure_text_width(self, text):
				return len(text) * 3
		
		self.assertIsInstance(layout_context(), FixedContext)
		self.assertEqual(layout_context().measure(Text("ab"), UNBOUNDED), (6, 1))
	
	def test_context_from_settings_file(self):
		"""The installed default context measures with the settings from the file."""
		with tempfile.TemporaryDirectory() as temp_dir:
			settings_file = os.path.join(temp_dir, "termlayout.json")
			with open(settings_file, "wt", encoding="utf-8") as f:
				json.dump({"tab_width": 8, "wrap": False}, f)
			context = load_layout_context(settings_file)
		
		self.assertIs(layout_context(), context)
		self.assertEqual(context.settings, LayoutSettings(tab_width=8, wrap=False))
		self.assertEqual(layout_context().measure(Text("a\tb c"), 3), (11, 1))
	
	def test_context_without_settings_file(self):
		with tempfile.TemporaryDirectory() as temp_dir:
			context = load_layout_context(os.path.join(temp_dir, "missing.json"))
		self.assertEqual(context.settings, LayoutSettings())
		self.assertIs(layout_context(), context)
	
	def test_uninitialized_context(self):
		set_layout_context(None)
		with self.assertRaises(AssertionError):
			layout_context()
		# Module state is restored in tearDown
		self.assertIsNone(measure._layout_context)


if __name__ == '__main__':
	unittest.main()
