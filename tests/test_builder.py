"""Unit tests for building widget trees from resolved input."""

import unittest
import json
import os
import sys
import tempfile

# Add the project root to the path so we can import termlayout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from termlayout.builder import build_widget_tree, load_widget_tree
from termlayout.exceptions import InvalidFactor, InvalidWidgetTree
from termlayout.geometry import Axis
from termlayout.widgets import (
	Border, Canvas, ComponentSlot, Container, Expand, Padding, Span, Spacer,
	Stack, Text, ZStack,
)


class TestBuildWidgetTree(unittest.TestCase):
	"""Test conversion of nested mappings into widgets."""
	
	def test_stack_with_expand(self):
		"""Layout attributes become typed fields; the rest stay as attributes."""
		tree = build_widget_tree({"kind": "vstack", "children": [
			{"kind": "text", "text": "Hello"},
			{"kind": "expand", "attributes": {"factor": 2, "fill": "+-", "foreground": "blue"}},
		]})
		self.assertIsInstance(tree, Stack)
		self.assertEqual(tree.axis, Axis.VERTICAL)
		text, expand = tree.children
		self.assertIsInstance(text, Text)
		self.assertEqual(text.text, "Hello")
		self.assertIsInstance(expand, Expand)
		self.assertEqual((expand.factor, expand.fill), (2, "+-"))
		self.assertEqual(dict(expand.attributes), {"foreground": "blue"})
	
	def test_every_kind(self):
		"""Each known kind builds the matching widget class."""
		expected = {
			"vstack": Stack, "hstack": Stack, "stack": Stack, "zstack": ZStack,
			"border": Border, "padding": Padding, "container": Container,
			"canvas": Canvas, "component": ComponentSlot, "text": Text,
			"span": Span, "expand": Expand, "spacer": Spacer,
		}
		for kind, widget_class in expected.items():
			with self.subTest(kind=kind):
				self.assertIs(type(build_widget_tree({"kind": kind})), widget_class)
	
	def test_layout_attributes(self):
		"""Stack axis, padding sides, dimensions and names are read from attributes."""
		self.assertEqual(build_widget_tree({"kind": "hstack"}).axis, Axis.HORIZONTAL)
		self.assertEqual(build_widget_tree({"kind": "stack", "attributes": {"axis": "horz"}}).axis, Axis.HORIZONTAL)
		
		padding = build_widget_tree({"kind": "padding", "attributes": {"padding": 1, "left": 3}})
		self.assertEqual((padding.left, padding.right, padding.top, padding.bottom), (3, 1, 1, 1))
		
		container = build_widget_tree({"kind": "container", "attributes": {"width": 10, "border_color": "red"}})
		self.assertEqual((container.width, container.height), (10, None))
		self.assertEqual(dict(container.attributes), {"border_color": "red"})
		
		slot = build_widget_tree({"kind": "component", "attributes": {"name": "status"},
								"children": [{"kind": "text", "text": "ok"}]})
		self.assertEqual(slot.name, "status")
		self.assertEqual(slot.child.text, "ok")
	
	def test_text_with_spans(self):
		text = build_widget_tree({"kind": "text", "text": "Hello ", "attributes": {"wrap": "overflow"},
								"children": [{"kind": "span", "text": "world"}]})
		self.assertEqual(text.content, "Hello world")
		self.assertEqual(text.wrap, "overflow")
	
	def test_unknown_kind(self):
		"""Unknown kinds are reported with their tree path."""
		with self.assertRaises(InvalidWidgetTree) as cm:
			build_widget_tree({"kind": "vstack", "children": [{"kind": "button"}]})
		self.assertIn("'button'", str(cm.exception))
		self.assertIn("root/0", str(cm.exception))
	
	def test_invalid_factor(self):
		"""A bad factor keeps its error type and gains the tree path."""
		with self.assertRaises(InvalidFactor) as cm:
			build_widget_tree({"kind": "vstack", "children": [
				{"kind": "text", "text": "a"},
				{"kind": "spacer", "attributes": {"factor": -2}},
			]})
		self.assertIn("(at root/1)", str(cm.exception))
		self.assertEqual(cm.exception.details["path"], (1,))
		
		with self.assertRaises(InvalidFactor):
			build_widget_tree({"kind": "expand", "attributes": {"factor": "2"}})
	
	def test_structural_errors(self):
		"""Too many children, children on leaves and malformed nodes are rejected."""
		bad_trees = [
			{"kind": "border", "children": [{"kind": "text"}, {"kind": "text"}]},
			{"kind": "spacer", "children": [{"kind": "text"}]},
			{"kind": "text", "children": [{"kind": "text"}]},
			{"kind": "vstack", "children": {"kind": "text"}},
			{"kind": "vstack", "children": ["text"]},
			{"kind": "padding", "attributes": {"padding": -1}},
			{"kind": "text", "text": 5},
			"vstack",
		]
		for data in bad_trees:
			with self.subTest(data=data):
				with self.assertRaises(InvalidWidgetTree):
					build_widget_tree(data)


class TestLoadWidgetTree(unittest.TestCase):
	"""Test reading resolved trees from JSON files."""
	
	def setUp(self):
		self.temp_dir = tempfile.TemporaryDirectory()
		self.tree_file = os.path.join(self.temp_dir.name, "tree.json")
	
	def tearDown(self):
		self.temp_dir.cleanup()
	
	def test_load(self):
		with open(self.tree_file, "wt", encoding="utf-8") as f:
			json.dump({"kind": "border", "children": [{"kind": "text", "text": "hi"}]}, f)
		tree = load_widget_tree(self.tree_file)
		self.assertIsInstance(tree, Border)
		self.assertEqual(tree.child.text, "hi")
	
	def test_malformed_json(self):
		with open(self.tree_file, "wt", encoding="utf-8") as f:
			f.write("{\"kind\": ")
		with self.assertRaises(InvalidWidgetTree):
			load_widget_tree(self.tree_file)


if __name__ == '__main__':
	unittest.main()
