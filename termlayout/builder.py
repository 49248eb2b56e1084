"""
Building widget trees from resolved input.

The template layer hands over a nested structure of plain data once every
expression, binding and theme token has been evaluated::

	{"kind": "vstack", "children": [
		{"kind": "text", "text": "Hello"},
		{"kind": "expand", "attributes": {"factor": 2, "fill": "+-"}},
	]}

Layout attributes are converted to typed widget fields here, so invalid
values are rejected before any layout pass runs. Attributes the engine does
not interpret are kept on the widget for the renderer.
"""

from __future__ import annotations

import json
from typing import Any, Callable

from .exceptions import InvalidWidgetTree, format_path
from .geometry import Axis
from .widgets import (
	Border, Canvas, ComponentSlot, Container, Expand, Padding, Span, Spacer,
	Stack, Text, Widget, ZStack,
)

_PADDING_SIDES = ('left', 'right', 'top', 'bottom')


def _take(attributes: dict, *names) -> dict[str, Any]:
	"""Remove the named layout attributes, returning the ones present."""
	return {name: attributes.pop(name) for name in names if name in attributes}

def _single_child(children):
	if len(children) > 1:
		raise InvalidWidgetTree(f"Expected at most one child, got {len(children)}")
	return children[0] if children else None

def _build_stack(axis):
	def build(attributes, children, text):
		return Stack(axis=axis, children=children, attributes=attributes)
	return build

def _build_any_stack(attributes, children, text):
	axis = attributes.pop('axis', Axis.VERTICAL)
	return Stack(axis=axis, children=children, attributes=attributes)

def _build_zstack(attributes, children, text):
	return ZStack(*children, attributes=attributes)

def _build_border(attributes, children, text):
	return Border(_single_child(children), attributes=attributes)

def _build_padding(attributes, children, text):
	layout = _take(attributes, 'padding', *_PADDING_SIDES)
	return Padding(layout.pop('padding', 0), _single_child(children), attributes=attributes, **layout)

def _build_sized(widget_class):
	def build(attributes, children, text):
		return widget_class(_single_child(children), attributes=attributes, **_take(attributes, 'width', 'height'))
	return build

def _build_component(attributes, children, text):
	return ComponentSlot(_single_child(children), attributes=attributes, **_take(attributes, 'name'))

def _build_text(attributes, children, text):
	return Text(text, *children, attributes=attributes, **_take(attributes, 'wrap'))

def _build_span(attributes, children, text):
	if children:
		raise InvalidWidgetTree("Span does not accept children")
	return Span(text, attributes=attributes)

def _build_expand(attributes, children, text):
	return Expand(_single_child(children), attributes=attributes, **_take(attributes, 'factor', 'axis', 'fill'))

def _build_spacer(attributes, children, text):
	if children:
		raise InvalidWidgetTree("Spacer does not accept children")
	return Spacer(attributes=attributes, **_take(attributes, 'factor'))


WIDGET_BUILDERS: dict[str, Callable[[dict, list, str], Widget]] = {
	'vstack': _build_stack(Axis.VERTICAL),
	'hstack': _build_stack(Axis.HORIZONTAL),
	'stack': _build_any_stack,
	'zstack': _build_zstack,
	'border': _build_border,
	'padding': _build_padding,
	'container': _build_sized(Container),
	'canvas': _build_sized(Canvas),
	'component': _build_component,
	'text': _build_text,
	'span': _build_span,
	'expand': _build_expand,
	'spacer': _build_spacer,
}


def build_widget_tree(data, path: tuple[int, ...] = ()) -> Widget:
	"""Convert a resolved nested mapping into a validated widget tree.

	Raises:
		InvalidWidgetTree: for unknown kinds, malformed nodes or invalid
			attribute values; the message names the offending tree path
	"""
	if not isinstance(data, dict):
		raise InvalidWidgetTree(f"Widget at {format_path(path)} must be a mapping, got {type(data).__name__}")

	kind = data.get('kind')
	builder = WIDGET_BUILDERS.get(kind)
	if builder is None:
		raise InvalidWidgetTree(f"Unknown widget kind {kind!r} at {format_path(path)}")

	attributes = data.get('attributes') or {}
	children_data = data.get('children') or []
	text = data.get('text', "")
	if not isinstance(attributes, dict) or not isinstance(children_data, list):
		raise InvalidWidgetTree(f"Malformed {kind} widget at {format_path(path)}: "
								f"attributes must be a mapping and children a list")

	children = [build_widget_tree(child, path + (index,)) for index, child in enumerate(children_data)]
	try:
		return builder(dict(attributes), children, text)
	except InvalidWidgetTree as e:
		# Re-raise with the tree path, keeping the original error type
		e.args = (f"{e.args[0]} (at {format_path(path)})",) + e.args[1:]
		e.details.setdefault('path', path)
		raise
	except TypeError as e:
		raise InvalidWidgetTree(f"Invalid attributes for {kind} widget at {format_path(path)}: {e}",
								{'path': path}) from e

def load_widget_tree(tree_file) -> Widget:
	"""Read a resolved widget tree from a JSON file."""
	with open(tree_file, "rt", encoding="utf-8") as f:
		try:
			data = json.load(f)
		except json.JSONDecodeError as e:
			raise InvalidWidgetTree(f"Cannot parse widget tree {tree_file}: {e}") from e
	return build_widget_tree(data)
