"""
Rectangle assignment.

A top-down walk that turns the sizes recorded by the ``SizeResolver`` into
absolute rectangles. Every widget receives a rectangle from its parent and
hands rectangles to its children:

- Stacks place children one after another along their axis, starting at their
  own origin, each child keeping its resolved size
- ZStacks place every child at their own origin (children keep their order, so
  later children are on top)
- Border and Padding give their child their own rectangle minus the inset
- Container and Canvas give their child their own rectangle, cut to any
  explicit width or height; ComponentSlot passes its rectangle through
- Expand places its child at its origin, at the child's resolved size, and
  reports the cells left over when it has a fill pattern
- Text shares its rectangle with its inline spans
"""

from __future__ import annotations

from .constants import BORDER_INSET
from .fill import FillDirective, fill_directive
from .geometry import Rect, Size
from .widgets import (
	Border, ComponentSlot, Container, Expand, Padding, Stack, Text,
	Widget, ZStack,
)


class RectangleAssigner:
	def __init__(self, sizes: dict[tuple[int, ...], Size]):
		self.sizes = sizes
		self.rects: dict[tuple[int, ...], Rect] = {}
		self.fills: list[FillDirective] = []

	def position_at(self, widget: Widget, path: tuple[int, ...], rect: Rect) -> None:
		"""Assign ``rect`` to ``widget`` and position all of its descendants."""
		self.rects[path] = rect

		if isinstance(widget, Stack):
			self._position_stack(widget, path, rect)
		elif isinstance(widget, ZStack):
			for index, child in enumerate(widget.children):
				child_path = path + (index,)
				self.position_at(child, child_path, Rect.from_pos_size(rect.pos, self.sizes[child_path]))
		elif isinstance(widget, Border):
			self._position_child(widget, path, rect.inset(*(BORDER_INSET,) * 4))
		elif isinstance(widget, Padding):
			self._position_child(widget, path, rect.inset(widget.left, widget.right, widget.top, widget.bottom))
		elif isinstance(widget, Container):
			self._position_child(widget, path, Rect(
				rect.x, rect.y,
				rect.width if widget.width is None else min(widget.width, rect.width),
				rect.height if widget.height is None else min(widget.height, rect.height),
			))
		elif isinstance(widget, ComponentSlot):
			self._position_child(widget, path, rect)
		elif isinstance(widget, Expand):
			self._position_expand(widget, path, rect)
		elif isinstance(widget, Text):
			for index, span in enumerate(widget.children):
				self.position_at(span, path + (index,), rect)

	def _position_child(self, widget, path, rect):
		if widget.children:
			self.position_at(widget.children[0], path + (0,), rect)

	def _position_stack(self, widget: Stack, path, rect: Rect) -> None:
		axis = widget.axis
		cross = 1 - axis
		current_axis = rect.pos[axis]

		for index, child in enumerate(widget.children):
			child_path = path + (index,)
			child_size = self.sizes[child_path]

			# Build position tuple in correct order [x, y]
			pos = [0, 0]
			pos[axis] = current_axis
			pos[cross] = rect.pos[cross]

			self.position_at(child, child_path, Rect.from_pos_size(pos, child_size))
			current_axis += child_size[axis]

	def _position_expand(self, widget: Expand, path, rect: Rect) -> None:
		content_rect = None
		if widget.child is not None:
			child_size = self.sizes[path + (0,)]
			content_rect = Rect(rect.x, rect.y, min(child_size.width, rect.width), min(child_size.height, rect.height))

		directive = fill_directive(path, rect, content_rect, widget.fill)
		if directive is not None:
			self.fills.append(directive)

		if content_rect is not None:
			self.position_at(widget.child, path + (0,), content_rect)
