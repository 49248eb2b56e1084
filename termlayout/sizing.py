"""
Size resolution.

The resolver walks the tree bottom-up: every widget is given the extent its
parent can offer (width and height, either may be UNBOUNDED), sizes its
children first and then settles on its own size, never larger than the extent.
Stacks measure their fixed children one after the other, each taking from the
running remainder, and then let ``distribute_space`` share what is left
between their Expand and Spacer children.

Sizes are recorded per tree path; widgets themselves are never modified.
"""

from __future__ import annotations

import logging

from .constants import BORDER_INSET
from .distribute import distribute_space, effective_axis, participates
from .exceptions import MeasurementError
from .geometry import UNBOUNDED, Axis, Size, clamp_size, clamp_to_extent, shrink_extent
from .widgets import (
	Border, Canvas, ComponentSlot, Container, Expand, Padding, Span, Spacer,
	Stack, Text, Widget, ZStack,
)

logger = logging.getLogger(__name__)


class SizeResolver:
	def __init__(self, measure):
		self.measure = measure
		self.sizes: dict[tuple[int, ...], Size] = {}

	def resolve(self, widget: Widget, path: tuple[int, ...], extents, stack_axis: int | None = None) -> Size:
		"""Compute and record the size of ``widget`` and its whole subtree.

		Args:
			widget: The widget to size
			path: Its tree path
			extents: (width, height) upper bounds, each an int or UNBOUNDED
			stack_axis: Axis of the nearest enclosing Stack, if any
		"""
		if isinstance(widget, Stack):
			size = self._size_stack(widget, path, extents)
		elif isinstance(widget, ZStack):
			size = self._size_zstack(widget, path, extents, stack_axis)
		elif isinstance(widget, Border):
			size = self._size_inset(widget, path, extents, stack_axis, (BORDER_INSET * 2,) * 2)
		elif isinstance(widget, Padding):
			size = self._size_inset(widget, path, extents, stack_axis, (widget.horizontal, widget.vertical))
		elif isinstance(widget, Container):
			size = self._size_container(widget, path, extents, stack_axis)
		elif isinstance(widget, ComponentSlot):
			size = self._size_passthrough(widget, path, extents, stack_axis)
		elif isinstance(widget, Text):
			size = self._size_text(widget, path, extents)
		elif isinstance(widget, Span):
			size = self._measure(widget, path, extents[0])
		elif isinstance(widget, Expand):
			size = self._size_free_expand(widget, path, extents, stack_axis)
		elif isinstance(widget, Spacer):
			# Outside a stack there is no leftover pool to draw from
			logger.debug("Spacer at %r is not a stack child; sized 0x0", path)
			size = Size(0, 0)
		else:
			raise TypeError(f"Unsupported widget type: {type(widget).__name__}")

		size = clamp_size(size, extents)
		self.sizes[path] = size
		return size

	def _measure(self, widget, path, available_width) -> Size:
		"""Ask the measurement collaborator for a leaf's size."""
		try:
			measured = self.measure(widget, available_width)
		except MeasurementError as e:
			if e.path == path:
				raise
			raise MeasurementError(e.reason, path, e.details) from e
		except Exception as e:
			raise MeasurementError(f"{type(e).__name__}: {e}", path) from e

		try:
			width, height = measured
		except (TypeError, ValueError):
			raise MeasurementError(f"expected a (width, height) pair, got {measured!r}", path) from None
		for value in (width, height):
			if isinstance(value, bool) or not isinstance(value, int) or value < 0:
				raise MeasurementError(f"sizes must be non-negative integers, got {measured!r}", path)
		return Size(width, height)

	# --- single-child widgets

	def _size_child(self, widget, path, extents, stack_axis) -> Size | None:
		child = widget.children[0] if widget.children else None
		if child is None:
			return None
		return self.resolve(child, path + (0,), extents, stack_axis)

	def _size_passthrough(self, widget, path, extents, stack_axis) -> Size:
		return self._size_child(widget, path, extents, stack_axis) or Size(0, 0)

	def _size_inset(self, widget, path, extents, stack_axis, inset) -> Size:
		"""Border and Padding: the child gets the extent minus the inset, then the inset is added back."""
		child_extents = (shrink_extent(extents[0], inset[0]), shrink_extent(extents[1], inset[1]))
		child_size = self._size_child(widget, path, child_extents, stack_axis) or Size(0, 0)
		return Size(child_size[0] + inset[0], child_size[1] + inset[1])

	def _size_container(self, widget: Container, path, extents, stack_axis) -> Size:
		explicit = [widget.width, widget.height]
		child_extents = [extents[axis] if explicit[axis] is None else clamp_to_extent(explicit[axis], extents[axis])
						for axis in (0, 1)]
		child_size = self._size_child(widget, path, child_extents, stack_axis)

		if child_size is None and isinstance(widget, Canvas) and None in explicit:
			child_size = self._measure(widget, path, child_extents[0])

		size = [0, 0]
		for axis in (0, 1):
			if explicit[axis] is not None:
				size[axis] = explicit[axis]
			elif child_size is not None:
				size[axis] = child_size[axis]
		return Size(*size)

	# --- text

	def _size_text(self, widget: Text, path, extents) -> Size:
		size = clamp_size(self._measure(widget, path, extents[0]), extents)
		# Inline spans are measured for the renderer, inside the text's own box
		for index, span in enumerate(widget.children):
			self.resolve(span, path + (index,), size)
		return size

	# --- multi-child widgets

	def _size_zstack(self, widget: ZStack, path, extents, stack_axis) -> Size:
		child_sizes = [self.resolve(child, path + (index,), extents, stack_axis)
					for index, child in enumerate(widget.children)]
		# Overlays take the whole extent, or grow to the largest child when unbounded
		return Size(*(
			extents[axis] if extents[axis] is not UNBOUNDED else max((s[axis] for s in child_sizes), default=0)
			for axis in (0, 1)
		))

	def _size_stack(self, widget: Stack, path, extents) -> Size:
		axis = widget.axis
		cross = 1 - axis
		cross_extent = extents[cross]
		child_sizes: list[Size | None] = [None] * len(widget.children)
		expands: list[int] = []
		spacers: list[int] = []

		# Step 1: measure fixed children in order, each from the running remainder
		remaining = extents[axis]
		consumed = 0
		for index, child in enumerate(widget.children):
			if participates(child, axis):
				(expands if isinstance(child, Expand) else spacers).append(index)
				continue
			child_extents = Size.along(axis, remaining, cross_extent)
			child_size = self.resolve(child, path + (index,), child_extents, axis)
			child_sizes[index] = child_size
			consumed += child_size[axis]
			remaining = shrink_extent(remaining, child_size[axis])

		# Step 2: share the rest between expands, then spacers
		distribution = distribute_space(
			extents[axis], consumed,
			[widget.children[index].factor for index in expands],
			[widget.children[index].factor for index in spacers],
		)

		# Distributed children span the stack's full cross extent
		if cross_extent is not UNBOUNDED:
			full_cross = cross_extent
		else:
			full_cross = max((size[cross] for size in child_sizes if size is not None), default=0)

		for index, share in zip(expands, distribution.expand_sizes):
			child_sizes[index] = self._size_stack_expand(
				widget.children[index], path + (index,), axis, extents, share, full_cross)

		for index, share in zip(spacers, distribution.spacer_sizes):
			child_sizes[index] = self.sizes[path + (index,)] = Size.along(axis, share, full_cross)

		return Size.along(
			axis,
			sum(size[axis] for size in child_sizes),
			max((size[cross] for size in child_sizes), default=0),
		)

	def _size_stack_expand(self, widget: Expand, path, axis, extents, share, full_cross) -> Size:
		"""Size an Expand that takes part in its stack's distribution."""
		cross = 1 - axis
		bounded = [extent is not UNBOUNDED for extent in extents]
		box_extents = Size.along(axis, share if bounded[axis] else UNBOUNDED,
								full_cross if bounded[cross] else UNBOUNDED)

		content = self._size_child(widget, path, box_extents, axis)
		if content is None:
			content = Size(0, 0)

		# An unbounded stack passes the child's own size through
		main = share if bounded[axis] else content[axis]
		cross_size = full_cross if bounded[cross] else max(full_cross, content[cross])
		size = Size.along(axis, main, cross_size)

		if widget.child is not None and size != box_extents:
			# Settle the child against the final box
			self._size_child(widget, path, size, axis)

		self.sizes[path] = size
		return size

	def _size_free_expand(self, widget: Expand, path, extents, stack_axis) -> Size:
		"""Size an Expand that is not sharing a stack's leftover space.

		It fills the available extent along its effective axis (both axes when
		it has none) and takes its content's size across it. Inside a stack of
		the other axis there is nothing for it to claim: it is zero sized along
		its own axis and a fixed child of its content's size along the stack's.
		"""
		axis = effective_axis(widget, stack_axis)
		content = self._size_child(widget, path, extents, stack_axis) or Size(0, 0)

		if stack_axis is not None and axis != stack_axis:
			logger.debug("Expand at %r grows along %s inside a %s stack; zero sized along its own axis",
						path, Axis.name(axis), Axis.name(stack_axis))
			size = Size.along(stack_axis, content[stack_axis], 0)
		else:
			size = Size(*(
				extents[dim] if (axis is None or axis == dim) and extents[dim] is not UNBOUNDED else content[dim]
				for dim in (0, 1)
			))
		if widget.child is not None and size != content:
			self._size_child(widget, path, size, stack_axis)
		return size
