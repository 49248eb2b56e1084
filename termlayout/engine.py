"""
Layout entry point.

``layout()`` runs a complete pass over a widget tree: sizes bottom-up, then
rectangles top-down, then collects the fill directives. A pass either returns
a complete ``LayoutResult`` or raises; nothing is kept between passes, so the
same tree and extent always produce an equal result.
"""

from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, Optional

from .constants import SETTINGS_FILE
from .fill import FillDirective
from .geometry import UNBOUNDED, Extent, Rect, Size
from .measure import MeasureFunction, layout_context, load_layout_context
from .placement import RectangleAssigner
from .sizing import SizeResolver
from .widgets import Widget, iter_preorder

logger = logging.getLogger(__name__)


class LayoutResult(NamedTuple):
	rects: dict[tuple[int, ...], Rect]
	sizes: dict[tuple[int, ...], Size]
	fills: tuple[FillDirective, ...]

	def rect_of(self, path=()) -> Rect:
		return self.rects[tuple(path)]

	def size_of(self, path=()) -> Size:
		return self.sizes[tuple(path)]

	def iter_rects(self) -> Iterator[tuple[tuple[int, ...], Rect]]:
		"""Yield ``(path, rect)`` pairs in pre-order (parents before children)."""
		yield from self.rects.items()


def layout(root: Widget, width: Extent, height: Extent, measure: Optional[MeasureFunction] = None) -> LayoutResult:
	"""Lay out a resolved widget tree inside ``width`` x ``height`` cells.

	Args:
		root: The root widget
		width: Available width in cells, or UNBOUNDED
		height: Available height in cells, or UNBOUNDED
		measure: Measurement function for leaf content; defaults to the
			current layout context's ``measure``

	Returns:
		LayoutResult: rectangles and sizes keyed by tree path, plus fill directives

	Raises:
		MeasurementError: if a leaf cannot be measured
	"""
	for name, extent in (('width', width), ('height', height)):
		if extent is not UNBOUNDED and (isinstance(extent, bool) or not isinstance(extent, int) or extent < 0):
			raise ValueError(f"Available {name} must be a non-negative integer or UNBOUNDED, got {extent!r}")

	if measure is None:
		measure = layout_context().measure

	resolver = SizeResolver(measure)
	root_size = resolver.resolve(root, (), (width, height))

	# The root's box is the whole extent; unbounded dimensions use the resolved size
	root_rect = Rect(0, 0, root_size.width if width is UNBOUNDED else width,
					root_size.height if height is UNBOUNDED else height)

	assigner = RectangleAssigner(resolver.sizes)
	assigner.position_at(root, (), root_rect)

	logger.debug("Laid out %d widget(s) in %r with %d fill directive(s)",
				len(assigner.rects), root_rect, len(assigner.fills))
	return LayoutResult(assigner.rects, resolver.sizes, tuple(assigner.fills))

# -------

def dump_layout(root: Widget, result: LayoutResult, indent="  ") -> str:
	"""Format every widget's rectangle as an indented listing."""
	lines = []
	for path, widget in iter_preorder(root):
		x, y, w, h = result.rect_of(path)
		lines.append(f"{indent * (len(path) + 1)}{type(widget).__name__}: x={x}, y={y}, width={w}, height={h}")
	return "\n".join(lines)

def render_fills(result: LayoutResult, width: int, height: int, blank=" ") -> list[str]:
	"""Paint only the fill directives onto a blank grid, for inspection."""
	grid = [[blank] * width for _ in range(height)]
	for directive in result.fills:
		for x, y, char in directive.cells():
			if 0 <= x < width and 0 <= y < height:
				grid[y][x] = char
	return ["".join(row) for row in grid]

# -------
# Demo
# -------

def build_demo_layout():
	"""A bordered panel with a title, a filled expand and a footer."""
	from .widgets import Border, Container, Expand, Padding, Spacer, Stack, Text

	return Container(
		Border(
			Stack.vertical(
				Text("Hello"),
				Expand(fill="+-"),
				# One row: the spacer would otherwise take the full panel height
				Container(
					Stack.horizontal(
						Padding(0, Text("OK"), right=1),
						Spacer(),
						Text("Cancel"),
					),
					height=1,
				),
			),
		),
		width=20, height=8,
	)

def run_demo(settings_file=SETTINGS_FILE):
	context = load_layout_context(settings_file)
	root = build_demo_layout()

	print("Layout Engine Demo")
	print("==================")
	print(f"Measuring with {context.settings}")

	for width, height in [(20, 8), (12, 6), (40, UNBOUNDED)]:
		print(f"\nLayout at {width}x{height}:")
		result = layout(root, width, height)
		print(dump_layout(root, result))
		root_rect = result.rect_of()
		for row in render_fills(result, root_rect.width, root_rect.height):
			print(f"  |{row}|")

if __name__ == "__main__":
	run_demo()
