"""
Fill directives for Expand widgets.

An Expand with a ``fill`` pattern asks the renderer to paint every cell of its
box that its child does not cover. The engine only describes those cells; it
never draws. The pattern is repeated left to right along each row, starting
over at the left edge of the box, and cut off at the right edge.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

from .geometry import Rect


class FillDirective(NamedTuple):
	path: tuple[int, ...]			# Tree path of the Expand
	rect: Rect						# The Expand's assigned box
	content_rect: Optional[Rect]	# Its child's box, None when it has no child
	pattern: str

	def is_content(self, x: int, y: int) -> bool:
		return self.content_rect is not None and self.content_rect.contains(x, y)

	def pattern_at(self, x: int) -> str:
		return self.pattern[(x - self.rect.x) % len(self.pattern)]

	def cells(self) -> Iterator[tuple[int, int, str]]:
		"""Yield ``(x, y, char)`` for every cell to fill, row by row."""
		for y in range(self.rect.y, self.rect.bottom):
			for x in range(self.rect.x, self.rect.right):
				if not self.is_content(x, y):
					yield (x, y, self.pattern_at(x))

	def rows(self) -> list[str]:
		"""The filled box as text, one string per row, with content cells left blank."""
		return [
			"".join(" " if self.is_content(x, y) else self.pattern_at(x)
					for x in range(self.rect.x, self.rect.right))
			for y in range(self.rect.y, self.rect.bottom)
		]

	@property
	def cell_count(self) -> int:
		covered = self.content_rect.area if self.content_rect is not None else 0
		return self.rect.area - covered


def fill_directive(path, rect: Rect, content_rect: Optional[Rect], pattern: Optional[str]) -> Optional[FillDirective]:
	"""Describe the cells an Expand leaves unpainted, or None if there are none."""
	if not pattern:
		return None
	directive = FillDirective(path, rect, content_rect, pattern)
	if directive.cell_count <= 0:
		return None
	return directive
