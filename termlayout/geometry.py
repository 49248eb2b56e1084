"""
Geometry primitives shared by every layout stage.

Sizes and positions are stored as pairs indexed by axis, so the engine can use
the ``value[axis]`` / ``value[1-axis]`` pattern instead of duplicating code for
width and height.
"""

from __future__ import annotations

from typing import NamedTuple, Optional


class Axis:
	HORIZONTAL = 0
	VERTICAL = 1

	_NAMES = {
		"horizontal": HORIZONTAL, "horz": HORIZONTAL, "h": HORIZONTAL,
		"vertical": VERTICAL, "vert": VERTICAL, "v": VERTICAL,
	}

	@classmethod
	def parse(cls, value) -> int:
		"""Convert an axis value or one of its markup spellings to 0 or 1."""
		if isinstance(value, str):
			try:
				return cls._NAMES[value.strip().lower()]
			except KeyError:
				raise ValueError(f"Unknown axis name: {value!r}") from None
		if value in (cls.HORIZONTAL, cls.VERTICAL) and not isinstance(value, bool):
			return int(value)
		raise ValueError(f"Invalid axis {value!r}, must be 0 (horizontal) or 1 (vertical)")

	@classmethod
	def name(cls, axis: int) -> str:
		return ("horizontal", "vertical")[axis]


# Extent value for a dimension with no upper bound (scrolling contexts)
UNBOUNDED = None

Extent = Optional[int]


class Size(NamedTuple):
	width: int
	height: int

	@classmethod
	def along(cls, axis: int, main: int, cross: int) -> Size:
		"""Build a size from its extent along ``axis`` and across it."""
		pair = [0, 0]
		pair[axis] = main
		pair[1 - axis] = cross
		return cls(*pair)

	@property
	def area(self) -> int:
		return self.width * self.height


class Pos(NamedTuple):
	x: int
	y: int


class Rect(NamedTuple):
	x: int
	y: int
	width: int
	height: int

	@classmethod
	def from_pos_size(cls, pos, size) -> Rect:
		return cls(pos[0], pos[1], size[0], size[1])

	@property
	def pos(self) -> Pos:
		return Pos(self.x, self.y)

	@property
	def size(self) -> Size:
		return Size(self.width, self.height)

	@property
	def area(self) -> int:
		return self.width * self.height

	@property
	def right(self) -> int:
		return self.x + self.width

	@property
	def bottom(self) -> int:
		return self.y + self.height

	def inset(self, left: int, right: int, top: int, bottom: int) -> Rect:
		"""Shrink the rectangle by the given amounts, never below zero size."""
		width = max(0, self.width - left - right)
		height = max(0, self.height - top - bottom)
		return Rect(self.x + min(left, self.width), self.y + min(top, self.height), width, height)

	def contains(self, x: int, y: int) -> bool:
		return self.x <= x < self.right and self.y <= y < self.bottom

	def contains_rect(self, other: Rect) -> bool:
		return (self.x <= other.x and self.y <= other.y
				and other.right <= self.right and other.bottom <= self.bottom)


# -------
# Extent helpers
# -------

def shrink_extent(extent: Extent, amount: int) -> Extent:
	"""Reduce an extent by ``amount`` cells, clamping at zero. Unbounded stays unbounded."""
	if extent is UNBOUNDED:
		return UNBOUNDED
	return max(0, extent - amount)

def clamp_to_extent(value: int, extent: Extent) -> int:
	"""Clamp a size to an extent; any size fits an unbounded extent."""
	if extent is UNBOUNDED:
		return max(0, value)
	return max(0, min(value, extent))

def clamp_size(size, extents) -> Size:
	return Size(clamp_to_extent(size[0], extents[0]), clamp_to_extent(size[1], extents[1]))
