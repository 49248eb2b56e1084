"""
Widget tree model.

A widget tree is built once from fully resolved input and is never mutated by
the layout engine. Each widget kind is its own class with typed layout fields;
anything the engine does not interpret stays in the read-only ``attributes``
mapping for the renderer. Widgets do not store computed sizes or rectangles:
those live in the per-pass ``LayoutResult``, keyed by tree path.

A tree path is the tuple of child indices leading from the root to a widget,
so the root is ``()`` and its second child is ``(1,)``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Optional

from .constants import DEFAULT_FACTOR, WRAP_NORMAL, WRAP_OVERFLOW
from .exceptions import InvalidFactor, InvalidWidgetTree
from .geometry import Axis

_EMPTY_ATTRIBUTES = MappingProxyType({})


def _check_cells(name, value, *, optional=False):
	"""Validate a cell count: a non-negative integer (or None when optional)."""
	if value is None and optional:
		return None
	if isinstance(value, bool) or not isinstance(value, int):
		raise InvalidWidgetTree(f"{name} must be an integer number of cells, got {type(value).__name__}: {value!r}")
	if value < 0:
		raise InvalidWidgetTree(f"{name} cannot be negative: {value}")
	return value

def _check_factor(factor):
	if isinstance(factor, bool) or not isinstance(factor, int) or factor < 0:
		raise InvalidFactor(factor)
	return factor


class Widget:
	"""Base class for every widget kind.

	Subclasses declare how many children they accept with ``MAX_CHILDREN``
	(None for unlimited) and may restrict child types with ``CHILD_TYPES``.
	"""

	__slots__ = ('children', 'attributes')

	MAX_CHILDREN: Optional[int] = None
	CHILD_TYPES: Optional[tuple[type, ...]] = None

	def __init__(self, children=(), attributes=None):
		children = tuple(child for child in children if child is not None)
		for child in children:
			if not isinstance(child, Widget):
				raise InvalidWidgetTree(f"{type(self).__name__} children must be widgets, got {type(child).__name__}")
			if self.CHILD_TYPES is not None and not isinstance(child, self.CHILD_TYPES):
				allowed = ", ".join(t.__name__ for t in self.CHILD_TYPES)
				raise InvalidWidgetTree(f"{type(self).__name__} only accepts {allowed} children, got {type(child).__name__}")
		if self.MAX_CHILDREN is not None and len(children) > self.MAX_CHILDREN:
			raise InvalidWidgetTree(f"{type(self).__name__} accepts at most {self.MAX_CHILDREN} "
									f"child{'ren' if self.MAX_CHILDREN != 1 else ''}, got {len(children)}")
		self._set('children', children)
		self._set('attributes', MappingProxyType(dict(attributes)) if attributes else _EMPTY_ATTRIBUTES)

	def _set(self, name, value):
		object.__setattr__(self, name, value)

	def __setattr__(self, name, value):
		raise AttributeError(f"{type(self).__name__} widgets are immutable (cannot set {name!r})")

	def __delattr__(self, name):
		raise AttributeError(f"{type(self).__name__} widgets are immutable (cannot delete {name!r})")

	def _repr_fields(self) -> list[str]:
		return []

	def __repr__(self):
		fields = self._repr_fields()
		if self.children:
			fields.append(f"children={len(self.children)}")
		return f"{type(self).__name__}({', '.join(fields)})"


class WidgetSingle(Widget):
	__slots__ = ()
	MAX_CHILDREN = 1

	def __init__(self, child=None, attributes=None):
		super().__init__((child,), attributes)

	@property
	def child(self) -> Optional[Widget]:
		return self.children[0] if self.children else None


class WidgetLeaf(Widget):
	__slots__ = ()
	MAX_CHILDREN = 0


# --- multi-child widgets

class Stack(Widget):
	"""Lays out children one after another along ``axis``."""

	__slots__ = ('axis',)

	def __init__(self, *, axis=Axis.VERTICAL, children=(), attributes=None):
		super().__init__(children, attributes)
		try:
			self._set('axis', Axis.parse(axis))
		except ValueError as e:
			raise InvalidWidgetTree(str(e)) from None

	@classmethod
	def horizontal(cls, *children, attributes=None):
		return cls(axis=Axis.HORIZONTAL, children=children, attributes=attributes)

	@classmethod
	def vertical(cls, *children, attributes=None):
		return cls(axis=Axis.VERTICAL, children=children, attributes=attributes)

	def _repr_fields(self):
		return [f"axis={Axis.name(self.axis)!r}"]


# Shorthands matching the markup kinds
HStack = Stack.horizontal
VStack = Stack.vertical


class ZStack(Widget):
	"""Overlays every child at the same origin; later children are on top."""

	__slots__ = ()

	def __init__(self, *children, attributes=None):
		super().__init__(children, attributes)


# --- single-child widgets

class Border(WidgetSingle):
	__slots__ = ()


class Padding(WidgetSingle):
	__slots__ = ('left', 'right', 'top', 'bottom')

	def __init__(self, padding=0, child=None, *, left=None, right=None, top=None, bottom=None, attributes=None):
		super().__init__(child, attributes)
		sides = self._argument_expand_4(padding)
		for name, shorthand, explicit in zip(('left', 'right', 'top', 'bottom'), sides, (left, right, top, bottom)):
			value = shorthand if explicit is None else explicit
			self._set(name, _check_cells(f"Padding {name}", value))

	@staticmethod
	def _argument_expand_4(value):
		"""Expand a padding shorthand to (left, right, top, bottom).

		A single value applies to every side, a pair is (horizontal, vertical)
		and four values are taken as-is.
		"""
		if not isinstance(value, (list, tuple)):
			return (value,) * 4
		if len(value) == 1:
			return (value[0],) * 4
		if len(value) == 2:
			return (value[0], value[0], value[1], value[1])
		if len(value) == 4:
			return tuple(value)
		raise InvalidWidgetTree(f"Padding shorthand must have 1, 2 or 4 values, got {len(value)}")

	@property
	def horizontal(self) -> int:
		return self.left + self.right

	@property
	def vertical(self) -> int:
		return self.top + self.bottom

	def _repr_fields(self):
		return [f"left={self.left}", f"right={self.right}", f"top={self.top}", f"bottom={self.bottom}"]


class Container(WidgetSingle):
	"""Pins an explicit width and/or height, otherwise takes its child's size."""

	__slots__ = ('width', 'height')

	def __init__(self, child=None, *, width=None, height=None, attributes=None):
		super().__init__(child, attributes)
		self._set('width', _check_cells(f"{type(self).__name__} width", width, optional=True))
		self._set('height', _check_cells(f"{type(self).__name__} height", height, optional=True))

	def explicit_size(self, axis: int) -> Optional[int]:
		return (self.width, self.height)[axis]

	def _repr_fields(self):
		fields = []
		if self.width is not None:
			fields.append(f"width={self.width}")
		if self.height is not None:
			fields.append(f"height={self.height}")
		return fields


class Canvas(Container):
	"""A drawing surface; without explicit dimensions it is measured like a leaf."""

	__slots__ = ()


class ComponentSlot(WidgetSingle):
	"""Where a component's rendered template is mounted; a size pass-through."""

	__slots__ = ('name',)

	def __init__(self, child=None, *, name=None, attributes=None):
		super().__init__(child, attributes)
		self._set('name', name)

	def _repr_fields(self):
		return [f"name={self.name!r}"] if self.name is not None else []


class Expand(WidgetSingle):
	"""Claims a factor-weighted share of the enclosing stack's leftover space."""

	__slots__ = ('factor', 'axis', 'fill')

	def __init__(self, child=None, *, factor=DEFAULT_FACTOR, axis=None, fill=None, attributes=None):
		super().__init__(child, attributes)
		self._set('factor', _check_factor(factor))
		if axis is not None:
			try:
				axis = Axis.parse(axis)
			except ValueError as e:
				raise InvalidWidgetTree(str(e)) from None
		self._set('axis', axis)
		if fill is not None and not isinstance(fill, str):
			raise InvalidWidgetTree(f"Expand fill must be a string, got {type(fill).__name__}: {fill!r}")
		self._set('fill', fill or None)

	def _repr_fields(self):
		fields = [f"factor={self.factor}"]
		if self.axis is not None:
			fields.append(f"axis={Axis.name(self.axis)!r}")
		if self.fill is not None:
			fields.append(f"fill={self.fill!r}")
		return fields


# --- leaf widgets

class Spacer(WidgetLeaf):
	"""Like Expand, but only receives space no Expand sibling claimed."""

	__slots__ = ('factor',)

	def __init__(self, *, factor=DEFAULT_FACTOR, attributes=None):
		super().__init__((), attributes)
		self._set('factor', _check_factor(factor))

	# Spacers always follow the enclosing stack's axis
	axis = None

	def _repr_fields(self):
		return [f"factor={self.factor}"]


class Span(WidgetLeaf):
	__slots__ = ('text',)

	def __init__(self, text="", *, attributes=None):
		super().__init__((), attributes)
		if not isinstance(text, str):
			raise InvalidWidgetTree(f"Span text must be a string, got {type(text).__name__}")
		self._set('text', text)

	def _repr_fields(self):
		return [repr(self.text)]


class Text(Widget):
	"""Text content, optionally followed by inline spans."""

	__slots__ = ('text', 'wrap')
	CHILD_TYPES = (Span,)

	def __init__(self, text="", *spans, wrap=WRAP_NORMAL, attributes=None):
		super().__init__(spans, attributes)
		if not isinstance(text, str):
			raise InvalidWidgetTree(f"Text content must be a string, got {type(text).__name__}")
		if wrap not in (WRAP_NORMAL, WRAP_OVERFLOW):
			raise InvalidWidgetTree(f"Text wrap must be {WRAP_NORMAL!r} or {WRAP_OVERFLOW!r}, got {wrap!r}")
		self._set('text', text)
		self._set('wrap', wrap)

	@property
	def content(self) -> str:
		"""The full text including inline spans."""
		return self.text + "".join(span.text for span in self.children)

	def _repr_fields(self):
		return [repr(self.text)]



# -------
# Traversal
# -------

def iter_preorder(root: Widget, path: tuple[int, ...] = ()) -> Iterator[tuple[tuple[int, ...], Widget]]:
	"""Yield ``(path, widget)`` pairs, parents before their children."""
	stack = [(path, root)]
	while stack:
		path, widget = stack.pop()
		yield path, widget
		stack.extend(reversed([(path + (index,), child) for index, child in enumerate(widget.children)]))

def iter_postorder(root: Widget, path: tuple[int, ...] = ()) -> Iterator[tuple[tuple[int, ...], Widget]]:
	"""Yield ``(path, widget)`` pairs, children before their parent."""
	for index, child in enumerate(root.children):
		yield from iter_postorder(child, path + (index,))
	yield path, root

def widget_at(root: Widget, path: tuple[int, ...]) -> Widget:
	"""Resolve a tree path to its widget, raising KeyError for a dangling path."""
	widget = root
	for depth, index in enumerate(path):
		if not 0 <= index < len(widget.children):
			raise KeyError(f"No widget at path {path!r} (stopped at depth {depth})")
		widget = widget.children[index]
	return widget
