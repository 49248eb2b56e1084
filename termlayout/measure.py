"""
Measurement collaborator and the plugin system that selects it.

The engine never shapes text itself. It asks a measurement function
``measure(widget, available_width) -> (width, height)`` for the size of leaf
content (Text, Span, and Canvas without explicit dimensions). Callers can pass
their own function to ``layout()``; otherwise the current layout context is
used. The default context measures plain terminal cells, which is good enough
for tests and simple renderers.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Callable, Optional

from .constants import SETTINGS_FILE, WRAP_OVERFLOW
from .exceptions import MeasurementError
from .geometry import UNBOUNDED, Extent
from .settings import LayoutSettings, load_layout_settings
from .widgets import Canvas, Span, Text, Widget

MeasureFunction = Callable[[Widget, Extent], tuple[int, int]]

# Global layout context for plugin system - initialized by the decorator below
_layout_context: Optional[LayoutPluginContext] = None


def set_layout_context(context: LayoutPluginContext):
	"""Set the global layout context."""
	global _layout_context
	_layout_context = context

def layout_context() -> LayoutPluginContext:
	"""Return the global layout context."""
	assert _layout_context is not None, "Layout context not initialized"
	return _layout_context

def layout_context_class(context_class):
	"""Decorator to set a layout context class as the global context."""
	set_layout_context(context_class())
	return context_class


@layout_context_class
class LayoutPluginContext:
	"""Default terminal-cell measurement.

	Override ``measure_text_width`` for a different notion of character width,
	or ``measure`` to size other leaf kinds.
	"""

	def __init__(self, settings: LayoutSettings | None = None):
		self.settings = settings or LayoutSettings()

	def measure(self, widget: Widget, available_width: Extent) -> tuple[int, int]:
		if isinstance(widget, Text):
			wrap = self.settings.wrap and widget.wrap != WRAP_OVERFLOW
			return self.get_extents(widget.content, available_width if wrap else UNBOUNDED)
		if isinstance(widget, Span):
			return self.get_extents(widget.text, available_width if self.settings.wrap else UNBOUNDED)
		if isinstance(widget, Canvas):
			return (0, 0)
		raise MeasurementError(f"no measurement for {type(widget).__name__} widgets")

	def get_extents(self, text: str, available_width: Extent) -> tuple[int, int]:
		"""Return the (width, height) of text wrapped at ``available_width``."""
		if not text:
			return (0, 0)
		lines = self.wrap_text(text, available_width)
		return (max(map(self.measure_text_width, lines)), len(lines))

	@lru_cache
	def char_width(self, char: str) -> int:
		if unicodedata.combining(char) or unicodedata.category(char) in ('Cc', 'Cf', 'Mn', 'Me'):
			return 0
		east_asian = unicodedata.east_asian_width(char)
		if east_asian in ('W', 'F'):
			return 2
		if east_asian == 'A' and self.settings.ambiguous_wide:
			return 2
		return 1

	@lru_cache
	def measure_text_width(self, text: str) -> int:
		"""Measure the width of a single line in cells."""
		return sum(map(self.char_width, text))

	@lru_cache
	def wrap_text(self, text: str, available_width: Extent) -> tuple[str, ...]:
		"""Split text into display lines, wrapping at word boundaries.

		Newlines always start a new line and tabs expand to the configured tab
		stops. Words wider than the available width are broken wherever they
		run out of room.
		"""
		lines = []
		for line in text.split('\n'):
			line = line.expandtabs(self.settings.tab_width)
			if available_width is UNBOUNDED or available_width < 1 \
					or self.measure_text_width(line) <= available_width:
				lines.append(line)
			else:
				lines.extend(self._wrap_line(line, available_width))
		return tuple(lines)

	def _wrap_line(self, line: str, width: int) -> list[str]:
		lines = []
		current_line = ""

		for word in line.split():
			# Try adding this word to the current line
			test_line = f"{current_line} {word}" if current_line else word
			if self.measure_text_width(test_line) <= width:
				current_line = test_line
				continue

			# Word doesn't fit, finish current line and start a new one
			if current_line:
				lines.append(current_line)
				current_line = ""

			# Single word too long for a line - break it
			while self.measure_text_width(word) > width:
				head, word = self._split_at_width(word, width)
				lines.append(head)
			current_line = word

		# Don't forget the last line
		if current_line or not lines:
			lines.append(current_line)
		return lines

	def _split_at_width(self, word: str, width: int) -> tuple[str, str]:
		used = 0
		for index, char in enumerate(word):
			used += self.char_width(char)
			if used > width:
				# Always make progress, even if one character overflows the line
				index = max(index, 1)
				return word[:index], word[index:]
		return word, ""


def load_layout_context(settings_file=SETTINGS_FILE) -> LayoutPluginContext:
	"""Install a default context configured from a settings file as the global context.

	A missing or unreadable file gives the default settings.
	"""
	context = LayoutPluginContext(load_layout_settings(settings_file))
	set_layout_context(context)
	return context
