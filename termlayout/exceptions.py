"""Exceptions raised by the layout engine."""

from typing import Any, Optional


class LayoutError(Exception):
	"""Base exception for all layout errors.

	Every error raised by this package inherits from this class, so callers
	can catch a failed layout pass with a single except clause.
	"""

	def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
		super().__init__(message)
		self.details = details or {}


class MeasurementError(LayoutError):
	"""Raised when the measurement collaborator cannot size a leaf widget.

	This is the only error that aborts a layout pass.
	"""

	def __init__(self, message: str, path: tuple[int, ...] = (), details: Optional[dict[str, Any]] = None):
		super().__init__(f"Cannot measure widget at {format_path(path)}: {message}", details)
		self.reason = message
		self.path = path


class InvalidWidgetTree(LayoutError, ValueError):
	"""Raised while building a widget tree that violates a structural rule.

	This includes:
	- Too many children for a single-child widget
	- Children on a leaf widget
	- Negative padding or dimensions
	- Unknown widget kinds in resolved input
	"""


class InvalidFactor(InvalidWidgetTree):
	"""Raised when an Expand or Spacer is given a negative or non-integral factor."""

	def __init__(self, factor: Any, details: Optional[dict[str, Any]] = None):
		super().__init__(f"Factor must be a non-negative integer, got {type(factor).__name__}: {factor!r}", details)
		self.factor = factor


def format_path(path: tuple[int, ...]) -> str:
	"""Format a tree path for error messages, e.g. ``root/0/2``."""
	return "/".join(("root", *map(str, path)))
