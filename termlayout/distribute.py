"""
Space distribution for Expand and Spacer widgets.

After a stack has measured its fixed children, whatever room is left along
the stack's axis is handed out in two rounds. Expand children split it first,
weighted by their factors. Spacers only split what the expands left over,
which is nothing as soon as one expand has a non-zero factor.

Shares are exact integer fractions: each widget gets
``floor(remaining * factor / total)`` cells, and the cells lost to rounding go
one at a time to the earliest widgets with a non-zero factor. Repeating a
layout with the same inputs therefore always produces the same cells.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

from .geometry import UNBOUNDED, Extent
from .widgets import Expand, Spacer, Widget

logger = logging.getLogger(__name__)


class Distribution(NamedTuple):
	remaining: int					# Space left after fixed children (clamped at zero)
	expand_sizes: tuple[int, ...]	# One entry per expand, in child order
	spacer_sizes: tuple[int, ...]	# One entry per spacer, in child order

	@property
	def leftover(self) -> int:
		"""Cells nobody claimed (only non-zero when no expand or spacer has a factor)."""
		return self.remaining - sum(self.expand_sizes) - sum(self.spacer_sizes)


def split_by_factor(remaining: int, factors: Sequence[int]) -> list[int]:
	"""Split ``remaining`` cells between widgets weighted by ``factors``.

	Zero factors get nothing, including no rounding leftovers. If every factor
	is zero, or there is nothing to split, everyone gets zero.
	"""
	total = sum(factors)
	if remaining <= 0 or total == 0:
		return [0] * len(factors)

	shares = [remaining * factor // total for factor in factors]

	# Hand out the cells lost to rounding, earliest widget first
	leftover = remaining - sum(shares)
	for index, factor in enumerate(factors):
		if leftover <= 0:
			break
		if factor > 0:
			shares[index] += 1
			leftover -= 1
	return shares

def distribute_space(available: Extent, consumed: int,
		expand_factors: Sequence[int], spacer_factors: Sequence[int]) -> Distribution:
	"""Distribute a stack's leftover space between its expands and spacers.

	Args:
		available: The stack's extent along its axis, or UNBOUNDED
		consumed: Total size of the fixed children along the axis
		expand_factors: Factors of the participating expands, in child order
		spacer_factors: Factors of the participating spacers, in child order

	Returns:
		Distribution: the clamped remaining space and every widget's share
	"""
	if available is UNBOUNDED:
		# Nothing to distribute when the stack can grow without limit
		if expand_factors or spacer_factors:
			logger.debug("Unbounded extent: %d expand(s) and %d spacer(s) get no extra space",
						len(expand_factors), len(spacer_factors))
		return Distribution(0, (0,) * len(expand_factors), (0,) * len(spacer_factors))

	remaining = available - consumed
	if remaining < 0:
		logger.debug("Fixed children overflow the stack by %d cell(s); remaining space clamped to 0", -remaining)
		remaining = 0

	expand_sizes = split_by_factor(remaining, expand_factors)
	spacer_sizes = split_by_factor(remaining - sum(expand_sizes), spacer_factors)
	return Distribution(remaining, tuple(expand_sizes), tuple(spacer_sizes))

def effective_axis(widget: Widget, stack_axis: int | None) -> int | None:
	"""The axis an Expand or Spacer grows along: its own, else the nearest stack's."""
	if isinstance(widget, Expand) and widget.axis is not None:
		return widget.axis
	return stack_axis

def participates(widget: Widget, stack_axis: int) -> bool:
	"""Whether a direct stack child takes part in the stack's space distribution."""
	if isinstance(widget, Spacer):
		return True
	return isinstance(widget, Expand) and effective_axis(widget, stack_axis) == stack_axis
