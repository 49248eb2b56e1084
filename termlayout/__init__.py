"""
termlayout - a layout engine for terminal UI widget trees.

Given a resolved widget tree and an outer extent in cells, ``layout()``
computes an absolute rectangle for every widget, sharing leftover space
between Expand and Spacer widgets by factor.
"""

from .builder import build_widget_tree, load_widget_tree
from .distribute import Distribution, distribute_space, split_by_factor
from .engine import LayoutResult, dump_layout, layout, render_fills
from .exceptions import InvalidFactor, InvalidWidgetTree, LayoutError, MeasurementError
from .fill import FillDirective
from .geometry import UNBOUNDED, Axis, Pos, Rect, Size
from .measure import (
	LayoutPluginContext, layout_context, layout_context_class, load_layout_context, set_layout_context,
)
from .settings import LayoutSettings, load_layout_settings
from .widgets import (
	Border, Canvas, ComponentSlot, Container, Expand, Padding, Span, Spacer,
	HStack, Stack, Text, VStack, Widget, ZStack, iter_postorder, iter_preorder, widget_at,
)

__version__ = "0.1.0"
