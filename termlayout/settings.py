"""
Settings management for the default measurement context.
"""

import json
import logging
from typing import NamedTuple

from .constants import DEFAULT_TAB_WIDTH, SETTINGS_FILE

logger = logging.getLogger(__name__)

# -------

class LayoutSettings(NamedTuple):
	tab_width: int = DEFAULT_TAB_WIDTH		# Columns between tab stops
	wrap: bool = True						# Word-wrap text at the available width
	ambiguous_wide: bool = False			# Treat East Asian ambiguous characters as two cells

	@classmethod
	def from_dict(cls, data):
		"""Build settings from a mapping, ignoring unknown keys."""
		if not isinstance(data, dict):
			raise ValueError(f"Layout settings must be a JSON object, got {type(data).__name__}")
		values = {key: data[key] for key in cls._fields if key in data}
		settings = cls(**values)
		settings.validate()
		return settings

	def validate(self):
		if isinstance(self.tab_width, bool) or not isinstance(self.tab_width, int) or self.tab_width < 1:
			raise ValueError(f"tab_width must be a positive integer, got {self.tab_width!r}")
		for name in ('wrap', 'ambiguous_wide'):
			if not isinstance(getattr(self, name), bool):
				raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")

def load_layout_settings(settings_file=SETTINGS_FILE):
	"""Load measurement settings from a JSON file, or defaults if it is missing or unreadable."""
	try:
		with open(settings_file, "rt", encoding="utf-8") as f:
			data = json.load(f)
	except (FileNotFoundError, json.JSONDecodeError) as e:
		logger.debug("Using default layout settings (%s): %s", settings_file, e)
		return LayoutSettings()
	return LayoutSettings.from_dict(data)
