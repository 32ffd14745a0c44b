"""Shared utilities for the sales report pipeline."""

from parlor.utils.io import read_text_file, write_text_file, load_tool_settings
from parlor.utils.transforms import round_half_up, format_number, format_percent
from parlor.utils.validators import validate_dataframe
