"""Display and formatting utilities for codemood."""

from codemood.display.formatters import (
    create_distribution_table,
    create_moods_table,
    display_directory_summary,
    display_file_line,
    display_file_report,
)

__all__ = [
    "display_file_report",
    "display_file_line",
    "display_directory_summary",
    "create_distribution_table",
    "create_moods_table",
]
