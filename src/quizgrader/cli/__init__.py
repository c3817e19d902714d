"""
CLI Module

Output formatting utilities for the command-line interface.
"""

from .formatting import console, format_table, format_summary, format_results

__all__ = [
    "console",
    "format_table",
    "format_summary",
    "format_results",
]
