"""
Utility functions for file I/O, logging and diagnostics display.
"""

from svg_studio.utils.io import load_config, load_svg, save_payload, save_svg
from svg_studio.utils.views import format_problems, format_terminal, status_summary

__all__ = [
    "format_problems",
    "format_terminal",
    "load_config",
    "load_svg",
    "save_payload",
    "save_svg",
    "status_summary",
]
