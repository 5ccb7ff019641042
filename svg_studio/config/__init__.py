"""
Configuration defaults and helpers.
"""
from typing import Any, Dict, Optional

from svg_studio.config.default import DEFAULT_CONFIG, DEFAULT_SVG
from svg_studio.errors import ConfigError
from svg_studio.export.pdf import PAGE_SIZES


def build_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge configuration overrides onto the defaults.

    Args:
        overrides: Keys to replace in DEFAULT_CONFIG

    Returns:
        New configuration dictionary
    """
    config = dict(DEFAULT_CONFIG)
    if not overrides:
        return config

    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    config.update(overrides)

    page_size = config["pdf_page_size"]
    if not isinstance(page_size, str) or page_size.upper() not in PAGE_SIZES:
        raise ConfigError(
            f"Unsupported pdf_page_size: {page_size!r}. Use one of {', '.join(PAGE_SIZES)}."
        )

    offset = config["pdf_image_offset"]
    if not isinstance(offset, (list, tuple)) or len(offset) != 2 or not all(_is_number(v) for v in offset):
        raise ConfigError(f"pdf_image_offset must be a pair of numbers, got {offset!r}")
    # JSON has no tuples
    config["pdf_image_offset"] = tuple(offset)

    width = config["pdf_image_width"]
    if not _is_number(width) or width <= 0:
        raise ConfigError(f"pdf_image_width must be a positive number, got {width!r}")
    return config


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_SVG",
    "build_config",
]
