"""
Input/output utilities for SVG documents, exported payloads and configuration.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from svg_studio.errors import ConfigError
from svg_studio.models.results import ExportedPayload

logger = logging.getLogger(__name__)


def load_svg(file_path: Union[str, Path]) -> str:
    """
    Load SVG code from a file.

    Args:
        file_path: Path to the SVG file

    Returns:
        SVG code as a string
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"SVG file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def save_svg(
    svg_code: str,
    output_path: Union[str, Path],
    create_dirs: bool = True
) -> Path:
    """
    Save SVG code to a file.

    Args:
        svg_code: SVG code as a string
        output_path: Path to save the SVG
        create_dirs: Whether to create parent directories if they don't exist

    Returns:
        Path the SVG was written to
    """
    output_path = Path(output_path)

    if create_dirs:
        output_path.parent.mkdir(exist_ok=True, parents=True)

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(svg_code)
        logger.info(f"SVG saved to: {output_path}")
    except OSError as e:
        logger.error(f"Error saving SVG to {output_path}: {e}")
        raise
    return output_path


def save_payload(
    payload: ExportedPayload,
    output_dir: Union[str, Path],
    create_dirs: bool = True
) -> Path:
    """
    Write an exported payload into a directory under its own filename.

    Args:
        payload: Exported payload
        output_dir: Directory to write into
        create_dirs: Whether to create the directory if it doesn't exist

    Returns:
        Path of the written file
    """
    output_dir = Path(output_dir)

    if create_dirs:
        output_dir.mkdir(exist_ok=True, parents=True)

    output_path = output_dir / payload.filename
    try:
        output_path.write_bytes(payload.data)
        logger.info(f"Saved {payload.mime_type} payload to: {output_path}")
    except OSError as e:
        logger.error(f"Error saving {payload.filename} to {output_dir}: {e}")
        raise
    return output_path


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary containing configuration
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Error loading configuration from {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration in {config_path} must be a JSON object")
    return config
