"""
Command-line interface for SVG Studio.
"""
import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional

from svg_studio.config import DEFAULT_SVG
from svg_studio.errors import ConfigError
from svg_studio.session import EditorSession
from svg_studio.utils.io import load_config, load_svg, save_payload, save_svg
from svg_studio.utils.logger import get_logger, setup_logger
from svg_studio.utils.views import format_problems, format_terminal, status_summary

logger = get_logger(__name__)

EXPORT_FORMATS = ("pdf", "eps", "all")


def load_overrides(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary of overrides (empty when no path is given)
    """
    if not config_path:
        return {}
    return load_config(config_path)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="svg-studio",
        description="Validate SVG documents and export them as PDF or EPS.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write log output to this file",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate one or more SVG files as successive edits",
    )
    validate_parser.add_argument("files", nargs="+", help="SVG files to validate, in edit order")

    export_parser = subparsers.add_parser(
        "export",
        help="Export an SVG file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    export_parser.add_argument("file", help="SVG file to export")
    export_parser.add_argument(
        "--format", "-f",
        choices=EXPORT_FORMATS,
        default="pdf",
        help="Output format",
    )
    export_parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="exports",
        help="Directory to save exported files",
    )

    new_parser = subparsers.add_parser("new", help="Write the starter SVG document")
    new_parser.add_argument("file", help="Destination path")

    return parser.parse_args(argv)


def run_validate(session: EditorSession, files: List[str]) -> int:
    for path in files:
        session.update(load_svg(path))

    for line in format_problems(session.log):
        print(line)
    print(status_summary(session.log))
    return 0 if session.last_result.valid else 1


def run_export(session: EditorSession, fmt: str, output_dir: str) -> int:
    failed = False

    if fmt in ("pdf", "all"):
        result = asyncio.run(session.export_pdf())
        if result.ok:
            save_payload(result.payload, output_dir)
        else:
            failed = True

    if fmt in ("eps", "all"):
        save_payload(session.export_eps(), output_dir)

    for line in format_terminal(session.log):
        print(line)
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    try:
        overrides = load_overrides(args.config)
    except ConfigError as e:
        setup_logger("DEBUG" if args.verbose else None, log_file=args.log_file)
        logger.error(str(e))
        return 2

    level = "DEBUG" if args.verbose else overrides.get("log_level")
    setup_logger(level, log_file=args.log_file)

    if args.command == "new":
        save_svg(DEFAULT_SVG, args.file)
        return 0

    try:
        if args.command == "validate":
            session = EditorSession(load_svg(args.files[0]), config=overrides)
            return run_validate(session, args.files[1:])

        session = EditorSession(load_svg(args.file), config=overrides)
        return run_export(session, args.format, args.output_dir)

    except (ConfigError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
