"""
Plain-text renderings of the diagnostics log for terminal display.
"""
from typing import List

from svg_studio.core.diagnostics_log import DiagnosticsLog

NO_PROBLEMS_MESSAGE = "No problems have been detected in the workspace."


def format_problems(log: DiagnosticsLog) -> List[str]:
    """Error messages, newest first, or a single all-clear line."""
    errors = log.errors()
    if not errors:
        return [NO_PROBLEMS_MESSAGE]
    return [d.message for d in errors]


def format_terminal(log: DiagnosticsLog) -> List[str]:
    """Every entry as '[timestamp] message', newest first."""
    return [f"[{d.timestamp}] {d.message}" for d in log.entries()]


def status_summary(log: DiagnosticsLog) -> str:
    # the severity set has no warning level
    return f"{len(log.errors())} errors, 0 warnings"
