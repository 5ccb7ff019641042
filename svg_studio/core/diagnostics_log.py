"""
Append-only record of validation and export events.
"""
import logging
import threading
from collections import deque
from typing import Iterator, List, Optional

from svg_studio.models.diagnostic import DEFAULT_TIMESTAMP_FORMAT, Diagnostic, Severity

logger = logging.getLogger(__name__)


class DiagnosticsLog:
    """
    Newest-first history of diagnostics for one editing session.

    Entries are never removed or changed after they are appended. The log is
    owned by the session and passed explicitly to the validator and exporters.
    """

    def __init__(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT):
        """
        Initialize an empty log.

        Args:
            timestamp_format: strftime format used to stamp new entries
        """
        self.timestamp_format = timestamp_format
        self._entries = deque()
        self._lock = threading.Lock()

    def append(self, severity: Severity, message: str) -> Diagnostic:
        """
        Stamp a new diagnostic and put it at the front of the log.

        Args:
            severity: Severity of the entry
            message: Human-readable message

        Returns:
            The appended Diagnostic
        """
        diagnostic = Diagnostic.create(severity, message, timestamp_format=self.timestamp_format)
        with self._lock:
            self._entries.appendleft(diagnostic)

        if diagnostic.is_error:
            logger.error(diagnostic.message)
        else:
            logger.info(diagnostic.message)
        return diagnostic

    def query(self, severity: Optional[Severity] = None) -> List[Diagnostic]:
        """
        Return entries newest-first, optionally filtered by severity.

        Args:
            severity: Severity to keep, or None for every entry

        Returns:
            List of diagnostics
        """
        with self._lock:
            snapshot = list(self._entries)
        if severity is None:
            return snapshot
        return [d for d in snapshot if d.severity is severity]

    def errors(self) -> List[Diagnostic]:
        """Problems view: error entries only."""
        return self.query(Severity.ERROR)

    def entries(self) -> List[Diagnostic]:
        """Terminal view: every entry."""
        return self.query()

    def count(self, severity: Optional[Severity] = None) -> int:
        return len(self.query(severity))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.query())
