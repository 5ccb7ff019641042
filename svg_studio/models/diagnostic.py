"""
Diagnostic records emitted by validation and export.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

DEFAULT_TIMESTAMP_FORMAT = "%X"  # locale time, e.g. "14:03:27"


class Severity(Enum):
    """Closed set of diagnostic severities."""
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"


@dataclass(frozen=True)
class Diagnostic:
    """A single timestamped, severity-tagged log entry."""
    severity: Severity
    message: str
    timestamp: str

    @classmethod
    def create(
        cls,
        severity: Severity,
        message: str,
        now: Optional[datetime] = None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> "Diagnostic":
        """
        Build a diagnostic stamped with the wall-clock time.

        Args:
            severity: Severity of the entry
            message: Human-readable message
            now: Time to stamp (defaults to the current time)
            timestamp_format: strftime format used for the timestamp

        Returns:
            New Diagnostic
        """
        if not isinstance(severity, Severity):
            severity = Severity(severity)
        now = now or datetime.now()
        return cls(severity=severity, message=message, timestamp=now.strftime(timestamp_format))

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR
