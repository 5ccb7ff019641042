"""
SVG validation on every edit of the document.
"""
import logging
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException, ElementTree

from svg_studio.core.diagnostics_log import DiagnosticsLog
from svg_studio.errors import MarkupSyntaxError
from svg_studio.models.diagnostic import Severity
from svg_studio.models.results import ValidationResult

logger = logging.getLogger(__name__)

UNKNOWN_PARSE_ERROR = "Unknown parsing error"


class SVGValidator:
    """
    Checks that a document is well-formed SVG markup.

    Each call is an independent pass over one document snapshot. A failed
    pass appends exactly one error diagnostic; a successful pass appends
    nothing and leaves earlier errors in place.
    """

    def __init__(self, log: DiagnosticsLog):
        """
        Initialize the SVG validator.

        Args:
            log: Diagnostics log that receives syntax errors
        """
        self.log = log

    def parse(self, svg_code: str):
        """
        Parse SVG code into an element tree.

        Uses defusedxml: a DOCTYPE is allowed, but entity declarations and
        external references are rejected.

        Args:
            svg_code: The SVG string to parse

        Returns:
            Root element of the parsed tree

        Raises:
            MarkupSyntaxError: If the document is not well-formed
        """
        try:
            svg_data = svg_code.encode('utf-8')
        except UnicodeEncodeError as e:
            raise MarkupSyntaxError(str(e)) from e

        try:
            return ElementTree.fromstring(
                svg_data,
                forbid_dtd=False,
                forbid_entities=True,
                forbid_external=True,
            )
        except (ParseError, DefusedXmlException) as e:
            raise MarkupSyntaxError(str(e)) from e

    def validate(self, svg_code: str) -> ValidationResult:
        """
        Validate an SVG string.

        Args:
            svg_code: The SVG string to validate

        Returns:
            ValidationResult, invalid with a short reason on parse failure
        """
        try:
            self.parse(svg_code)
        except MarkupSyntaxError as e:
            reason = short_reason(str(e))
            logger.debug(f"Validation failed ({reason}) for: {svg_code[:100]}...")
            self.log.append(Severity.ERROR, f"Syntax Error: {reason}")
            return ValidationResult.invalid(reason)

        return ValidationResult.ok()


def short_reason(error_text: str) -> str:
    """First segment of a parser error message, e.g. 'mismatched tag'."""
    reason = error_text.split(':', 1)[0].strip()
    return reason or UNKNOWN_PARSE_ERROR
