"""
Exception hierarchy for the SVG Studio pipeline.
"""


class SVGStudioError(Exception):
    """Base class for all SVG Studio errors."""
    pass


class MarkupSyntaxError(SVGStudioError):
    """The document is not well-formed SVG markup."""
    pass


class ConfigError(SVGStudioError):
    """A configuration file could not be loaded or contains unknown keys."""
    pass


class ExportError(SVGStudioError):
    """Base class for failures that end an export request."""
    pass


class DecodeError(ExportError):
    """The rasterizer backend could not turn the source into pixels."""
    pass


class ExportAssemblyError(ExportError):
    """Building the output document failed after a successful rasterization."""
    pass
