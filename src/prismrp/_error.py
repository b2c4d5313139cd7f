"""Error classes and helpers"""

__all__ = [
    "ConversionError",
    "UnsupportedNodeError",
    "ParseError",
    "SexpSyntaxError",
    "TreeLoadError",
]


class ConversionError(Exception):
    """Error translating an input tree into sexps.

    Args:
        message: (str) Error description
        node: (Node | None) Input node being translated

    Attributes:
        message: (str) Error description
        node: (Node | None) Input node being translated
        position: (Location | None) Source span of the node
    """

    def __init__(self, message, node=None):
        self.message = message
        self.node = node
        self.position = getattr(node, "location", None)
        super().__init__(message)


class UnsupportedNodeError(ConversionError):
    """Input node kind has no translation.

    There is never a fallback shape for these. A silently substituted sexp
    would no longer match what ruby_parser produces for the same source.
    """

    def __init__(self, node, detail=None):
        self.kind = type(node).__name__
        location = getattr(node, "location", None)
        where = f" at {location.format()}" if location is not None else ""
        message = f"Unsupported node {self.kind}{where}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, node)


class ParseError(Exception):
    """Exception raised for parsing errors.

    Args:
        message: (str) Error description
        position: (int | None) Optional character position where error occurred

    Attributes:
        message: (str) Error description
        position: (int | None) Character position where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)


class SexpSyntaxError(ParseError):
    """Printed sexp text could not be read."""


class TreeLoadError(Exception):
    """Serialized input tree is malformed."""
