"""Literal value nodes: numbers, strings, symbols, regexps, collections."""

__all__ = [
    "IntegerNode",
    "FloatNode",
    "RationalNode",
    "ImaginaryNode",
    "StringNode",
    "XStringNode",
    "SymbolNode",
    "RegularExpressionNode",
    "MatchLastLineNode",
    "InterpolatedStringNode",
    "InterpolatedXStringNode",
    "InterpolatedSymbolNode",
    "InterpolatedRegularExpressionNode",
    "InterpolatedMatchLastLineNode",
    "EmbeddedStatementsNode",
    "EmbeddedVariableNode",
    "TrueNode",
    "FalseNode",
    "NilNode",
    "SelfNode",
    "ArrayNode",
    "HashNode",
    "KeywordHashNode",
    "AssocNode",
    "AssocSplatNode",
    "ImplicitNode",
    "RangeNode",
    "SourceFileNode",
    "SourceLineNode",
    "SourceEncodingNode",
]

from dataclasses import dataclass

from ._base import Location, Node, node


@node
class IntegerNode(Node):
    value: int


@node
class FloatNode(Node):
    value: float


@node
class RationalNode(Node):
    """`3r`, `1.5r`"""
    numerator: int
    denominator: int = 1


@node
class ImaginaryNode(Node):
    """`2i`, the numeric part is an integer, float or rational node."""
    numeric: Node


@node
class StringNode(Node):
    unescaped: str


@node
class XStringNode(Node):
    """Backtick command string without interpolation."""
    unescaped: str


@node
class SymbolNode(Node):
    unescaped: str


@dataclass(frozen=True, kw_only=True)
class RegexFlags(Node):
    """Option flags shared by every regexp-like node."""
    ignore_case: bool = False
    extended: bool = False
    multi_line: bool = False
    ascii_8bit: bool = False
    once: bool = False


@node
class RegularExpressionNode(RegexFlags):
    unescaped: str


@node
class MatchLastLineNode(RegexFlags):
    """Bare regexp used as a condition, `if /x/`."""
    unescaped: str


@node
class InterpolatedStringNode(Node):
    parts: tuple[Node, ...] = ()


@node
class InterpolatedXStringNode(Node):
    parts: tuple[Node, ...] = ()


@node
class InterpolatedSymbolNode(Node):
    parts: tuple[Node, ...] = ()


@node
class InterpolatedRegularExpressionNode(RegexFlags):
    parts: tuple[Node, ...] = ()


@node
class InterpolatedMatchLastLineNode(RegexFlags):
    parts: tuple[Node, ...] = ()


@node
class EmbeddedStatementsNode(Node):
    """`#{...}` inside an interpolated literal."""
    statements: Node | None = None


@node
class EmbeddedVariableNode(Node):
    """`#@ivar`, `#$gvar` inside an interpolated literal."""
    variable: Node


@node
class TrueNode(Node):
    pass


@node
class FalseNode(Node):
    pass


@node
class NilNode(Node):
    pass


@node
class SelfNode(Node):
    pass


@node
class ArrayNode(Node):
    """Array literal.

    `opening_loc` is only set when the source spells out the delimiters
    (`[1, 2]`, `%w[a b]`). Implicit lists such as the right side of
    `a, b = 1, 2` have none.
    """
    elements: tuple[Node, ...] = ()
    opening_loc: Location | None = None

    @property
    def contains_splat(self):
        from ._variable import SplatNode
        return any(isinstance(e, SplatNode) for e in self.elements)


@node
class HashNode(Node):
    elements: tuple[Node, ...] = ()


@node
class KeywordHashNode(Node):
    """Brace-less hash in call arguments, `x(a: 1)`."""
    elements: tuple[Node, ...] = ()


@node
class AssocNode(Node):
    key: Node
    value: Node | None = None


@node
class AssocSplatNode(Node):
    """`**value`, value is None for anonymous `**`."""
    value: Node | None = None


@node
class ImplicitNode(Node):
    """Value omitted by shorthand syntax, `{x:}`."""
    value: Node | None = None


@node
class RangeNode(Node):
    left: Node | None = None
    right: Node | None = None
    exclude_end: bool = False


@node
class SourceFileNode(Node):
    """`__FILE__`"""
    filepath: str = ""


@node
class SourceLineNode(Node):
    """`__LINE__`"""


@node
class SourceEncodingNode(Node):
    """`__ENCODING__`"""
