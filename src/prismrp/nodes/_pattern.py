"""Pattern matching nodes."""

__all__ = [
    "CaseMatchNode",
    "InNode",
    "MatchPredicateNode",
    "MatchRequiredNode",
    "ArrayPatternNode",
    "FindPatternNode",
    "HashPatternNode",
    "CapturePatternNode",
    "AlternationPatternNode",
    "PinnedVariableNode",
    "PinnedExpressionNode",
]

from ._base import Node, node


@node
class CaseMatchNode(Node):
    """`case x; in pattern ...; end`"""
    predicate: Node | None = None
    conditions: tuple[Node, ...] = ()
    else_clause: Node | None = None


@node
class InNode(Node):
    """One `in` clause. A guard shows up as an IfNode or UnlessNode wrapping
    the pattern."""
    pattern: Node
    statements: Node | None = None


@node
class MatchPredicateNode(Node):
    """`value in pattern`"""
    value: Node
    pattern: Node


@node
class MatchRequiredNode(Node):
    """`value => pattern`"""
    value: Node
    pattern: Node


@node
class ArrayPatternNode(Node):
    """`[a, *rest, b]` or `Const(a, b)`; rest is a SplatNode."""
    constant: Node | None = None
    requireds: tuple[Node, ...] = ()
    rest: Node | None = None
    posts: tuple[Node, ...] = ()


@node
class FindPatternNode(Node):
    """`[*, x, *]`"""
    constant: Node | None = None
    left: Node
    requireds: tuple[Node, ...] = ()
    right: Node


@node
class HashPatternNode(Node):
    """`{a:, b: pattern, **rest}`; rest is an AssocSplatNode or
    NoKeywordsParameterNode."""
    constant: Node | None = None
    elements: tuple[Node, ...] = ()
    rest: Node | None = None


@node
class CapturePatternNode(Node):
    """`pattern => name`"""
    value: Node
    target: Node


@node
class AlternationPatternNode(Node):
    """`left | right`"""
    left: Node
    right: Node


@node
class PinnedVariableNode(Node):
    """`^name`"""
    variable: Node


@node
class PinnedExpressionNode(Node):
    """`^(expression)`"""
    expression: Node
