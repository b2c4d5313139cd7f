"""Statement sequences, conditionals, loops, jumps and exception handling."""

__all__ = [
    "ProgramNode",
    "StatementsNode",
    "ParenthesesNode",
    "BeginNode",
    "RescueNode",
    "RescueModifierNode",
    "EnsureNode",
    "ElseNode",
    "IfNode",
    "UnlessNode",
    "WhileNode",
    "UntilNode",
    "ForNode",
    "CaseNode",
    "WhenNode",
    "ReturnNode",
    "BreakNode",
    "NextNode",
    "RedoNode",
    "RetryNode",
    "FlipFlopNode",
    "PreExecutionNode",
    "PostExecutionNode",
    "MissingNode",
]

from ._base import Node, node


@node
class ProgramNode(Node):
    locals: tuple[str, ...] = ()
    statements: Node


@node
class StatementsNode(Node):
    body: tuple[Node, ...] = ()


@node
class ParenthesesNode(Node):
    body: Node | None = None


@node
class BeginNode(Node):
    statements: Node | None = None
    rescue_clause: Node | None = None
    else_clause: Node | None = None
    ensure_clause: Node | None = None


@node
class RescueNode(Node):
    """One `rescue` clause; later clauses chain through `subsequent`."""
    exceptions: tuple[Node, ...] = ()
    reference: Node | None = None
    statements: Node | None = None
    subsequent: Node | None = None


@node
class RescueModifierNode(Node):
    """`expression rescue rescue_expression`"""
    expression: Node
    rescue_expression: Node


@node
class EnsureNode(Node):
    statements: Node | None = None


@node
class ElseNode(Node):
    statements: Node | None = None


@node
class IfNode(Node):
    """`if`, `elsif`, modifier `if` and the ternary operator."""
    predicate: Node
    statements: Node | None = None
    subsequent: Node | None = None


@node
class UnlessNode(Node):
    predicate: Node
    statements: Node | None = None
    else_clause: Node | None = None


@node
class WhileNode(Node):
    """`while`, with `begin_modifier` set for `begin ... end while x`."""
    predicate: Node
    statements: Node | None = None
    begin_modifier: bool = False


@node
class UntilNode(Node):
    predicate: Node
    statements: Node | None = None
    begin_modifier: bool = False


@node
class ForNode(Node):
    index: Node
    collection: Node
    statements: Node | None = None


@node
class CaseNode(Node):
    predicate: Node | None = None
    conditions: tuple[Node, ...] = ()
    else_clause: Node | None = None


@node
class WhenNode(Node):
    conditions: tuple[Node, ...] = ()
    statements: Node | None = None


@node
class ReturnNode(Node):
    arguments: Node | None = None


@node
class BreakNode(Node):
    arguments: Node | None = None


@node
class NextNode(Node):
    arguments: Node | None = None


@node
class RedoNode(Node):
    pass


@node
class RetryNode(Node):
    pass


@node
class FlipFlopNode(Node):
    """Range in a condition, `if a..b`."""
    left: Node | None = None
    right: Node | None = None
    exclude_end: bool = False


@node
class PreExecutionNode(Node):
    """`BEGIN { ... }`"""
    statements: Node | None = None


@node
class PostExecutionNode(Node):
    """`END { ... }`"""
    statements: Node | None = None


@node
class MissingNode(Node):
    """Placeholder the parser inserts while recovering from a syntax error."""
