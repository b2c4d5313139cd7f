"""Method call nodes, blocks, and call-based compound assignment."""

__all__ = [
    "CallNode",
    "ArgumentsNode",
    "BlockArgumentNode",
    "BlockNode",
    "BlockParametersNode",
    "BlockLocalVariableNode",
    "NumberedParametersNode",
    "ItParametersNode",
    "LambdaNode",
    "SuperNode",
    "ForwardingSuperNode",
    "ForwardingArgumentsNode",
    "YieldNode",
    "CallOrWriteNode",
    "CallAndWriteNode",
    "CallOperatorWriteNode",
    "IndexOrWriteNode",
    "IndexAndWriteNode",
    "IndexOperatorWriteNode",
    "CallTargetNode",
    "IndexTargetNode",
    "MatchWriteNode",
    "DefinedNode",
    "AndNode",
    "OrNode",
]

from ._base import Node, node

_COMPARISONS = ("==", "!=", "===", "<=", ">=")


@node
class CallNode(Node):
    """Method call, including operators and bare identifiers.

    A bare `x` that could be a local variable but is not is a call with no
    receiver and `variable_call` set.
    """
    receiver: Node | None = None
    name: str
    arguments: Node | None = None
    block: Node | None = None
    safe_navigation: bool = False
    variable_call: bool = False

    @property
    def attribute_write(self):
        """`x.y = 1` or `x[1] = 2` rather than a plain call."""
        return self.name.endswith("=") and self.name not in _COMPARISONS


@node
class ArgumentsNode(Node):
    arguments: tuple[Node, ...] = ()


@node
class BlockArgumentNode(Node):
    """`&blk` argument, expression is None for an anonymous `&`."""
    expression: Node | None = None


@node
class BlockNode(Node):
    locals: tuple[str, ...] = ()
    parameters: Node | None = None
    body: Node | None = None


@node
class BlockParametersNode(Node):
    """`|a, b; c|`, `locals` holds the shadowed names after the `;`."""
    parameters: Node | None = None
    locals: tuple[Node, ...] = ()


@node
class BlockLocalVariableNode(Node):
    name: str


@node
class NumberedParametersNode(Node):
    """Implicit `_1`.. `_9` parameters, maximum is the highest one used."""
    maximum: int


@node
class ItParametersNode(Node):
    pass


@node
class LambdaNode(Node):
    locals: tuple[str, ...] = ()
    parameters: Node | None = None
    body: Node | None = None


@node
class SuperNode(Node):
    arguments: Node | None = None
    block: Node | None = None


@node
class ForwardingSuperNode(Node):
    """Bare `super` forwarding the current arguments."""
    block: Node | None = None


@node
class ForwardingArgumentsNode(Node):
    """`...` in call arguments."""


@node
class YieldNode(Node):
    arguments: Node | None = None


@node
class CallOrWriteNode(Node):
    """`x.y ||= value`"""
    receiver: Node | None = None
    read_name: str
    write_name: str
    value: Node
    safe_navigation: bool = False


@node
class CallAndWriteNode(Node):
    """`x.y &&= value`"""
    receiver: Node | None = None
    read_name: str
    write_name: str
    value: Node
    safe_navigation: bool = False


@node
class CallOperatorWriteNode(Node):
    """`x.y += value`"""
    receiver: Node | None = None
    read_name: str
    write_name: str
    binary_operator: str
    value: Node
    safe_navigation: bool = False


@node
class IndexOrWriteNode(Node):
    """`x[i] ||= value`"""
    receiver: Node | None = None
    arguments: Node | None = None
    block: Node | None = None
    value: Node
    safe_navigation: bool = False


@node
class IndexAndWriteNode(Node):
    """`x[i] &&= value`"""
    receiver: Node | None = None
    arguments: Node | None = None
    block: Node | None = None
    value: Node
    safe_navigation: bool = False


@node
class IndexOperatorWriteNode(Node):
    """`x[i] += value`"""
    receiver: Node | None = None
    arguments: Node | None = None
    block: Node | None = None
    binary_operator: str
    value: Node
    safe_navigation: bool = False


@node
class CallTargetNode(Node):
    """`x.y` as a multiple assignment target, name is the writer `y=`."""
    receiver: Node
    name: str
    safe_navigation: bool = False


@node
class IndexTargetNode(Node):
    """`x[i]` as a multiple assignment target."""
    receiver: Node
    arguments: Node | None = None
    block: Node | None = None


@node
class MatchWriteNode(Node):
    """`/(?<name>.)/ =~ x`, a match that also writes named captures."""
    call: CallNode
    targets: tuple[Node, ...] = ()


@node
class DefinedNode(Node):
    value: Node


@node
class AndNode(Node):
    left: Node
    right: Node


@node
class OrNode(Node):
    left: Node
    right: Node
