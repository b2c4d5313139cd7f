"""Variable nodes for the five storage kinds, constant paths and targets.

Each storage kind (local, instance, class, global, constant) has the same
family of nodes: read, write, `||=`, `&&=`, operator write (`+=` and
friends) and target (a write slot inside a multiple assignment).
"""

__all__ = [
    "LocalVariableReadNode",
    "LocalVariableWriteNode",
    "LocalVariableOrWriteNode",
    "LocalVariableAndWriteNode",
    "LocalVariableOperatorWriteNode",
    "LocalVariableTargetNode",
    "InstanceVariableReadNode",
    "InstanceVariableWriteNode",
    "InstanceVariableOrWriteNode",
    "InstanceVariableAndWriteNode",
    "InstanceVariableOperatorWriteNode",
    "InstanceVariableTargetNode",
    "ClassVariableReadNode",
    "ClassVariableWriteNode",
    "ClassVariableOrWriteNode",
    "ClassVariableAndWriteNode",
    "ClassVariableOperatorWriteNode",
    "ClassVariableTargetNode",
    "GlobalVariableReadNode",
    "GlobalVariableWriteNode",
    "GlobalVariableOrWriteNode",
    "GlobalVariableAndWriteNode",
    "GlobalVariableOperatorWriteNode",
    "GlobalVariableTargetNode",
    "ConstantReadNode",
    "ConstantWriteNode",
    "ConstantOrWriteNode",
    "ConstantAndWriteNode",
    "ConstantOperatorWriteNode",
    "ConstantTargetNode",
    "ConstantPathNode",
    "ConstantPathWriteNode",
    "ConstantPathOrWriteNode",
    "ConstantPathAndWriteNode",
    "ConstantPathOperatorWriteNode",
    "ConstantPathTargetNode",
    "ItLocalVariableReadNode",
    "NumberedReferenceReadNode",
    "BackReferenceReadNode",
    "ShareableConstantNode",
    "MultiWriteNode",
    "MultiTargetNode",
    "SplatNode",
    "ImplicitRestNode",
]

from dataclasses import dataclass

from ._base import Node, node


@dataclass(frozen=True, kw_only=True)
class VariableRead(Node):
    name: str


@dataclass(frozen=True, kw_only=True)
class VariableWrite(Node):
    name: str
    value: Node


@dataclass(frozen=True, kw_only=True)
class VariableOperatorWrite(Node):
    name: str
    binary_operator: str
    value: Node


@node
class LocalVariableReadNode(VariableRead):
    depth: int = 0


@node
class LocalVariableWriteNode(VariableWrite):
    depth: int = 0


@node
class LocalVariableOrWriteNode(VariableWrite):
    depth: int = 0


@node
class LocalVariableAndWriteNode(VariableWrite):
    depth: int = 0


@node
class LocalVariableOperatorWriteNode(VariableOperatorWrite):
    depth: int = 0


@node
class LocalVariableTargetNode(VariableRead):
    depth: int = 0


@node
class InstanceVariableReadNode(VariableRead):
    pass


@node
class InstanceVariableWriteNode(VariableWrite):
    pass


@node
class InstanceVariableOrWriteNode(VariableWrite):
    pass


@node
class InstanceVariableAndWriteNode(VariableWrite):
    pass


@node
class InstanceVariableOperatorWriteNode(VariableOperatorWrite):
    pass


@node
class InstanceVariableTargetNode(VariableRead):
    pass


@node
class ClassVariableReadNode(VariableRead):
    pass


@node
class ClassVariableWriteNode(VariableWrite):
    pass


@node
class ClassVariableOrWriteNode(VariableWrite):
    pass


@node
class ClassVariableAndWriteNode(VariableWrite):
    pass


@node
class ClassVariableOperatorWriteNode(VariableOperatorWrite):
    pass


@node
class ClassVariableTargetNode(VariableRead):
    pass


@node
class GlobalVariableReadNode(VariableRead):
    pass


@node
class GlobalVariableWriteNode(VariableWrite):
    pass


@node
class GlobalVariableOrWriteNode(VariableWrite):
    pass


@node
class GlobalVariableAndWriteNode(VariableWrite):
    pass


@node
class GlobalVariableOperatorWriteNode(VariableOperatorWrite):
    pass


@node
class GlobalVariableTargetNode(VariableRead):
    pass


@node
class ConstantReadNode(VariableRead):
    pass


@node
class ConstantWriteNode(VariableWrite):
    pass


@node
class ConstantOrWriteNode(VariableWrite):
    pass


@node
class ConstantAndWriteNode(VariableWrite):
    pass


@node
class ConstantOperatorWriteNode(VariableOperatorWrite):
    pass


@node
class ConstantTargetNode(VariableRead):
    pass


@node
class ConstantPathNode(Node):
    """`X::Y`, or `::Y` when parent is None."""
    parent: Node | None = None
    name: str


@node
class ConstantPathWriteNode(Node):
    target: ConstantPathNode
    value: Node


@node
class ConstantPathOrWriteNode(Node):
    target: ConstantPathNode
    value: Node


@node
class ConstantPathAndWriteNode(Node):
    target: ConstantPathNode
    value: Node


@node
class ConstantPathOperatorWriteNode(Node):
    target: ConstantPathNode
    binary_operator: str
    value: Node


@node
class ConstantPathTargetNode(Node):
    parent: Node | None = None
    name: str


@node
class ItLocalVariableReadNode(Node):
    """`it` inside a block without parameters."""


@node
class NumberedReferenceReadNode(Node):
    """`$1`, `$2`, ..."""
    number: int


@node
class BackReferenceReadNode(Node):
    """`$&`, `` $` ``, `$'`, `$+`"""
    name: str


@node
class ShareableConstantNode(Node):
    """Constant write under a `shareable_constant_value` magic comment."""
    write: Node


@node
class MultiWriteNode(Node):
    """`a, *b, c = value`"""
    lefts: tuple[Node, ...] = ()
    rest: Node | None = None
    rights: tuple[Node, ...] = ()
    value: Node


@node
class MultiTargetNode(Node):
    """Parenthesized target list, `a, (b, c) = ...` or `|a, (b, c)|`."""
    lefts: tuple[Node, ...] = ()
    rest: Node | None = None
    rights: tuple[Node, ...] = ()


@node
class SplatNode(Node):
    """`*expression`, expression is None for an anonymous `*`."""
    expression: Node | None = None


@node
class ImplicitRestNode(Node):
    """Trailing comma in a target list, `a, = ...` or `|a, |`."""
