"""Method, class and module definitions and their parameter lists."""

__all__ = [
    "DefNode",
    "ParametersNode",
    "RequiredParameterNode",
    "OptionalParameterNode",
    "RestParameterNode",
    "RequiredKeywordParameterNode",
    "OptionalKeywordParameterNode",
    "KeywordRestParameterNode",
    "NoKeywordsParameterNode",
    "BlockParameterNode",
    "ForwardingParameterNode",
    "ClassNode",
    "ModuleNode",
    "SingletonClassNode",
    "AliasMethodNode",
    "AliasGlobalVariableNode",
    "UndefNode",
]

from ._base import Node, node


@node
class DefNode(Node):
    """`def name`, or `def receiver.name` for singleton methods.

    The body is a StatementsNode, or a BeginNode when the definition has
    its own rescue/ensure clauses.
    """
    name: str
    receiver: Node | None = None
    parameters: Node | None = None
    body: Node | None = None
    locals: tuple[str, ...] = ()


@node
class ParametersNode(Node):
    requireds: tuple[Node, ...] = ()
    optionals: tuple[Node, ...] = ()
    rest: Node | None = None
    posts: tuple[Node, ...] = ()
    keywords: tuple[Node, ...] = ()
    keyword_rest: Node | None = None
    block: Node | None = None


@node
class RequiredParameterNode(Node):
    name: str


@node
class OptionalParameterNode(Node):
    name: str
    value: Node


@node
class RestParameterNode(Node):
    """`*name`, name is None for an anonymous `*`."""
    name: str | None = None


@node
class RequiredKeywordParameterNode(Node):
    name: str


@node
class OptionalKeywordParameterNode(Node):
    name: str
    value: Node


@node
class KeywordRestParameterNode(Node):
    name: str | None = None


@node
class NoKeywordsParameterNode(Node):
    """`**nil`"""


@node
class BlockParameterNode(Node):
    name: str | None = None


@node
class ForwardingParameterNode(Node):
    """`...` in a parameter list."""


@node
class ClassNode(Node):
    constant_path: Node
    superclass: Node | None = None
    body: Node | None = None
    locals: tuple[str, ...] = ()


@node
class ModuleNode(Node):
    constant_path: Node
    body: Node | None = None
    locals: tuple[str, ...] = ()


@node
class SingletonClassNode(Node):
    """`class << expression`"""
    expression: Node
    body: Node | None = None
    locals: tuple[str, ...] = ()


@node
class AliasMethodNode(Node):
    new_name: Node
    old_name: Node


@node
class AliasGlobalVariableNode(Node):
    new_name: Node
    old_name: Node


@node
class UndefNode(Node):
    names: tuple[Node, ...] = ()
