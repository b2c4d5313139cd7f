"""Base classes for input tree nodes."""

__all__ = ["Location", "Node", "NODE_TYPES", "register", "node"]

from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class Location:
    """Source span of a node.

    Attributes:
        start_line: Starting line number (1-indexed)
        start_column: Starting column (0-indexed byte offset in the line)
        end_line: Ending line number (1-indexed)
        end_column: Ending column (0-indexed, exclusive)
    """
    start_line: int = 1
    start_column: int = 0
    end_line: int = 1
    end_column: int = 0

    def format(self) -> str:
        """Format position for error messages."""
        return f"{self.start_line}:{self.start_column}"

    @classmethod
    def lines(cls, start, end=None):
        """Location covering whole lines, for building trees by hand."""
        return cls(start, 0, start if end is None else end, 0)


NODE_TYPES: dict[str, type["Node"]] = {}


def register(cls):
    """Class decorator adding a node kind to `NODE_TYPES`."""
    NODE_TYPES[cls.__name__] = cls
    return cls


@dataclass(frozen=True, kw_only=True)
class Node:
    """Base class for all input tree nodes.

    Nodes mirror Prism's node kinds and field names. They are immutable and
    already validated by the parser that produced them; nothing here checks
    field contents.

    Attributes:
        location: Source span the node was parsed from
    """
    location: Location = field(default_factory=Location)

    def child_nodes(self) -> list["Node"]:
        """Direct child nodes, in field order."""
        kids = []
        for item in fields(self):
            if item.name == "location":
                continue
            value = getattr(self, item.name)
            if isinstance(value, Node):
                kids.append(value)
            elif isinstance(value, tuple):
                kids.extend(v for v in value if isinstance(v, Node))
        return kids

    def find_all(self, node_type):
        """Find all descendants of given type, including self."""
        results = [self] if isinstance(self, node_type) else []
        for kid in self.child_nodes():
            results.extend(kid.find_all(node_type))
        return results


def node(cls):
    """Declare a node kind: frozen keyword-only dataclass, registered."""
    return register(dataclass(frozen=True, kw_only=True)(cls))
