"""Build input trees from JSON dumps.

A dumped node is a mapping with a "type" key naming the node kind and one
key per field, using Prism's field names:

    {"type": "CallNode", "location": [1, 0, 1, 3], "name": "y",
     "receiver": {"type": "CallNode", "location": [1, 0, 1, 1], "name": "x",
                  "variable_call": true}}

Locations are `[start_line, start_column, end_line, end_column]` lists or
mappings with those keys. Nested mappings become nodes and lists become
tuples.
"""

__all__ = ["load_tree", "loads"]

import dataclasses
import json
import logging

from ._error import TreeLoadError
from .nodes import NODE_TYPES, Location

_logger = logging.getLogger(__name__)


def loads(text):
    """Parse JSON text and build the input tree it describes.

    Raises:
        TreeLoadError: The text is not JSON or not a valid tree
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeLoadError(f"Invalid JSON: {e}") from e
    return load_tree(data)


def load_tree(data):
    """Build an input tree from JSON compatible data.

    Keys that are not fields of the node class are skipped. Prism dumps
    carry raw flag names and derived values that the node classes compute
    themselves.

    Args:
        data: (dict) Dumped root node

    Returns:
        (Node) Root of the input tree

    Raises:
        TreeLoadError: Unknown node kind, bad location or missing field
    """
    if isinstance(data, list):
        return tuple(load_tree(item) for item in data)
    if not isinstance(data, dict):
        return data

    kind = data.get("type")
    if kind is None:
        raise TreeLoadError(f"Node mapping has no 'type' key: {sorted(data)}")
    cls = NODE_TYPES.get(kind)
    if cls is None:
        raise TreeLoadError(f"Unknown node kind: {kind}")

    names = {item.name for item in dataclasses.fields(cls)}
    values = {}
    for key, value in data.items():
        if key == "type":
            continue
        if key not in names:
            _logger.debug("Skipping %s.%s", kind, key)
            continue
        if key == "location" or key.endswith("_loc"):
            values[key] = None if value is None else _location(value)
        else:
            values[key] = load_tree(value)

    try:
        return cls(**values)
    except TypeError as e:
        raise TreeLoadError(f"Invalid {kind}: {e}") from e


def _location(value):
    if isinstance(value, dict):
        try:
            return Location(**value)
        except TypeError as e:
            raise TreeLoadError(f"Invalid location: {value}") from e
    if isinstance(value, list) and len(value) == 4:
        return Location(*value)
    raise TreeLoadError(f"Invalid location: {value}")
