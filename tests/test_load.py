"""Tests for building input trees from JSON dumps."""

import json
import logging

import pytest

import prismrp
import rptest
from prismrp import nodes


CALL_TREE = {
    "type": "ProgramNode",
    "location": [1, 0, 1, 3],
    "locals": [],
    "statements": {
        "type": "StatementsNode",
        "location": [1, 0, 1, 3],
        "body": [{
            "type": "CallNode",
            "location": [1, 0, 1, 3],
            "name": "y",
            "flags": 0,
            "receiver": {
                "type": "CallNode",
                "location": {"start_line": 1, "start_column": 0, "end_line": 1, "end_column": 1},
                "name": "x",
                "variable_call": True,
            },
        }],
    },
}


def test_load_tree():
    tree = prismrp.load_tree(CALL_TREE)
    assert isinstance(tree, nodes.ProgramNode)
    call = tree.statements.body[0]
    assert isinstance(call, nodes.CallNode)
    assert call.name == "y"
    assert call.receiver.variable_call
    assert call.receiver.location == nodes.Location(1, 0, 1, 1)
    assert isinstance(tree.statements.body, tuple)
    assert prismrp.convert(tree) == prismrp.parse_sexp("s(:call, s(:call, nil, :x), :y)")


def test_loads():
    tree = prismrp.loads(json.dumps(CALL_TREE))
    assert tree == prismrp.load_tree(CALL_TREE)


def test_skipped_keys_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="prismrp._load"):
        prismrp.load_tree(CALL_TREE)
    assert "CallNode.flags" in caplog.text


def test_opening_loc():
    data = {
        "type": "ArrayNode",
        "location": [1, 0, 1, 2],
        "elements": [],
        "opening_loc": [1, 0, 1, 1],
    }
    tree = prismrp.load_tree(data)
    assert tree.opening_loc == nodes.Location(1, 0, 1, 1)
    data["opening_loc"] = None
    assert prismrp.load_tree(data).opening_loc is None


def test_default_location():
    tree = prismrp.load_tree({"type": "NilNode"})
    assert tree.location == nodes.Location()


@rptest.params(
    "data message",
    unknown=({"type": "FancyNode"}, "Unknown node kind: FancyNode"),
    notype=({"name": "x"}, "no 'type' key"),
    location=({"type": "NilNode", "location": [1, 2]}, "Invalid location"),
    locationkeys=({"type": "NilNode", "location": {"line": 1}}, "Invalid location"),
    missing=({"type": "IntegerNode"}, "Invalid IntegerNode"),
)
def test_load_errors(key, data, message):
    with pytest.raises(prismrp.TreeLoadError, match=message):
        prismrp.load_tree(data)


def test_invalid_json():
    with pytest.raises(prismrp.TreeLoadError, match="Invalid JSON"):
        prismrp.loads("{not json")
