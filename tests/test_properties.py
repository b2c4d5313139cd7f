"""General properties of the conversion that hold across node kinds."""

import dataclasses

import pytest

import prismrp
import rptest
from prismrp import Context, nodes
from rptest import check, loc, num, stmts, vcall


@pytest.mark.parametrize("count", [1, 2, 3, 5])
def test_statement_sequences(count):
    body = [num(i) for i in range(count)]
    result = prismrp.convert_statements(stmts(*body))
    if count == 1:
        assert result == prismrp.s("lit", 0)
    else:
        assert result.sexp_type == "block"
        assert len(result.sexp_body) == count
    assert prismrp.convert_statements(stmts(*body), bare=True) == [prismrp.s("lit", i) for i in range(count)]


def test_empty_statements():
    assert prismrp.convert_statements(None) is None
    assert prismrp.convert_statements(None, bare=True) == []


@rptest.params(
    "kind",
    while_=nodes.WhileNode,
    until=nodes.UntilNode,
)
def test_loop_flag_is_inverted(key, kind):
    for begin_modifier in (False, True):
        result = prismrp.convert(kind(predicate=vcall("a"), begin_modifier=begin_modifier))
        assert result.value is (not begin_modifier)


@rptest.params(
    "node kind",
    it=(nodes.ItLocalVariableReadNode(location=loc(2)), "ItLocalVariableReadNode"),
    missing=(nodes.MissingNode(location=loc(2)), "MissingNode"),
    itparams=(nodes.CallNode(name="x", block=nodes.BlockNode(parameters=nodes.ItParametersNode(location=loc(2))),
                             location=loc(2)),
              "ItParametersNode"),
)
def test_unsupported(key, node, kind):
    with pytest.raises(prismrp.UnsupportedNodeError) as info:
        prismrp.convert(nodes.ProgramNode(statements=stmts(num(1), node)))
    error = info.value
    assert error.kind == kind
    assert error.position.start_line == 2
    assert "2:0" in str(error)
    assert isinstance(error, prismrp.ConversionError)


def test_context_is_immutable():
    context = Context()
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.in_def = True
    node = nodes.DefNode(name="x", body=stmts(nodes.ClassVariableWriteNode(name="@@a", value=num(1))))
    prismrp.convert(node, context)
    assert context == Context()


def test_input_is_not_modified():
    node = nodes.LocalVariableWriteNode(name="x", value=nodes.ArrayNode(elements=(num(1), num(2))))
    before = repr(node)
    first = prismrp.convert(node)
    assert repr(node) == before
    assert prismrp.convert(node) == first


def test_lines_follow_input():
    # if a
    #   b
    # end
    node = nodes.IfNode(predicate=vcall("a", line=1),
                        statements=stmts(vcall("b", line=2), line=2),
                        location=loc(1, 3))
    result = check(node, "s(:if, s(:call, nil, :a).line(1), s(:call, nil, :b).line(2), nil).line(1)",
                   lines=True)
    assert result.max_line == 3


@rptest.params(
    "root kind",
    string=("not a node", "str"),
    number=(3, "int"),
    location=(loc(1), "Location"),
)
def test_non_node_root(key, root, kind):
    with pytest.raises(prismrp.UnsupportedNodeError) as info:
        prismrp.convert(root)
    assert info.value.kind == kind
    assert info.value.position is None


def test_convert_none():
    assert prismrp.convert(None) is None
