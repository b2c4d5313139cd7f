"""Conversion of pattern matching.

The absent slots of the pattern sexps are pinned here: a pattern without
a constant has `nil` in the constant slot, an `in` clause without a body
ends in `nil`, and `case/in` always ends with the else slot.
"""

import rptest
from prismrp import nodes
from rptest import call, check, const, lvar, num, stmts, sym, target, vcall


def _case(pattern, *body, else_clause=None):
    clause = nodes.InNode(pattern=pattern, statements=stmts(*body) if body else None)
    return nodes.CaseMatchNode(predicate=vcall("x"), conditions=(clause,), else_clause=else_clause)


def _rest(name=None):
    return nodes.SplatNode(expression=target(name) if name else None)


@rptest.params(
    "pattern expected",
    value=(num(1), "s(:lit, 1)"),
    const=(const("Integer"), "s(:const, :Integer)"),
    bind=(target("a"), "s(:lasgn, :a)"),
    array=(nodes.ArrayPatternNode(requireds=(target("a"),), rest=_rest("b")),
           's(:array_pat, nil, s(:lasgn, :a), :"*b")'),
    arrayposts=(nodes.ArrayPatternNode(requireds=(num(1),), rest=_rest(), posts=(num(2),)),
                "s(:array_pat, nil, s(:lit, 1), :*, s(:lit, 2))"),
    arrayconst=(nodes.ArrayPatternNode(constant=const("Point"), requireds=(target("a"), target("b"))),
                "s(:array_pat, s(:const, :Point), s(:lasgn, :a), s(:lasgn, :b))"),
    emptyarray=(nodes.ArrayPatternNode(), "s(:array_pat, nil)"),
    find=(nodes.FindPatternNode(left=_rest(), requireds=(num(1),), right=_rest("post")),
          's(:find_pat, nil, :*, s(:lit, 1), :"*post")'),
    hash=(nodes.HashPatternNode(elements=(nodes.AssocNode(key=sym("a"), value=num(1)),),
                                rest=nodes.AssocSplatNode(value=target("rest"))),
          's(:hash_pat, nil, s(:lit, :a), s(:lit, 1), s(:kwrest, :"**rest"))'),
    hashshort=(nodes.HashPatternNode(elements=(
        nodes.AssocNode(key=sym("a"), value=nodes.ImplicitNode(value=target("a"))),)),
        "s(:hash_pat, nil, s(:lit, :a), nil)"),
    hashanon=(nodes.HashPatternNode(rest=nodes.AssocSplatNode()), 's(:hash_pat, nil, s(:kwrest, :"**"))'),
    hashnil=(nodes.HashPatternNode(elements=(nodes.AssocNode(key=sym("a"), value=target("b")),),
                                   rest=nodes.NoKeywordsParameterNode()),
             's(:hash_pat, nil, s(:lit, :a), s(:lasgn, :b), s(:kwrest, :"**nil"))'),
    hashconst=(nodes.HashPatternNode(constant=const("Point"),
                                     elements=(nodes.AssocNode(key=sym("x"), value=num(0)),)),
               "s(:hash_pat, s(:const, :Point), s(:lit, :x), s(:lit, 0))"),
    capture=(nodes.CapturePatternNode(value=const("Integer"), target=target("n")),
             "s(:lasgn, :n, s(:const, :Integer))"),
    alternation=(nodes.AlternationPatternNode(left=num(1), right=num(2)), "s(:or, s(:lit, 1), s(:lit, 2))"),
    pinned=(nodes.PinnedVariableNode(variable=lvar("a")), "s(:lvar, :a)"),
    pinnedivar=(nodes.PinnedVariableNode(variable=nodes.InstanceVariableReadNode(name="@a")), "s(:ivar, :@a)"),
    pinnedexpr=(nodes.PinnedExpressionNode(expression=call(num(1), "+", num(2))),
                "s(:begin, s(:call, s(:lit, 1), :+, s(:lit, 2)))"),
    range=(nodes.RangeNode(left=num(1), right=num(5)), "s(:lit, 1..5)"),
    guard=(nodes.IfNode(predicate=vcall("y"), statements=stmts(target("a"))),
           "s(:if, s(:call, nil, :y), s(:lasgn, :a), nil)"),
)
def test_patterns(key, pattern, expected):
    check(_case(pattern, num(1)), f"s(:case, s(:call, nil, :x), s(:in, {expected}, s(:lit, 1)), nil)")


def test_case_in_clauses():
    first = nodes.InNode(pattern=num(1), statements=stmts(vcall("a"), vcall("b")))
    second = nodes.InNode(pattern=num(2))
    node = nodes.CaseMatchNode(predicate=vcall("x"), conditions=(first, second),
                               else_clause=nodes.ElseNode(statements=stmts(vcall("c"))))
    check(node, "s(:case, s(:call, nil, :x), "
                "s(:in, s(:lit, 1), s(:call, nil, :a), s(:call, nil, :b)), "
                "s(:in, s(:lit, 2), nil), s(:call, nil, :c))")


@rptest.params(
    "node expected",
    predicate=(nodes.MatchPredicateNode(value=vcall("x"), pattern=const("Integer")),
               "s(:case, s(:call, nil, :x), s(:in, s(:const, :Integer), nil), nil)"),
    required=(nodes.MatchRequiredNode(value=vcall("x"), pattern=target("y")),
              "s(:case, s(:call, nil, :x), s(:in, s(:lasgn, :y), nil), nil)"),
    hash=(nodes.MatchRequiredNode(
        value=nodes.HashNode(elements=(nodes.AssocNode(key=sym("y"), value=num(2)),)),
        pattern=nodes.HashPatternNode(elements=(nodes.AssocNode(key=sym("y"), value=target("z")),))),
        "s(:case, s(:hash, s(:lit, :y), s(:lit, 2)), s(:in, s(:hash_pat, nil, s(:lit, :y), s(:lasgn, :z)), nil), nil)"),
)
def test_one_line_matches(key, node, expected):
    check(node, expected)
