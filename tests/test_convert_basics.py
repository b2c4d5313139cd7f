"""Conversion of literals, statement sequences and method calls."""

import prismrp
import rptest
from prismrp import nodes
from rptest import args, call, check, loc, lvar, num, program, stmts, string, sym, vcall


def test_method_call_on_call():
    # x.y
    check(call(vcall("x"), "y"), "s(:call, s(:call, nil, :x), :y)")


def test_program_single_statement_unwrapped():
    check(program(num(1)), "s(:lit, 1)")


def test_program_two_statements_block():
    check(program(num(1, line=1), num(2, line=2)),
          "s(:block, s(:lit, 1).line(1), s(:lit, 2).line(2)).line(1)", lines=True)


def test_empty_program():
    assert prismrp.convert(nodes.ProgramNode(statements=stmts())) is None


@rptest.params(
    "node expected",
    nil=(nodes.NilNode(), "s(:nil)"),
    true=(nodes.TrueNode(), "s(:true)"),
    false=(nodes.FalseNode(), "s(:false)"),
    self=(nodes.SelfNode(), "s(:self)"),
    int=(num(42), "s(:lit, 42)"),
    float=(nodes.FloatNode(value=1.5), "s(:lit, 1.5)"),
    rational=(nodes.RationalNode(numerator=1, denominator=2), "s(:lit, (1/2))"),
    imaginary=(nodes.ImaginaryNode(numeric=num(2)), "s(:lit, (0+2i))"),
    floatimaginary=(nodes.ImaginaryNode(numeric=nodes.FloatNode(value=2.0)), "s(:lit, (0+2.0i))"),
    rationalimaginary=(nodes.ImaginaryNode(numeric=nodes.RationalNode(numerator=3, denominator=1)),
                       "s(:lit, (0+(3/1)*i))"),
    str=(string("hi"), 's(:str, "hi")'),
    xstr=(nodes.XStringNode(unescaped="ls"), 's(:xstr, "ls")'),
    sym=(sym("a"), "s(:lit, :a)"),
    opsym=(sym("<=>"), "s(:lit, :<=>)"),
    regexp=(nodes.RegularExpressionNode(unescaped="a+", ignore_case=True), "s(:lit, /a+/i)"),
    regexpall=(
        nodes.RegularExpressionNode(unescaped="a", multi_line=True, extended=True, ascii_8bit=True),
        "s(:lit, /a/mxn)",
    ),
    array=(nodes.ArrayNode(elements=(num(1), string("a")), opening_loc=loc(1)),
           's(:array, s(:lit, 1), s(:str, "a"))'),
    emptyarray=(nodes.ArrayNode(opening_loc=loc(1)), "s(:array)"),
    hash=(nodes.HashNode(elements=(nodes.AssocNode(key=sym("a"), value=num(1)),)),
          "s(:hash, s(:lit, :a), s(:lit, 1))"),
    kwsplat=(nodes.HashNode(elements=(nodes.AssocSplatNode(value=vcall("h")),)),
             "s(:hash, s(:kwsplat, s(:call, nil, :h)))"),
    shorthand=(nodes.HashNode(elements=(
        nodes.AssocNode(key=sym("x"), value=nodes.ImplicitNode(value=lvar("x"))),)),
        "s(:hash, s(:lit, :x), nil)"),
    range=(nodes.RangeNode(left=num(1), right=num(2)), "s(:lit, 1..2)"),
    xrange=(nodes.RangeNode(left=num(1), right=num(2), exclude_end=True), "s(:lit, 1...2)"),
    dot2=(nodes.RangeNode(left=num(1), right=vcall("x")), "s(:dot2, s(:lit, 1), s(:call, nil, :x))"),
    dot3=(nodes.RangeNode(left=vcall("x"), right=num(1), exclude_end=True),
          "s(:dot3, s(:call, nil, :x), s(:lit, 1))"),
    endless=(nodes.RangeNode(left=num(1)), "s(:dot2, s(:lit, 1), nil)"),
    floatrange=(nodes.RangeNode(left=nodes.FloatNode(value=1.0), right=num(2)),
                "s(:dot2, s(:lit, 1.0), s(:lit, 2))"),
    line=(nodes.SourceLineNode(location=loc(7)), "s(:lit, 7)"),
    file=(nodes.SourceFileNode(), 's(:str, "(string)")'),
    parsedfile=(nodes.SourceFileNode(filepath="lib/a.rb"), 's(:str, "lib/a.rb")'),
    encoding=(nodes.SourceEncodingNode(), "s(:colon2, s(:const, :Encoding), :UTF_8)"),
    nthref=(nodes.NumberedReferenceReadNode(number=1), "s(:nth_ref, 1)"),
    backref=(nodes.BackReferenceReadNode(name="$&"), "s(:back_ref, :&)"),
    parens=(nodes.ParenthesesNode(body=stmts(num(1))), "s(:lit, 1)"),
    emptyparens=(nodes.ParenthesesNode(), "s(:nil)"),
)
def test_literals(key, node, expected):
    check(node, expected)


def test_file_override():
    check(nodes.SourceFileNode(filepath="x.rb"), 's(:str, "main.rb")', filepath="main.rb")


@rptest.params(
    "node expected",
    vcall=(vcall("x"), "s(:call, nil, :x)"),
    args=(call(None, "p", num(1), num(2)), "s(:call, nil, :p, s(:lit, 1), s(:lit, 2))"),
    binop=(call(num(1), "+", num(2)), "s(:call, s(:lit, 1), :+, s(:lit, 2))"),
    index=(call(vcall("a"), "[]", num(1)), "s(:call, s(:call, nil, :a), :[], s(:lit, 1))"),
    safe=(call(vcall("a"), "b", safe_navigation=True), "s(:safe_call, s(:call, nil, :a), :b)"),
    attrasgn=(call(vcall("a"), "b=", num(1)), "s(:attrasgn, s(:call, nil, :a), :b=, s(:lit, 1))"),
    safeattr=(call(vcall("a"), "b=", num(1), safe_navigation=True),
              "s(:safe_attrasgn, s(:call, nil, :a), :b=, s(:lit, 1))"),
    indexasgn=(call(vcall("a"), "[]=", num(1), num(2)),
               "s(:attrasgn, s(:call, nil, :a), :[]=, s(:lit, 1), s(:lit, 2))"),
    equality=(call(vcall("a"), "==", num(1)), "s(:call, s(:call, nil, :a), :==, s(:lit, 1))"),
    lessequal=(call(vcall("a"), "<=", num(1)), "s(:call, s(:call, nil, :a), :<=, s(:lit, 1))"),
    keywords=(call(None, "x", nodes.KeywordHashNode(elements=(
        nodes.AssocNode(key=sym("a"), value=num(1)),))),
        "s(:call, nil, :x, s(:hash, s(:lit, :a), s(:lit, 1)))"),
    splat=(call(None, "x", nodes.SplatNode(expression=vcall("a"))),
           "s(:call, nil, :x, s(:splat, s(:call, nil, :a)))"),
    match2=(call(nodes.RegularExpressionNode(unescaped="a"), "=~", vcall("x")),
            "s(:match2, s(:lit, /a/), s(:call, nil, :x))"),
    match3=(call(string("a"), "=~", nodes.RegularExpressionNode(unescaped="a")),
            's(:match3, s(:lit, /a/), s(:str, "a"))'),
    varmatch=(call(vcall("x"), "=~", nodes.RegularExpressionNode(unescaped="a")),
              "s(:call, s(:call, nil, :x), :=~, s(:lit, /a/))"),
    defined=(nodes.DefinedNode(value=vcall("x")), "s(:defined, s(:call, nil, :x))"),
    and_=(nodes.AndNode(left=vcall("a"), right=vcall("b")),
          "s(:and, s(:call, nil, :a), s(:call, nil, :b))"),
    or_=(nodes.OrNode(left=vcall("a"), right=vcall("b")),
         "s(:or, s(:call, nil, :a), s(:call, nil, :b))"),
    not_=(call(vcall("a"), "!"), "s(:call, s(:call, nil, :a), :!)"),
    yield_=(nodes.YieldNode(arguments=args(num(1))), "s(:yield, s(:lit, 1))"),
    yieldnone=(nodes.YieldNode(), "s(:yield)"),
    super_=(nodes.SuperNode(arguments=args(num(1))), "s(:super, s(:lit, 1))"),
    superempty=(nodes.SuperNode(), "s(:super)"),
    zsuper=(nodes.ForwardingSuperNode(), "s(:zsuper)"),
)
def test_calls(key, node, expected):
    check(node, expected)


def test_match_write_uses_call():
    # /(?<a>x)/ =~ y
    regexp_call = call(nodes.RegularExpressionNode(unescaped="(?<a>x)"), "=~", vcall("y"))
    node = nodes.MatchWriteNode(call=regexp_call, targets=(rptest.target("a"),))
    check(node, "s(:match2, s(:lit, /(?<a>x)/), s(:call, nil, :y))")


def _block(params=None, *body, **fields):
    return nodes.BlockNode(parameters=params, body=stmts(*body) if body else None, **fields)


def _params(**fields):
    return nodes.BlockParametersNode(parameters=nodes.ParametersNode(**fields))


def _required(*names):
    return tuple(nodes.RequiredParameterNode(name=name) for name in names)


@rptest.params(
    "block expected",
    empty=(_block(), "s(:iter, s(:call, nil, :x), 0)"),
    body=(_block(None, num(1)), "s(:iter, s(:call, nil, :x), 0, s(:lit, 1))"),
    twobody=(_block(None, num(1), num(2)),
             "s(:iter, s(:call, nil, :x), 0, s(:block, s(:lit, 1), s(:lit, 2)))"),
    param=(_block(_params(requireds=_required("a")), lvar("a")),
           "s(:iter, s(:call, nil, :x), s(:args, :a), s(:lvar, :a))"),
    pipes=(_block(nodes.BlockParametersNode()), "s(:iter, s(:call, nil, :x), s(:args))"),
    shadow=(_block(nodes.BlockParametersNode(
        parameters=nodes.ParametersNode(requireds=_required("a")),
        locals=(nodes.BlockLocalVariableNode(name="b"),))),
        "s(:iter, s(:call, nil, :x), s(:args, :a, s(:shadow, :b)))"),
    onlyshadow=(_block(nodes.BlockParametersNode(locals=(nodes.BlockLocalVariableNode(name="b"),))),
                "s(:iter, s(:call, nil, :x), s(:args, s(:shadow, :b)))"),
    numbered=(_block(nodes.NumberedParametersNode(maximum=2), call(lvar("_1"), "+", lvar("_2"))),
              "s(:iter, s(:call, nil, :x), 0, s(:call, s(:call, nil, :_1), :+, s(:call, nil, :_2)))"),
    destructure=(_block(_params(requireds=(nodes.MultiTargetNode(
        lefts=_required("a", "b")),))),
        "s(:iter, s(:call, nil, :x), s(:args, s(:masgn, :a, :b)))"),
    trailing=(_block(_params(requireds=_required("a"), rest=nodes.ImplicitRestNode())),
              "s(:iter, s(:call, nil, :x), s(:args, :a, nil))"),
)
def test_blocks(key, block, expected):
    check(nodes.CallNode(name="x", block=block), expected)


def test_block_pass():
    node = nodes.CallNode(name="x", block=nodes.BlockArgumentNode(expression=vcall("b")))
    check(node, "s(:call, nil, :x, s(:block_pass, s(:call, nil, :b)))")


def test_anonymous_block_pass():
    node = nodes.CallNode(name="x", arguments=args(num(1)), block=nodes.BlockArgumentNode())
    check(node, "s(:call, nil, :x, s(:lit, 1), s(:block_pass))")


def test_super_with_block():
    node = nodes.ForwardingSuperNode(block=_block(None, num(1)))
    check(node, "s(:iter, s(:zsuper), 0, s(:lit, 1))")
    node = nodes.SuperNode(arguments=args(num(1)), block=nodes.BlockArgumentNode(expression=vcall("b")))
    check(node, "s(:super, s(:lit, 1), s(:block_pass, s(:call, nil, :b)))")


@rptest.params(
    "node expected",
    bare=(nodes.LambdaNode(body=stmts(num(1))), "s(:iter, s(:lambda), 0, s(:lit, 1))"),
    parens=(nodes.LambdaNode(parameters=nodes.BlockParametersNode()), "s(:iter, s(:lambda), s(:args))"),
    numbered=(nodes.LambdaNode(parameters=nodes.NumberedParametersNode(maximum=1), body=stmts(lvar("_1"))),
              "s(:iter, s(:lambda), 0, s(:call, nil, :_1))"),
    param=(nodes.LambdaNode(parameters=_params(requireds=_required("a")), body=stmts(lvar("a"))),
           "s(:iter, s(:lambda), s(:args, :a), s(:lvar, :a))"),
)
def test_lambda(key, node, expected):
    check(node, expected)


@rptest.params(
    "node expected",
    callor=(nodes.CallOrWriteNode(receiver=vcall("a"), read_name="b", write_name="b=", value=num(1)),
            's(:op_asgn2, s(:call, nil, :a), :b=, :"||", s(:lit, 1))'),
    calland=(nodes.CallAndWriteNode(receiver=vcall("a"), read_name="b", write_name="b=", value=num(1)),
             's(:op_asgn2, s(:call, nil, :a), :b=, :"&&", s(:lit, 1))'),
    callop=(nodes.CallOperatorWriteNode(receiver=vcall("a"), read_name="b", write_name="b=",
                                        binary_operator="+", value=num(1)),
            "s(:op_asgn2, s(:call, nil, :a), :b=, :+, s(:lit, 1))"),
    safeop=(nodes.CallOperatorWriteNode(receiver=vcall("a"), read_name="b", write_name="b=",
                                        binary_operator="*", value=num(2), safe_navigation=True),
            "s(:safe_op_asgn2, s(:call, nil, :a), :b=, :*, s(:lit, 2))"),
    indexor=(nodes.IndexOrWriteNode(receiver=vcall("a"), arguments=args(num(1)), value=num(2)),
             's(:op_asgn1, s(:call, nil, :a), s(:arglist, s(:lit, 1)), :"||", s(:lit, 2))'),
    indexand=(nodes.IndexAndWriteNode(receiver=vcall("a"), arguments=args(num(1)), value=num(2)),
              's(:op_asgn1, s(:call, nil, :a), s(:arglist, s(:lit, 1)), :"&&", s(:lit, 2))'),
    indexop=(nodes.IndexOperatorWriteNode(receiver=vcall("a"), arguments=args(num(1), num(2)),
                                          binary_operator="-", value=num(3)),
             "s(:op_asgn1, s(:call, nil, :a), s(:arglist, s(:lit, 1), s(:lit, 2)), :-, s(:lit, 3))"),
    noindex=(nodes.IndexOperatorWriteNode(receiver=vcall("a"), binary_operator="+", value=num(1)),
             "s(:op_asgn1, s(:call, nil, :a), s(:arglist), :+, s(:lit, 1))"),
)
def test_call_op_assign(key, node, expected):
    check(node, expected)


def test_call_lines():
    # x.y(1,
    #     2)
    node = nodes.CallNode(
        receiver=vcall("x"), name="y",
        arguments=nodes.ArgumentsNode(arguments=(num(1, line=1), num(2, line=2)), location=loc(1, 2)),
        location=loc(1, 2))
    result = check(node, "s(:call, s(:call, nil, :x).line(1), :y, s(:lit, 1).line(1), s(:lit, 2).line(2)).line(1)",
                   lines=True)
    assert result.max_line == 2
