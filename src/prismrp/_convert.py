"""Convert Prism-shaped input trees into ruby_parser sexps.

The conversion is a single recursive dispatcher over node kinds. Children
are converted before their parent sexp is created, and each sexp takes its
line range from the input node that produced it.

ruby_parser and Prism disagree on many small details. Most of the rules
below exist to reproduce ruby_parser's shape exactly: which bodies get a
`:block` wrapper, when a right hand side is wrapped in `:to_ary` or
`:svalue`, how interpolated literals fold, and which tag a construct gets
depending on where it appears.

The only state threaded through the recursion is a `Context`, passed by
value. Nothing in the input tree is modified.
"""

__all__ = ["convert", "convert_statements", "Context"]

import dataclasses
import fractions
import logging
import re

from . import nodes
from ._error import UnsupportedNodeError
from ._sexp import Sexp
from ._value import Imaginary, Regexp, RubyRange, Symbol

_logger = logging.getLogger(__name__)

_NUMBERED_PARAMETER = re.compile(r"_[1-9]")


@dataclasses.dataclass(frozen=True)
class Context:
    """Lexical scope flags that change how some constructs are tagged.

    Attributes:
        in_def: Inside a method body, class variable writes become `:cvasgn`
        in_parameters: Inside a parameter list, destructuring targets are
            not wrapped in `:array` and splats become `:"*name"` symbols
        filepath: Path reported for `__FILE__`, overriding the one the
            parser recorded
    """
    in_def: bool = False
    in_parameters: bool = False
    filepath: str | None = None


def convert(node, context=None, filepath=None):
    """Convert an input tree into ruby_parser sexps.

    Args:
        node: (Node) Root of the input tree, usually a ProgramNode
        context: (Context | None) Scope flags, defaults to top level
        filepath: (str | None) Path reported for `__FILE__`

    Returns:
        (Sexp | None) Converted tree, None for an empty program

    Raises:
        UnsupportedNodeError: The tree contains a node with no translation
    """
    if context is None:
        context = Context()
    if filepath is not None:
        context = dataclasses.replace(context, filepath=filepath)
    location = getattr(node, "location", None)
    _logger.debug("Converting %s at %s", type(node).__name__,
                  location.format() if location is not None else "?")
    return _convert(node, context)


def convert_statements(node, context=None, bare=False):
    """Convert a statement sequence.

    A single statement is returned unwrapped and two or more are wrapped in
    `:block`. With bare, the converted statements are returned as a list to
    be spliced into the caller's sexp instead.

    Args:
        node: (StatementsNode | None) Statements to convert
        context: (Context | None) Scope flags
        bare: Return a list instead of a single sexp

    Returns:
        (Sexp | list | None) Converted statements
    """
    if context is None:
        context = Context()
    if node is None:
        return [] if bare else None
    body = _convert_all(node.body, context)
    if bare:
        return body
    if len(body) > 1:
        return _make(node, "block", *body)
    return body[0] if body else None


def _convert(node, ctx):
    """Convert a single input node.

    This is the main dispatcher that handles all node kinds.

    Args:
        node: (Node | None) Input node to convert
        ctx: (Context) Scope flags for this position in the tree

    Returns:
        Sexp, plain value, list of sexps for nodes that splice into their
        parent, or None
    """
    match node:
        case None:
            return None

        # === STRUCTURE ===
        case nodes.ProgramNode():
            return _convert(node.statements, ctx)
        case nodes.StatementsNode():
            return convert_statements(node, ctx)
        case nodes.ParenthesesNode():
            if node.body is None:
                # ()
                return _make(node, "nil")
            return _convert(node.body, ctx)
        case nodes.BeginNode():
            return _convert_begin(node, ctx)
        case nodes.RescueNode():
            return _convert_resbody(node, ctx)
        case nodes.RescueModifierNode():
            resbody = _make(node, "resbody", _make(node, "array"),
                            _convert(node.rescue_expression, ctx))
            return _make(node, "rescue", _convert(node.expression, ctx), resbody)
        case nodes.EnsureNode():
            if node.statements is None:
                return _make(node, "nil")
            return _convert(node.statements, ctx)
        case nodes.ElseNode():
            return _convert(node.statements, ctx)

        # === CALLS ===
        case nodes.CallNode():
            return _convert_call(node, ctx)
        case nodes.ArgumentsNode():
            # ruby_parser has no node for an argument list
            return _convert_all(node.arguments, ctx)
        case nodes.BlockArgumentNode():
            if node.expression is None:
                return _make(node, "block_pass")
            return _make(node, "block_pass", _convert(node.expression, ctx))
        case nodes.BlockNode():
            return _convert(node.body, ctx)
        case nodes.BlockParametersNode():
            return _convert_block_parameters(node, ctx)
        case nodes.BlockLocalVariableNode():
            return Symbol(node.name)
        case nodes.LambdaNode():
            return _convert_lambda(node, ctx)
        case nodes.SuperNode():
            call = _make(node, "super", *_args(node.arguments, ctx))
            return _attach_block(call, node, ctx)
        case nodes.ForwardingSuperNode():
            return _attach_block(_make(node, "zsuper"), node, ctx)
        case nodes.ForwardingArgumentsNode() | nodes.ForwardingParameterNode():
            return _make(node, "forward_args")
        case nodes.YieldNode():
            return _make(node, "yield", *_args(node.arguments, ctx))
        case nodes.CallOrWriteNode():
            return _convert_call_write(node, "||", ctx)
        case nodes.CallAndWriteNode():
            return _convert_call_write(node, "&&", ctx)
        case nodes.CallOperatorWriteNode():
            return _convert_call_write(node, node.binary_operator, ctx)
        case nodes.IndexOrWriteNode():
            return _convert_index_write(node, "||", ctx)
        case nodes.IndexAndWriteNode():
            return _convert_index_write(node, "&&", ctx)
        case nodes.IndexOperatorWriteNode():
            return _convert_index_write(node, node.binary_operator, ctx)
        case nodes.CallTargetNode():
            tag = "safe_attrasgn" if node.safe_navigation else "attrasgn"
            return _make(node, tag, _convert(node.receiver, ctx), Symbol(node.name))
        case nodes.IndexTargetNode():
            return _make(node, "attrasgn", _convert(node.receiver, ctx),
                         Symbol("[]="), *_args(node.arguments, ctx))
        case nodes.MatchWriteNode():
            return _convert(node.call, ctx)
        case nodes.DefinedNode():
            return _make(node, "defined", _convert(node.value, ctx))
        case nodes.AndNode():
            return _make(node, "and", _convert(node.left, ctx), _convert(node.right, ctx))
        case nodes.OrNode():
            return _make(node, "or", _convert(node.left, ctx), _convert(node.right, ctx))

        # === LITERALS ===
        case nodes.IntegerNode() | nodes.FloatNode():
            return _make(node, "lit", node.value)
        case nodes.RationalNode():
            return _make(node, "lit", fractions.Fraction(node.numerator, node.denominator))
        case nodes.ImaginaryNode():
            numeric = _convert(node.numeric, ctx)
            return _make(node, "lit", Imaginary(0, numeric.value))
        case nodes.StringNode():
            return _make(node, "str", node.unescaped)
        case nodes.XStringNode():
            return _make(node, "xstr", node.unescaped)
        case nodes.SymbolNode():
            return _make(node, "lit", Symbol(node.unescaped))
        case nodes.RegularExpressionNode():
            return _make(node, "lit", Regexp(node.unescaped, _regexp_options(node)))
        case nodes.MatchLastLineNode():
            # if /x/
            regexp = _make(node, "lit", Regexp(node.unescaped, _regexp_options(node)))
            return _make(node, "match", regexp)
        case nodes.InterpolatedStringNode():
            return _convert_interpolated(node, "dstr", ctx)
        case nodes.InterpolatedXStringNode():
            return _convert_interpolated(node, "dxstr", ctx)
        case nodes.InterpolatedSymbolNode():
            return _convert_interpolated(node, "dsym", ctx)
        case nodes.InterpolatedRegularExpressionNode():
            return _convert_interpolated_regexp(node, ctx)
        case nodes.InterpolatedMatchLastLineNode():
            regexp = _convert_interpolated_regexp(node, ctx)
            if regexp.is_a("lit"):
                return _make(node, "match", regexp)
            return _make(node, "match2", regexp, _make(node, "gvar", Symbol("$_")))
        case nodes.EmbeddedStatementsNode():
            if node.statements is None:
                return _make(node, "evstr")
            inner = _convert(node.statements, ctx)
            if _is_str(inner):
                # "#{'a'}" folds into the surrounding literal
                return inner
            return _make(node, "evstr", inner)
        case nodes.EmbeddedVariableNode():
            return _make(node, "evstr", _convert(node.variable, ctx))
        case nodes.TrueNode():
            return _make(node, "true")
        case nodes.FalseNode():
            return _make(node, "false")
        case nodes.NilNode():
            return _make(node, "nil")
        case nodes.SelfNode():
            return _make(node, "self")
        case nodes.ArrayNode():
            return _make(node, "array", *_convert_all(node.elements, ctx))
        case nodes.HashNode() | nodes.KeywordHashNode():
            return _make(node, "hash", *_convert_pairs(node.elements, ctx))
        case nodes.AssocNode():
            return [_convert(node.key, ctx), _convert(node.value, ctx)]
        case nodes.AssocSplatNode():
            if node.value is None:
                return [_make(node, "kwsplat")]
            return [_make(node, "kwsplat", _convert(node.value, ctx))]
        case nodes.ImplicitNode():
            # {x:}
            return None
        case nodes.RangeNode():
            return _convert_range(node, ctx)
        case nodes.SourceFileNode():
            return _make(node, "str", ctx.filepath or node.filepath or "(string)")
        case nodes.SourceLineNode():
            return _make(node, "lit", node.location.start_line)
        case nodes.SourceEncodingNode():
            encoding = _make(node, "const", Symbol("Encoding"))
            return _make(node, "colon2", encoding, Symbol("UTF_8"))

        # === LOCAL VARIABLES ===
        case nodes.LocalVariableReadNode():
            if _NUMBERED_PARAMETER.fullmatch(node.name):
                # x { _1 }
                return _make(node, "call", None, Symbol(node.name))
            return _make(node, "lvar", Symbol(node.name))
        case nodes.LocalVariableWriteNode():
            return _make(node, "lasgn", Symbol(node.name), _assigned_value(node.value, ctx))
        case nodes.LocalVariableOrWriteNode():
            return _or_write(node, "op_asgn_or", "lvar", "lasgn", ctx)
        case nodes.LocalVariableAndWriteNode():
            return _or_write(node, "op_asgn_and", "lvar", "lasgn", ctx)
        case nodes.LocalVariableOperatorWriteNode():
            return _operator_write(node, "lvar", "lasgn", ctx)
        case nodes.LocalVariableTargetNode():
            return _make(node, "lasgn", Symbol(node.name))

        # === INSTANCE VARIABLES ===
        case nodes.InstanceVariableReadNode():
            return _make(node, "ivar", Symbol(node.name))
        case nodes.InstanceVariableWriteNode():
            return _make(node, "iasgn", Symbol(node.name), _assigned_value(node.value, ctx))
        case nodes.InstanceVariableOrWriteNode():
            return _or_write(node, "op_asgn_or", "ivar", "iasgn", ctx)
        case nodes.InstanceVariableAndWriteNode():
            return _or_write(node, "op_asgn_and", "ivar", "iasgn", ctx)
        case nodes.InstanceVariableOperatorWriteNode():
            return _operator_write(node, "ivar", "iasgn", ctx)
        case nodes.InstanceVariableTargetNode():
            return _make(node, "iasgn", Symbol(node.name))

        # === CLASS VARIABLES ===
        case nodes.ClassVariableReadNode():
            return _make(node, "cvar", Symbol(node.name))
        case nodes.ClassVariableWriteNode():
            return _make(node, _cvar_write_tag(ctx), Symbol(node.name),
                         _assigned_value(node.value, ctx))
        case nodes.ClassVariableOrWriteNode():
            return _or_write(node, "op_asgn_or", "cvar", _cvar_write_tag(ctx), ctx)
        case nodes.ClassVariableAndWriteNode():
            return _or_write(node, "op_asgn_and", "cvar", _cvar_write_tag(ctx), ctx)
        case nodes.ClassVariableOperatorWriteNode():
            return _operator_write(node, "cvar", _cvar_write_tag(ctx), ctx)
        case nodes.ClassVariableTargetNode():
            return _make(node, _cvar_write_tag(ctx), Symbol(node.name))

        # === GLOBAL VARIABLES ===
        case nodes.GlobalVariableReadNode():
            return _make(node, "gvar", Symbol(node.name))
        case nodes.GlobalVariableWriteNode():
            return _make(node, "gasgn", Symbol(node.name), _assigned_value(node.value, ctx))
        case nodes.GlobalVariableOrWriteNode():
            return _or_write(node, "op_asgn_or", "gvar", "gasgn", ctx)
        case nodes.GlobalVariableAndWriteNode():
            return _or_write(node, "op_asgn_and", "gvar", "gasgn", ctx)
        case nodes.GlobalVariableOperatorWriteNode():
            return _operator_write(node, "gvar", "gasgn", ctx)
        case nodes.GlobalVariableTargetNode():
            return _make(node, "gasgn", Symbol(node.name))
        case nodes.NumberedReferenceReadNode():
            return _make(node, "nth_ref", node.number)
        case nodes.BackReferenceReadNode():
            # $& is s(:back_ref, :&)
            return _make(node, "back_ref", Symbol(node.name[-1]))

        # === CONSTANTS ===
        case nodes.ConstantReadNode():
            return _make(node, "const", Symbol(node.name))
        case nodes.ConstantWriteNode():
            return _make(node, "cdecl", Symbol(node.name), _assigned_value(node.value, ctx))
        case nodes.ConstantOrWriteNode():
            return _or_write(node, "op_asgn_or", "const", "cdecl", ctx)
        case nodes.ConstantAndWriteNode():
            return _or_write(node, "op_asgn_and", "const", "cdecl", ctx)
        case nodes.ConstantOperatorWriteNode():
            return _operator_write(node, "const", "cdecl", ctx)
        case nodes.ConstantTargetNode():
            return _make(node, "cdecl", Symbol(node.name))
        case nodes.ConstantPathNode():
            return _convert_constant_path(node, ctx)
        case nodes.ConstantPathWriteNode():
            return _make(node, "cdecl", _convert(node.target, ctx),
                         _assigned_value(node.value, ctx))
        case nodes.ConstantPathOrWriteNode():
            return _make(node, "op_asgn_or", _convert(node.target, ctx), _convert(node.value, ctx))
        case nodes.ConstantPathAndWriteNode():
            return _make(node, "op_asgn_and", _convert(node.target, ctx), _convert(node.value, ctx))
        case nodes.ConstantPathOperatorWriteNode():
            return _make(node, "op_asgn", _convert(node.target, ctx),
                         Symbol(node.binary_operator), _convert(node.value, ctx))
        case nodes.ConstantPathTargetNode():
            return _make(node, "const", _convert_constant_path(node, ctx))
        case nodes.ShareableConstantNode():
            return _convert(node.write, ctx)

        # === MULTIPLE ASSIGNMENT ===
        case nodes.MultiWriteNode():
            return _convert_multi_write(node, ctx)
        case nodes.MultiTargetNode():
            return _convert_multi_target(node, ctx)
        case nodes.SplatNode():
            return _convert_splat(node, ctx)
        case nodes.ImplicitRestNode():
            # lambda { |a, | }
            return None

        # === CONTROL FLOW ===
        case nodes.IfNode():
            return _make(node, "if", _convert(node.predicate, ctx),
                         _convert(node.statements, ctx), _convert(node.subsequent, ctx))
        case nodes.UnlessNode():
            return _make(node, "if", _convert(node.predicate, ctx),
                         _convert(node.else_clause, ctx), _convert(node.statements, ctx))
        case nodes.WhileNode() | nodes.UntilNode():
            # ruby_parser's flag means "check before the first iteration",
            # the opposite of Prism's begin_modifier
            tag = "while" if isinstance(node, nodes.WhileNode) else "until"
            return _make(node, tag, _convert(node.predicate, ctx),
                         _convert(node.statements, ctx), not node.begin_modifier)
        case nodes.ForNode():
            kids = [_convert(node.collection, ctx), _convert(node.index, ctx)]
            if node.statements is not None:
                kids.append(_convert(node.statements, ctx))
            return _make(node, "for", *kids)
        case nodes.CaseNode():
            return _make(node, "case", _convert(node.predicate, ctx),
                         *_convert_all(node.conditions, ctx), _convert(node.else_clause, ctx))
        case nodes.WhenNode():
            conditions = _make(node, "array", *_convert_all(node.conditions, ctx))
            body = convert_statements(node.statements, ctx, bare=True) or [None]
            return _make(node, "when", conditions, *body)
        case nodes.ReturnNode():
            return _convert_jump(node, "return", ctx)
        case nodes.BreakNode():
            return _convert_jump(node, "break", ctx)
        case nodes.NextNode():
            return _convert_jump(node, "next", ctx)
        case nodes.RedoNode():
            return _make(node, "redo")
        case nodes.RetryNode():
            return _make(node, "retry")
        case nodes.FlipFlopNode():
            tag = "flip3" if node.exclude_end else "flip2"
            return _make(node, tag, _convert(node.left, ctx), _convert(node.right, ctx))
        case nodes.PreExecutionNode() | nodes.PostExecutionNode():
            tag = "preexe" if isinstance(node, nodes.PreExecutionNode) else "postexe"
            kids = [_make(node, tag), 0]
            if node.statements is not None:
                kids.append(_convert(node.statements, ctx))
            return _make(node, "iter", *kids)

        # === DEFINITIONS ===
        case nodes.DefNode():
            return _convert_def(node, ctx)
        case nodes.ParametersNode():
            return _convert_parameters(node, ctx)
        case nodes.RequiredParameterNode():
            return Symbol(node.name)
        case nodes.OptionalParameterNode():
            return _make(node, "lasgn", Symbol(node.name), _convert(node.value, ctx))
        case nodes.RestParameterNode():
            # ruby_parser spells rest parameters as :"*name" symbols
            return Symbol(f"*{node.name or ''}")
        case nodes.KeywordRestParameterNode():
            return Symbol(f"**{node.name or ''}")
        case nodes.NoKeywordsParameterNode():
            return Symbol("**nil")
        case nodes.BlockParameterNode():
            return Symbol(f"&{node.name or ''}")
        case nodes.RequiredKeywordParameterNode():
            return _make(node, "kwarg", Symbol(node.name))
        case nodes.OptionalKeywordParameterNode():
            return _make(node, "kwarg", Symbol(node.name), _convert(node.value, ctx))
        case nodes.ClassNode():
            inner = dataclasses.replace(ctx, in_def=False)
            return _make(node, "class", _definition_name(node.constant_path, ctx),
                         _convert(node.superclass, ctx), *_definition_body(node.body, inner))
        case nodes.ModuleNode():
            inner = dataclasses.replace(ctx, in_def=False)
            return _make(node, "module", _definition_name(node.constant_path, ctx),
                         *_definition_body(node.body, inner))
        case nodes.SingletonClassNode():
            # class << self
            inner = dataclasses.replace(ctx, in_def=False)
            return _make(node, "sclass", _convert(node.expression, ctx),
                         *_definition_body(node.body, inner))
        case nodes.AliasMethodNode():
            return _make(node, "alias", _convert(node.new_name, ctx), _convert(node.old_name, ctx))
        case nodes.AliasGlobalVariableNode():
            return _make(node, "valias", Symbol(node.new_name.name), Symbol(node.old_name.name))
        case nodes.UndefNode():
            if len(node.names) == 1:
                return _make(node, "undef", _convert(node.names[0], ctx))
            undefs = [_make(name, "undef", _convert(name, ctx)) for name in node.names]
            return _make(node, "block", *undefs)

        # === PATTERN MATCHING ===
        case nodes.CaseMatchNode():
            return _make(node, "case", _convert(node.predicate, ctx),
                         *_convert_all(node.conditions, ctx), _convert(node.else_clause, ctx))
        case nodes.InNode():
            body = convert_statements(node.statements, ctx, bare=True) or [None]
            return _make(node, "in", _convert(node.pattern, ctx), *body)
        case nodes.MatchPredicateNode() | nodes.MatchRequiredNode():
            # x in pattern, x => pattern
            clause = _make(node, "in", _convert(node.pattern, ctx), None)
            return _make(node, "case", _convert(node.value, ctx), clause, None)
        case nodes.ArrayPatternNode():
            kids = _convert_all(node.requireds, ctx)
            if node.rest is not None:
                kids.append(_pattern_rest(node.rest))
            kids.extend(_convert_all(node.posts, ctx))
            return _make(node, "array_pat", _convert(node.constant, ctx), *kids)
        case nodes.FindPatternNode():
            return _make(node, "find_pat", _convert(node.constant, ctx),
                         _pattern_rest(node.left), *_convert_all(node.requireds, ctx),
                         _pattern_rest(node.right))
        case nodes.HashPatternNode():
            kids = _convert_pairs(node.elements, ctx)
            if node.rest is not None:
                kids.append(_pattern_kwrest(node.rest))
            return _make(node, "hash_pat", _convert(node.constant, ctx), *kids)
        case nodes.CapturePatternNode():
            # Integer => x
            return _make(node, "lasgn", Symbol(node.target.name), _convert(node.value, ctx))
        case nodes.AlternationPatternNode():
            return _make(node, "or", _convert(node.left, ctx), _convert(node.right, ctx))
        case nodes.PinnedVariableNode():
            return _convert(node.variable, ctx)
        case nodes.PinnedExpressionNode():
            return _make(node, "begin", _convert(node.expression, ctx))

        case nodes.MissingNode():
            raise UnsupportedNodeError(node, "source has syntax errors")
        case _:
            _logger.debug("No conversion for %s", type(node).__name__)
            raise UnsupportedNodeError(node)


def _make(node, tag, *kids):
    """Create a sexp with the line range of the input node."""
    location = node.location
    return Sexp(tag, *kids, line=location.start_line, max_line=location.end_line)


def _convert_all(items, ctx):
    """Convert a sequence of nodes into a list."""
    return [_convert(item, ctx) for item in items]


def _convert_pairs(elements, ctx):
    """Flatten hash elements into alternating keys and values."""
    kids = []
    for element in elements:
        kids.extend(_convert(element, ctx))
    return kids


def _args(arguments, ctx):
    """Converted call arguments, empty when the call has none."""
    if arguments is None:
        return []
    return _convert(arguments, ctx)


def _is_str(value):
    return isinstance(value, Sexp) and value.is_a("str")


def _is_int_lit(value):
    return isinstance(value, Sexp) and value.is_a("lit") and type(value.value) is int


def _cvar_write_tag(ctx):
    # Same operation, different tag inside a method body
    return "cvasgn" if ctx.in_def else "cvdecl"


def _regexp_options(node):
    options = 0
    if node.multi_line:
        options |= Regexp.MULTILINE
    if node.ignore_case:
        options |= Regexp.IGNORECASE
    if node.extended:
        options |= Regexp.EXTENDED
    if node.ascii_8bit:
        options |= Regexp.ENC_NONE
    return options


def _assigned_value(value, ctx):
    """Right side of a simple assignment.

    An implicit list (`x = 1, 2` or `x = *y`) is wrapped in `:svalue`, with a
    lone splat unwrapped from its array first.
    """
    converted = _convert(value, ctx)
    if isinstance(value, nodes.ArrayNode) and value.opening_loc is None:
        if len(value.elements) == 1 and value.contains_splat:
            converted = converted[1]
        return _make(value, "svalue", converted)
    return converted


def _or_write(node, tag, read_tag, write_tag, ctx):
    """`x ||= v` becomes (read x, write x = v) under the or/and tag."""
    name = Symbol(node.name)
    read = _make(node, read_tag, name)
    write = _make(node, write_tag, name, _convert(node.value, ctx))
    return _make(node, tag, read, write)


def _operator_write(node, read_tag, write_tag, ctx):
    """`x += v` becomes a write of the call `x + v`."""
    name = Symbol(node.name)
    read = _make(node, read_tag, name)
    call = _make(node, "call", read, Symbol(node.binary_operator), _convert(node.value, ctx))
    return _make(node, write_tag, name, call)


def _convert_constant_path(node, ctx):
    if node.parent is None:
        # ::X
        return _make(node, "colon3", Symbol(node.name))
    return _make(node, "colon2", _convert(node.parent, ctx), Symbol(node.name))


def _convert_call(node, ctx):
    """Plain, safe-navigation and attribute-write calls."""
    if node.name == "=~" and isinstance(node.receiver, (nodes.StringNode, nodes.RegularExpressionNode)):
        return _convert_match(node, ctx)

    if node.attribute_write:
        tag = "safe_attrasgn" if node.safe_navigation else "attrasgn"
    else:
        tag = "safe_call" if node.safe_navigation else "call"

    call = _make(node, tag, _convert(node.receiver, ctx), Symbol(node.name),
                 *_args(node.arguments, ctx))
    return _attach_block(call, node, ctx)


def _convert_match(node, ctx):
    """`/x/ =~ y` and `'y' =~ /x/` have their own tags."""
    argument = _args(node.arguments, ctx)[0]
    if isinstance(node.receiver, nodes.StringNode):
        return _make(node, "match3", argument, _convert(node.receiver, ctx))
    return _make(node, "match2", _convert(node.receiver, ctx), argument)


def _attach_block(call, node, ctx):
    """Add a literal block or a block-pass argument to a finished call."""
    block = node.block
    if block is None:
        return call
    if not isinstance(block, nodes.BlockNode):
        return call.append(_convert(block, ctx))

    params = _block_params(block.parameters, ctx)
    kids = [call, params]
    if block.body is not None:
        kids.append(_convert(block, ctx))
    return _make(node, "iter", *kids)


def _block_params(parameters, ctx):
    """Parameter slot of an iter.

    ruby_parser marks a block without declared parameters with a literal 0.
    Numbered parameters are not declared, `_1` reads as a method call.
    """
    if parameters is None or isinstance(parameters, nodes.NumberedParametersNode):
        return 0
    return _convert(parameters, ctx)


def _convert_lambda(node, ctx):
    params = _block_params(node.parameters, ctx)
    kids = [_make(node, "lambda"), params]
    if node.body is not None:
        kids.append(_convert(node.body, ctx))
    return _make(node, "iter", *kids)


def _convert_block_parameters(node, ctx):
    """Block parameters, with `;` shadowed names as a trailing `:shadow`."""
    shadows = None
    if node.locals:
        shadows = _make(node, "shadow", *_convert_all(node.locals, ctx))

    if node.parameters is not None:
        params = _convert(node.parameters, ctx)
        if shadows is not None:
            params = params.append(shadows)
        return params
    if shadows is not None:
        return _make(node, "args", shadows)
    return _make(node, "args")


def _convert_parameters(node, ctx):
    """Parameter list in source order.

    Destructuring targets only occur in the positional slots, so only those
    are converted with the parameter-list flag set. Default values are
    ordinary expressions.
    """
    positional = dataclasses.replace(ctx, in_parameters=True)
    params = _convert_all(node.requireds, positional)
    params.extend(_convert_all(node.optionals, ctx))
    if node.rest is not None:
        params.append(_convert(node.rest, positional))
    params.extend(_convert_all(node.posts, positional))
    params.extend(_convert_all(node.keywords, ctx))
    if node.keyword_rest is not None:
        params.append(_convert(node.keyword_rest, ctx))
    if node.block is not None:
        params.append(_convert(node.block, ctx))
    return _make(node, "args", *params)


def _convert_call_write(node, operator, ctx):
    """`x.y ||= v`, `x.y &&= v` and `x.y += v`."""
    tag = "safe_op_asgn2" if node.safe_navigation else "op_asgn2"
    return _make(node, tag, _convert(node.receiver, ctx), Symbol(node.write_name),
                 Symbol(operator), _convert(node.value, ctx))


def _convert_index_write(node, operator, ctx):
    """`a[1] ||= v`, `a[1] &&= v` and `a[1] += v`."""
    arglist = _make(node.arguments or node, "arglist", *_args(node.arguments, ctx))
    return _make(node, "op_asgn1", _convert(node.receiver, ctx), arglist,
                 Symbol(operator), _convert(node.value, ctx))


def _convert_jump(node, tag, ctx):
    """return, break and next with zero, one or several values."""
    if node.arguments is None:
        return _make(node, tag)
    values = _args(node.arguments, ctx)
    if len(values) > 1:
        return _make(node, tag, _make(node, "array", *values))
    value = values[0]
    if isinstance(value, Sexp) and value.is_a("splat"):
        value = _make(node, "svalue", value)
    return _make(node, tag, value)


def _convert_multi_write(node, ctx):
    """`a, *b, c = value`"""
    targets = _convert_all(node.lefts, ctx)
    # x, = 1, 2 has an implicit rest that ruby_parser leaves out
    if node.rest is not None and not isinstance(node.rest, nodes.ImplicitRestNode):
        targets.append(_convert(node.rest, ctx))
    targets.extend(_convert_all(node.rights, ctx))
    left = _make(node, "array", *targets)

    value = node.value
    if isinstance(value, nodes.ArrayNode):
        if value.opening_loc is not None:
            # a, b = [1, 2] is marked to tell it apart from a, b = 1, 2
            right = _make(value, "to_ary", _convert(value, ctx))
        elif len(value.elements) == 1 and isinstance(value.elements[0], nodes.SplatNode):
            # x, y = *a
            right = _convert(value.elements[0], ctx)
        else:
            right = _convert(value, ctx)
    elif isinstance(value, nodes.SplatNode):
        right = _convert(value, ctx)
    else:
        right = _make(node, "to_ary", _convert(value, ctx))

    return _make(node, "masgn", left, right)


def _convert_multi_target(node, ctx):
    """Nested target list, `(b, c)` in `a, (b, c) = ...` or `|a, (b, c)|`."""
    targets = _convert_all(node.lefts, ctx)
    if node.rest is not None and not isinstance(node.rest, nodes.ImplicitRestNode):
        targets.append(_convert(node.rest, ctx))
    targets.extend(_convert_all(node.rights, ctx))
    if ctx.in_parameters:
        return _make(node, "masgn", *targets)
    return _make(node, "masgn", _make(node, "array", *targets))


def _convert_splat(node, ctx):
    if ctx.in_parameters:
        name = node.expression.name if node.expression is not None else ""
        return Symbol(f"*{name}")
    if node.expression is None:
        # x, * = 1, 2, 3
        return _make(node, "splat")
    return _make(node, "splat", _convert(node.expression, ctx))


def _convert_range(node, ctx):
    """Ranges with integer literals on both ends fold to a literal range."""
    left = _convert(node.left, ctx)
    right = _convert(node.right, ctx)
    if _is_int_lit(left) and _is_int_lit(right):
        value = RubyRange(left.value, right.value, node.exclude_end)
        return _make(node, "lit", value)
    return _make(node, "dot3" if node.exclude_end else "dot2", left, right)


def _convert_begin(node, ctx):
    """`begin ... rescue ... else ... ensure ... end` and method bodies."""
    if node.statements is None:
        result = _make(node, "nil")
    else:
        result = _convert(node.statements, ctx)

    if node.rescue_clause is not None:
        kids = [] if node.statements is None else [result]
        clause = node.rescue_clause
        while clause is not None:
            kids.append(_convert_resbody(clause, ctx))
            clause = clause.subsequent
        if node.else_clause is not None:
            kids.append(_convert(node.else_clause, ctx))
        result = _make(node.statements or node.rescue_clause, "rescue", *kids)
    elif node.else_clause is not None:
        # else without rescue runs after the body
        head = list(result[1:]) if result.is_a("block") else [result]
        result = _make(node, "block", *head, _convert(node.else_clause, ctx))

    if node.ensure_clause is not None:
        result = _make(node.ensure_clause, "ensure", result, _convert(node.ensure_clause, ctx))
    return result


def _convert_resbody(node, ctx):
    """One rescue clause, its body spliced in after the exception list."""
    exceptions = _convert_all(node.exceptions, ctx)
    if node.reference is not None:
        # rescue => e
        target = _convert(node.reference, ctx)
        exceptions.append(target.append(_make(node.reference, "gvar", Symbol("$!"))))
    body = convert_statements(node.statements, ctx, bare=True) or [None]
    return _make(node, "resbody", _make(node, "array", *exceptions), *body)


def _convert_def(node, ctx):
    """Method definitions, the body is spliced and never `:block` wrapped."""
    inner = dataclasses.replace(ctx, in_def=True, in_parameters=False)
    if node.parameters is None:
        args = _make(node, "args")
    else:
        args = _convert(node.parameters, inner)

    if node.body is None:
        body = [_make(node, "nil")]
    elif isinstance(node.body, nodes.StatementsNode):
        body = convert_statements(node.body, inner, bare=True)
    else:
        body = [_convert(node.body, inner)]

    if node.receiver is None:
        return _make(node, "defn", Symbol(node.name), args, *body)
    return _make(node, "defs", _convert(node.receiver, ctx), Symbol(node.name), args, *body)


def _definition_name(constant_path, ctx):
    """Class and module names are bare symbols unless scoped."""
    if isinstance(constant_path, nodes.ConstantReadNode):
        return Symbol(constant_path.name)
    return _convert(constant_path, ctx)


def _definition_body(body, ctx):
    """Class, module and singleton class bodies, always spliced."""
    if body is None:
        return []
    if isinstance(body, nodes.StatementsNode):
        return convert_statements(body, ctx, bare=True)
    return [_convert(body, ctx)]


def _pattern_rest(node):
    """`*name` inside array and find patterns."""
    if isinstance(node, nodes.SplatNode) and node.expression is not None:
        return Symbol(f"*{node.expression.name}")
    return Symbol("*")


def _pattern_kwrest(node):
    """`**name`, `**` or `**nil` at the end of a hash pattern."""
    if isinstance(node, nodes.NoKeywordsParameterNode):
        return _make(node, "kwrest", Symbol("**nil"))
    if node.value is None:
        return _make(node, "kwrest", Symbol("**"))
    return _make(node, "kwrest", Symbol(f"**{node.value.name}"))


def _convert_interpolated(node, tag, ctx):
    """Interpolated strings, commands, symbols and regexps.

    Adjacent literal text is folded together. What remains collapses to a
    plain literal when no computed part is left.
    """
    parts = _fold_parts(node, ctx)
    if not parts:
        parts = [""]
    if len(parts) == 2 and isinstance(parts[0], str) and _is_str(parts[1]):
        return _plain_literal(node, tag, parts[0] + parts[1].value)
    if len(parts) == 1 and isinstance(parts[0], str):
        return _plain_literal(node, tag, parts[0])
    return _make(node, tag, *parts)


def _convert_interpolated_regexp(node, ctx):
    result = _convert_interpolated(node, "dregx", ctx)
    if not result.is_a("dregx"):
        return result
    options = _regexp_options(node)
    if options:
        result = result.append(options)
    if node.once:
        result = result.retag("dregx_once")
    return result


def _plain_literal(node, tag, text):
    match tag:
        case "dstr":
            return _make(node, "str", text)
        case "dxstr":
            return _make(node, "xstr", text)
        case "dsym":
            return _make(node, "lit", Symbol(text))
        case "dregx":
            return _make(node, "lit", Regexp(text, _regexp_options(node)))
    raise ValueError(f"Unexpected interpolation tag: {tag}")


def _fold_parts(node, ctx):
    """Convert interpolation parts, merging adjacent literal text.

    The first part is always bare text, an empty string when the literal
    starts with a computed part.
    """
    parts = []
    for index, part in enumerate(node.parts):
        if index == 0:
            if isinstance(part, nodes.StringNode):
                parts.append(part.unescaped)
                continue
            parts.append("")
        converted = _convert(part, ctx)
        if isinstance(part, nodes.InterpolatedStringNode) and isinstance(converted, Sexp) \
                and converted.is_a("dstr"):
            # "a" "b#{c}" concatenates into one literal
            if converted[1]:
                _absorb(parts, _make(part, "str", converted[1]))
            for kid in converted[2:]:
                _absorb(parts, kid)
        else:
            _absorb(parts, converted)
    return parts


def _absorb(parts, converted):
    """Append a converted part, merging literal text into the previous one."""
    if not _is_str(converted):
        parts.append(converted)
        return
    last = parts[-1]
    if isinstance(last, str):
        parts[-1] = last + converted.value
    elif _is_str(last):
        parts[-1] = last.replace_value(last.value + converted.value)
    else:
        parts.append(converted)
