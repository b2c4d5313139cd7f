"""Sexp structures in the ruby_parser tree shape.

A sexp is an immutable tuple whose first item is a tag symbol from the
closed `SEXP_TAGS` vocabulary. The remaining items are the children: nested
sexps, plain Ruby values (see `_value`), or `None` where ruby_parser leaves
an explicit nil.

Each sexp tracks the source lines it was produced from (`line` and
`max_line`, 1-based). Like ruby_parser's `Sexp#==`, equality ignores them;
use `matches()` to compare lines as well.
"""

__all__ = ["Sexp", "s", "SEXP_TAGS"]

from ._value import Symbol, ruby_inspect


SEXP_TAGS = [
    # structure
    "block",  # (stmt, stmt, ...) two or more statements
    "begin",  # (expr) pinned pattern expression
    # literals
    "nil",
    "true",
    "false",
    "self",
    "lit",  # (value) number, symbol, range, regexp
    "str",  # (text)
    "xstr",  # (text)
    "dstr",  # (text, part, ...)
    "dxstr",  # (text, part, ...)
    "dsym",  # (text, part, ...)
    "dregx",  # (text, part, ..., options?)
    "dregx_once",  # (text, part, ..., options?)
    "evstr",  # (expr?)
    "array",  # (item, ...)
    "hash",  # (key, value, ...)
    "dot2",  # (first, last)
    "dot3",  # (first, last)
    # variables
    "lvar",
    "lasgn",
    "ivar",
    "iasgn",
    "cvar",
    "cvdecl",  # class scoped write outside a method body
    "cvasgn",  # class scoped write inside a method body
    "gvar",
    "gasgn",
    "const",
    "cdecl",
    "colon2",  # (scope, name)
    "colon3",  # (name)
    "nth_ref",
    "back_ref",
    # compound assignment
    "op_asgn",  # (target, operator, value)
    "op_asgn1",  # (receiver, arglist, operator, value)
    "op_asgn2",  # (receiver, write_name, operator, value)
    "safe_op_asgn2",
    "op_asgn_or",  # (read, write)
    "op_asgn_and",  # (read, write)
    "arglist",
    "masgn",  # (targets, value)
    "to_ary",  # (value) bracketed right side of a masgn
    "splat",
    "svalue",
    # calls
    "call",  # (receiver, name, arg, ...)
    "safe_call",
    "attrasgn",
    "safe_attrasgn",
    "iter",  # (call, args, body?)
    "lambda",
    "args",
    "shadow",
    "kwarg",
    "kwsplat",
    "block_pass",
    "forward_args",
    "super",
    "zsuper",
    "yield",
    "match",
    "match2",
    "match3",
    "defined",
    # control flow
    "if",  # (cond, then, else)
    "and",
    "or",
    "while",  # (cond, body, pre_check)
    "until",  # (cond, body, pre_check)
    "for",  # (collection, target, body?)
    "case",  # (subject, clause, ..., else)
    "when",  # (array, stmt, ...)
    "in",  # (pattern, stmt, ...)
    "return",
    "break",
    "next",
    "redo",
    "retry",
    "rescue",  # (body?, resbody, ..., else?)
    "resbody",  # (array, stmt, ...)
    "ensure",  # (body, ensure)
    "flip2",
    "flip3",
    "preexe",
    "postexe",
    # definitions
    "defn",  # (name, args, stmt, ...)
    "defs",  # (receiver, name, args, stmt, ...)
    "class",  # (name, superclass, stmt, ...)
    "module",  # (name, stmt, ...)
    "sclass",  # (expr, stmt, ...)
    "alias",
    "valias",
    "undef",
    # patterns
    "array_pat",  # (const, pattern, ...)
    "find_pat",  # (const, pre, pattern, ..., post)
    "hash_pat",  # (const, key, pattern, ..., kwrest?)
    "kwrest",
]

_TAGS = {name: Symbol(name) for name in SEXP_TAGS}


class Sexp(tuple):
    """A tagged tuple in the ruby_parser tree shape.

    Args:
        tag: (Symbol | str) Tag from `SEXP_TAGS`
        *kids: Children, sexps or plain values
        line: (int | None) First source line of the construct
        max_line: (int | None) Last source line of the construct

    Raises:
        ValueError: The tag is not part of the vocabulary
    """

    def __new__(cls, tag, *kids, line=None, max_line=None):
        name = tag.name if isinstance(tag, Symbol) else tag
        symbol = _TAGS.get(name)
        if symbol is None:
            raise ValueError(f"Unknown sexp tag: {name!r}")
        sexp = super().__new__(cls, (symbol, *kids))
        sexp.line = line
        sexp.max_line = max_line
        return sexp

    def __getnewargs_ex__(self):
        return tuple(self), {"line": self.line, "max_line": self.max_line}

    def __repr__(self):
        return self.format()

    def __eq__(self, other):
        if not isinstance(other, Sexp) or len(other) != len(self):
            return False
        return all(_same(mine, theirs) for mine, theirs in zip(self, other))

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = tuple.__hash__

    @property
    def sexp_type(self):
        """Tag name as a string."""
        return self[0].name

    @property
    def sexp_body(self):
        """Children after the tag."""
        return self[1:]

    @property
    def value(self):
        """Last child, the payload of single value sexps like `:str`."""
        return self[-1]

    def is_a(self, *tags):
        """Check the tag against one or more tag names."""
        return self.sexp_type in tags

    def append(self, *kids):
        """New sexp with extra trailing children and the same lines."""
        return Sexp(self[0], *self[1:], *kids, line=self.line, max_line=self.max_line)

    def retag(self, tag):
        """New sexp with a different tag and the same children and lines."""
        return Sexp(tag, *self[1:], line=self.line, max_line=self.max_line)

    def replace_value(self, value):
        """New single value sexp holding a different value."""
        if len(self) != 2:
            raise ValueError(f"Expected single value sexp, got {self!r}")
        return Sexp(self[0], value, line=self.line, max_line=self.max_line)

    def matches(self, other, lines=True):
        """Hierarchical comparison of structure and line metadata.

        Lines are only checked where this (the expected) side has them set,
        so partially annotated golden sexps compare on what they specify.

        Args:
            other: Sexp to compare against
            lines: Also compare `line` and `max_line`

        Returns:
            True if other has the same structure and lines
        """
        if self != other:
            return False
        if lines:
            if self.line is not None and self.line != other.line:
                return False
            if self.max_line is not None and self.max_line != other.max_line:
                return False
        for mine, theirs in zip(self, other):
            if isinstance(mine, Sexp) and not mine.matches(theirs, lines):
                return False
        return True

    def find_all(self, tag):
        """Find all descendant sexps with the tag, including self."""
        results = [self] if self.sexp_type == tag else []
        for kid in self[1:]:
            if isinstance(kid, Sexp):
                results.extend(kid.find_all(tag))
        return results

    def find(self, tag):
        """Find first descendant sexp with the tag, including self."""
        found = self.find_all(tag)
        return found[0] if found else None

    def format(self, lines=False):
        """Print in ruby_parser's `s(:tag, ...)` form.

        With lines, each sexp with a known line gets the `.line(N)` suffix
        used throughout ruby_parser's own tests.
        """
        parts = [repr(self[0])]
        for kid in self[1:]:
            if isinstance(kid, Sexp):
                parts.append(kid.format(lines))
            else:
                parts.append(ruby_inspect(kid))
        text = f"s({', '.join(parts)})"
        if lines and self.line is not None:
            text += f".line({self.line})"
        return text


def _same(mine, theirs):
    if isinstance(mine, Sexp) or isinstance(theirs, Sexp):
        return isinstance(mine, Sexp) and isinstance(theirs, Sexp) and mine == theirs
    return type(mine) is type(theirs) and mine == theirs


def s(tag, *kids, line=None, max_line=None):
    """Shorthand sexp constructor, as in ruby_parser's `s(...)`."""
    return Sexp(tag, *kids, line=line, max_line=max_line)
