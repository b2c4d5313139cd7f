"""Read printed ruby_parser sexps back into Sexp values.

This accepts the `s(:tag, ...)` text that ruby_parser prints and that
`Sexp.format()` produces, so expected trees can be written the same way
ruby_parser's own tests write them. The grammar lives in `lark/sexp.lark`.
"""

__all__ = ["parse_sexp"]

import fractions
import re
from dataclasses import dataclass

import lark

from ._error import SexpSyntaxError
from ._sexp import Sexp
from ._value import Imaginary, Regexp, RubyRange, Symbol


def parse_sexp(text):
    """Parse printed sexp text.

    Args:
        text: (str) Text such as `s(:call, nil, :x).line(1)`

    Returns:
        (Sexp | object) Parsed sexp, or a plain value for non-sexp text

    Raises:
        SexpSyntaxError: If the text is not a valid printed sexp
    """
    parser = _lark_parser("sexp")
    try:
        tree = parser.parse(text)
    except lark.exceptions.UnexpectedInput as e:
        position = getattr(e, "pos_in_stream", None)
        raise SexpSyntaxError(f"Invalid sexp at {e.line}:{e.column}", position) from e
    except lark.exceptions.LarkError as e:
        raise SexpSyntaxError(str(e)) from e

    try:
        return _SexpTransformer().transform(tree)
    except lark.exceptions.VisitError as e:
        raise SexpSyntaxError(str(e.orig_exc)) from e


@dataclass
class _LineMark:
    key: str
    value: int


class _SexpTransformer(lark.Transformer):
    """Build Sexp values from the lark tree, innermost first."""

    def start(self, children):
        return children[0]

    def sexp(self, children):
        kids = []
        lines = {}
        for child in children:
            if isinstance(child, _LineMark):
                lines[child.key] = child.value
            else:
                kids.append(child)
        if not kids or not isinstance(kids[0], Symbol):
            raise ValueError("Sexp must start with a tag symbol")
        return Sexp(*kids, line=lines.get("line"), max_line=lines.get("max_line"))

    def line_mark(self, children):
        key, value = children
        return _LineMark(str(key), int(value))

    def symbol(self, children):
        return Symbol(children[0][1:])

    def quoted_symbol(self, children):
        return Symbol(_unescape(children[0][2:-1]))

    def string(self, children):
        return _unescape(children[0][1:-1])

    def integer(self, children):
        return int(children[0])

    def float(self, children):
        return float(children[0])

    def range(self, children):
        first, dots, last = re.fullmatch(r"(-?\d+)(\.\.\.?)(-?\d+)", children[0]).groups()
        return RubyRange(int(first), int(last), dots == "...")

    def rational(self, children):
        numerator, denominator = children[0][1:-1].split("/")
        return fractions.Fraction(int(numerator), int(denominator))

    def imaginary(self, children):
        real, sign, imag = re.fullmatch(r"\((-?[\d.]+(?:e[+-]?\d+)?)([+-])(.+?)\*?i\)", children[0]).groups()
        imag = _number(imag)
        return Imaginary(_number(real), -imag if sign == "-" else imag)

    def regexp(self, children):
        source, flags = children[0][1:].rsplit("/", 1)
        options = 0
        for flag, bit in _REGEXP_FLAGS.items():
            if flag in flags:
                options |= bit
        return Regexp(source.replace("\\/", "/"), options)

    def nil(self, children):
        return None

    def true(self, children):
        return True

    def false(self, children):
        return False


def _number(text):
    """Integer, float or `(n/d)` rational part of a printed complex."""
    if text.startswith("("):
        numerator, denominator = text[1:-1].split("/")
        return fractions.Fraction(int(numerator), int(denominator))
    if "." in text or "e" in text:
        return float(text)
    return int(text)


_REGEXP_FLAGS = {
    "i": Regexp.IGNORECASE,
    "x": Regexp.EXTENDED,
    "m": Regexp.MULTILINE,
    "n": Regexp.ENC_NONE,
}

_UNESCAPES = {
    '"': '"',
    "\\": "\\",
    "#": "#",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "f": "\f",
    "v": "\v",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "s": " ",
    "0": "\0",
}

_ESCAPE = re.compile(r"\\(u\{[0-9A-Fa-f ]+\}|u[0-9A-Fa-f]{4}|x[0-9A-Fa-f]{1,2}|.)", re.S)


def _unescape(text):
    """Undo Ruby's `String#inspect` escaping."""

    def replace(match):
        escape = match.group(1)
        if escape.startswith("u{"):
            return "".join(chr(int(code, 16)) for code in escape[2:-1].split())
        if escape[0] == "u" and len(escape) == 5:
            return chr(int(escape[1:], 16))
        if escape[0] == "x" and len(escape) > 1:
            return chr(int(escape[1:], 16))
        return _UNESCAPES.get(escape, escape)

    return _ESCAPE.sub(replace, text)


_parsers = {}


def _lark_parser(name):
    """LALR parser for a grammar in the package's `lark/` directory.

    Parsers are built on first use and kept for the life of the process.
    """
    if name in _parsers:
        return _parsers[name]

    parser = lark.Lark.open(f"lark/{name}.lark", rel_to=__file__, parser="lalr", propagate_positions=True)
    _parsers[name] = parser
    return parser
