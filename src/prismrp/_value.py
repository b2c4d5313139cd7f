"""Ruby literal values carried inside sexps.

Sexp children are either nested sexps or plain values. Most plain values
map onto Python builtins (`None` for nil, `bool`, `int`, `float`, `str`,
`Fraction` for rationals). The few Ruby values with no Python equivalent
are defined here.
"""

__all__ = ["Symbol", "RubyRange", "Regexp", "Imaginary", "ruby_inspect"]

import fractions
import math
import re
from dataclasses import dataclass


class Symbol:
    """A Ruby symbol.

    Symbols never compare equal to strings, so `s(:str, "x")` and
    `s(:str, :x)` stay distinct.

    Args:
        name: (str) Symbol text without the leading colon

    Attributes:
        name: (str) Symbol text without the leading colon
    """

    __slots__ = ("name",)

    def __init__(self, name):
        if isinstance(name, Symbol):
            name = name.name
        self.name = name

    def __repr__(self):
        if _is_plain_symbol(self.name):
            return f":{self.name}"
        return f":{_inspect_str(self.name)}"

    def __str__(self):
        return self.name

    def __eq__(self, other):
        return isinstance(other, Symbol) and other.name == self.name

    def __hash__(self):
        return hash(("symbol", self.name))


@dataclass(frozen=True)
class RubyRange:
    """Literal integer range such as `1..3` or `1...3`."""

    first: int
    last: int
    exclude_end: bool = False

    def __repr__(self):
        dots = "..." if self.exclude_end else ".."
        return f"{self.first}{dots}{self.last}"


@dataclass(frozen=True)
class Regexp:
    """Literal regular expression with Ruby option bits."""

    IGNORECASE = 1
    EXTENDED = 2
    MULTILINE = 4
    ENC_NONE = 32

    source: str
    options: int = 0

    def __repr__(self):
        source = re.sub(r"(?<!\\)/", r"\/", self.source)
        flags = ""
        if self.options & Regexp.MULTILINE:
            flags += "m"
        if self.options & Regexp.IGNORECASE:
            flags += "i"
        if self.options & Regexp.EXTENDED:
            flags += "x"
        if self.options & Regexp.ENC_NONE:
            flags += "n"
        return f"/{source}/{flags}"


@dataclass(frozen=True, eq=False)
class Imaginary:
    """Imaginary literal such as `2i`, `2.0i` or `3ri`.

    Both parts keep their Ruby numeric type, so `2i` and `2.0i` are
    different values. Python's `complex` would store both as floats.
    """

    real: "int | float | fractions.Fraction"
    imag: "int | float | fractions.Fraction"

    def __eq__(self, other):
        return isinstance(other, Imaginary) and _same_number(self.real, other.real) \
            and _same_number(self.imag, other.imag)

    def __hash__(self):
        return hash(("imaginary", self.real, self.imag))

    def __repr__(self):
        imag = self.imag
        negative = imag < 0 or (isinstance(imag, float) and math.copysign(1, imag) < 0)
        text = ruby_inspect(-imag if negative else imag)
        if not text[-1].isdigit():
            # (0+(3/1)*i)
            text += "*"
        sign = "-" if negative else "+"
        return f"({ruby_inspect(self.real)}{sign}{text}i)"


def _same_number(mine, theirs):
    return type(mine) is type(theirs) and mine == theirs


_IDENT = r"[A-Za-z_\u0080-\U0010ffff][A-Za-z_0-9\u0080-\U0010ffff]*"
_PLAIN_SYMBOL = re.compile(
    "|".join(
        [
            rf"{_IDENT}[?!=]?",
            rf"@@?{_IDENT}",
            rf"\${_IDENT}",
            r"\$[0-9]+",
            r"\$[~*$?!@/\\;,.=:<>\"&`'+0]",
            r"\$-[A-Za-z0-9_]",
            r"\[\]=?",
            r"\*\*?",
            r"[-+]@?",
            r"[/%~^&|`]",
            r"!|!=|!~",
            r"<=>|<<|<=|<|>>|>=|>",
            r"===?|=~",
        ]
    )
)

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\f": "\\f",
    "\v": "\\v",
    "\a": "\\a",
    "\b": "\\b",
    "\x1b": "\\e",
}


def _is_plain_symbol(name):
    return bool(name) and _PLAIN_SYMBOL.fullmatch(name) is not None


def _inspect_str(text):
    """Quote text the way Ruby's `String#inspect` does."""
    out = ['"']
    for i, char in enumerate(text):
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif char == "#" and text[i + 1:i + 2] in ("{", "$", "@"):
            out.append("\\#")
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{ord(char):04X}")
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


def _inspect_float(value):
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        if "." not in mantissa:
            mantissa += ".0"
        if exponent[0] not in "+-":
            exponent = "+" + exponent
        text = f"{mantissa}e{exponent}"
    return text


def ruby_inspect(value):
    """Format a sexp child the way Ruby's `inspect` prints it."""
    from ._sexp import Sexp

    match value:
        case None:
            return "nil"
        case True:
            return "true"
        case False:
            return "false"
        case Sexp():
            return value.format()
        case str():
            return _inspect_str(value)
        case int():
            return str(value)
        case float():
            return _inspect_float(value)
        case fractions.Fraction():
            return f"({value.numerator}/{value.denominator})"
        case _:
            return repr(value)
