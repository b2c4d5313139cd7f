"""
prismrp: Prism syntax trees in ruby_parser's sexp format

Converts the syntax trees produced by Ruby's Prism parser into the nested
s-expressions that the legacy ruby_parser gem produces for the same source,
so tools written against ruby_parser keep working on Prism trees.
"""

__version__ = "0.1.0"


from ._error import *
from ._value import *
from ._sexp import *
from ._convert import *
from ._reader import *
from ._load import *
from . import nodes
