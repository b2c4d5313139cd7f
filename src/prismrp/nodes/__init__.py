"""Input tree nodes, one class per Prism node kind."""

from ._base import *
from ._call import *
from ._control import *
from ._define import *
from ._literal import *
from ._pattern import *
from ._variable import *
