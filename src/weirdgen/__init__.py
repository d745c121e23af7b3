"""weirdgen - edge-case biased random values for fuzzing.

Not cryptographically secure: use these generators for test inputs only.
"""

__version__ = "0.1.0"

from . import global_functions
from .bitsource import BitSource, RandomBitSource, ScriptedBitSource
from .categories import FloatCategory, IntCategory
from .errors import (
    BitSourceError,
    BitSourceExhausted,
    UnsupportedType,
    WeightTableError,
    WeirdgenError,
)
from .generator import Sample, WeirdGenerator
from .global_functions import *  # noqa: F401,F403
from .ieee754 import F32, F64, FloatFormat
from .integers import IntType
from .weights import (
    DEFAULT_FLOAT_WEIGHTS,
    DEFAULT_SIGNED_WEIGHTS,
    DEFAULT_UNSIGNED_WEIGHTS,
    WeightTable,
)

__all__ = [
    "BitSource",
    "RandomBitSource",
    "ScriptedBitSource",
    "FloatCategory",
    "IntCategory",
    "WeirdgenError",
    "WeightTableError",
    "UnsupportedType",
    "BitSourceError",
    "BitSourceExhausted",
    "Sample",
    "WeirdGenerator",
    "FloatFormat",
    "F32",
    "F64",
    "IntType",
    "WeightTable",
    "DEFAULT_FLOAT_WEIGHTS",
    "DEFAULT_SIGNED_WEIGHTS",
    "DEFAULT_UNSIGNED_WEIGHTS",
    "__version__",
] + global_functions.__all__
