"""
Primitive type names.

Maps the names accepted by the CLI and by ``WeirdGenerator.install_weights``
to type descriptions: ``f32``/``f64`` to a FloatFormat, ``u8`` .. ``u128``,
``i8`` .. ``i128``, ``usize`` and ``isize`` to an IntType. Arbitrary widths
such as ``i24`` or ``u7`` are accepted as well.
"""

import re

from weirdgen.errors import UnsupportedType
from weirdgen.ieee754 import F32, F64
from weirdgen.integers import INT_TYPES, IntType

FLOAT_TYPES = {"f32": F32, "f64": F64}

_INT_NAME = re.compile(r"^([iu])(\d+)$")


def int_type(name):
    """Return the IntType called ``name``."""
    if name in INT_TYPES:
        return INT_TYPES[name]
    match = _INT_NAME.match(str(name))
    if match is None:
        raise UnsupportedType("unknown integer type: {!r}".format(name))
    return IntType(int(match.group(2)), match.group(1) == "i")


def parse_type(name):
    """Return the FloatFormat or IntType called ``name``."""
    if name in FLOAT_TYPES:
        return FLOAT_TYPES[name]
    return int_type(name)


def type_names():
    return list(FLOAT_TYPES) + list(INT_TYPES)
