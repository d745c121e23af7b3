"""
Integer weird generator.

Generates integers of any bit width and signedness, favouring the values
that break integer handling: zero, one, minus one, the type extrema and
small powers of two. A table-driven category is picked first, then at most
one more draw fills in the value.

**Small magnitudes:**
``SMALL_MAGNITUDE`` returns ``+/- 2**k`` with ``k`` geometrically
distributed over ``0..SMALL_EXPONENT_MAX``. One raw draw of
``SMALL_EXPONENT_MAX + 1`` bits provides both: the low bit is the sign and
``k`` is the number of trailing zero bits in the rest (all zero gives the
maximum exponent). For ``SMALL_EXPONENT_MAX = 4`` that is
``P(k) = 1/2, 1/4, 1/8, 1/16, 1/16``.
"""

import struct
from dataclasses import dataclass

from weirdgen.categories import IntCategory
from weirdgen.errors import UnsupportedType
from weirdgen.weights import (
    DEFAULT_SIGNED_BIT_WEIGHTS, DEFAULT_SIGNED_WEIGHTS, DEFAULT_UNSIGNED_WEIGHTS, install,
)

SMALL_EXPONENT_MAX = 4

# Native pointer width, used for usize/isize.
POINTER_WIDTH = struct.calcsize("P") * 8


@dataclass(frozen=True)
class IntType:
    """A fixed-width two's complement integer type."""
    width: int
    signed: bool

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 1:
            raise UnsupportedType("integer width must be a positive int, got {!r}".format(self.width))

    @property
    def name(self):
        return "{}{}".format("i" if self.signed else "u", self.width)

    @property
    def min(self):
        return -(1 << (self.width - 1)) if self.signed else 0

    @property
    def max(self):
        return (1 << (self.width - 1)) - 1 if self.signed else (1 << self.width) - 1

    @property
    def default_weights(self):
        if not self.signed:
            return DEFAULT_UNSIGNED_WEIGHTS
        if self.max < 1:
            return DEFAULT_SIGNED_BIT_WEIGHTS
        return DEFAULT_SIGNED_WEIGHTS

    def contains(self, value):
        return self.min <= value <= self.max

    def clamp(self, value):
        return max(self.min, min(self.max, value))

    def from_unsigned(self, raw):
        """Reinterpret ``width`` raw bits as a value of this type."""
        if self.signed and raw & (1 << (self.width - 1)):
            return raw - (1 << self.width)
        return raw

    def to_unsigned(self, value):
        """Return the two's complement bit pattern of ``value``."""
        return value & ((1 << self.width) - 1)


INT_TYPES = {
    "u8": IntType(8, False),
    "u16": IntType(16, False),
    "u32": IntType(32, False),
    "u64": IntType(64, False),
    "u128": IntType(128, False),
    "usize": IntType(POINTER_WIDTH, False),
    "i8": IntType(8, True),
    "i16": IntType(16, True),
    "i32": IntType(32, True),
    "i64": IntType(64, True),
    "i128": IntType(128, True),
    "isize": IntType(POINTER_WIDTH, True),
}


def unrepresentable(int_type):
    """Categories that ``int_type`` has no value for."""
    missing = []
    if int_type.max < 1:
        missing.append(IntCategory.ONE)
    if not int_type.signed:
        missing.append(IntCategory.NEGATIVE_ONE)
    return tuple(missing)


def install_int_weights(int_type, weights):
    """Validate ``weights`` for ``int_type``, see ``weights.install``."""
    return install(weights, IntCategory, reject=unrepresentable(int_type))


def small_magnitude(int_type, raw):
    """Build a small power of two from a raw draw of ``SMALL_EXPONENT_MAX + 1`` bits."""
    negative = raw & 1
    rest = raw >> 1
    k = 0
    while k < SMALL_EXPONENT_MAX and not rest & 1:
        rest >>= 1
        k += 1
    value = 1 << k
    if negative and int_type.signed:
        value = -value
    return int_type.clamp(value)


def build_integer(int_type, category, source):
    """
    Construct a value of ``category`` for ``int_type``.

    Consumes at most one draw from ``source``.
    """
    if category is IntCategory.ZERO:
        return 0
    elif category is IntCategory.ONE:
        if int_type.max < 1:
            raise UnsupportedType("{} cannot hold 1".format(int_type.name))
        return 1
    elif category is IntCategory.NEGATIVE_ONE:
        if not int_type.signed:
            raise UnsupportedType("{} has no negative values".format(int_type.name))
        return -1
    elif category is IntCategory.TYPE_MIN:
        return int_type.min
    elif category is IntCategory.TYPE_MAX:
        return int_type.max
    elif category is IntCategory.SMALL_MAGNITUDE:
        return small_magnitude(int_type, source.bits(SMALL_EXPONENT_MAX + 1))
    elif category is IntCategory.UNIFORM_RANDOM:
        return int_type.from_unsigned(source.bits(int_type.width))
    raise UnsupportedType("not an integer category: {!r}".format(category))


def sample_integer(source, int_type, weights=None):
    """
    Pick a category and build a value for it.

    Args:
        source: BitSource to draw from
        int_type: IntType of the result
        weights: Optional WeightTable overriding the type's default

    Returns:
        ``(category, value)`` tuple
    """
    table = int_type.default_weights if weights is None else install_int_weights(int_type, weights)
    category = table.select(source)
    return category, build_integer(int_type, category, source)


def special_integer(source, int_type):
    """Return one of zero, one, minus one (signed only), min or max, uniformly."""
    values = [0, 1, int_type.max] if int_type.max >= 1 else [0, int_type.max]
    if int_type.signed:
        values += [-1, int_type.min]
    return values[source.below(len(values))]
