"""
IEEE-754 binary32/binary64 bit manipulation.

Floats are converted to and from their raw bit patterns with ``struct``.
A bit pattern is split into three fields::

    s eeeeeeee mmmmmmmmmmmmmmmmmmmmmmm      (binary32)
    s eeeeeeeeeee mmmm...mmmm (52 bits)      (binary64)

The most significant mantissa bit is the quiet bit: set for quiet NaNs,
clear for signaling NaNs (IEEE-754 2008; some old MIPS and PA-RISC parts
use the opposite convention).

**Signaling NaN caveat:**
A binary64 pattern survives ``from_bits`` unchanged. A binary32 pattern is
widened to a Python float on the way out, and CPython releases before 3.14
may set the quiet bit of a signaling NaN while doing so. Use the bit-level
functions when the exact pattern matters.
"""

import struct
from dataclasses import dataclass

from weirdgen.errors import UnsupportedType


@dataclass(frozen=True)
class FloatFormat:
    """Field layout of an IEEE-754 binary interchange format."""
    name: str
    width: int
    exponent_bits: int
    mantissa_bits: int
    struct_code: str

    @property
    def bias(self):
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def sign_mask(self):
        return 1 << (self.width - 1)

    @property
    def exponent_max(self):
        """Raw value of the all-ones exponent field (NaN and infinity)."""
        return (1 << self.exponent_bits) - 1

    @property
    def exponent_mask(self):
        return self.exponent_max << self.mantissa_bits

    @property
    def mantissa_mask(self):
        return (1 << self.mantissa_bits) - 1

    @property
    def quiet_bit(self):
        return 1 << (self.mantissa_bits - 1)

    @property
    def all_bits(self):
        return (1 << self.width) - 1


F32 = FloatFormat("f32", 32, 8, 23, "<f")
F64 = FloatFormat("f64", 64, 11, 52, "<d")

FORMATS = {32: F32, 64: F64}


def float_format(width):
    """Return the FloatFormat for a width of 32 or 64 bits."""
    if isinstance(width, FloatFormat):
        return width
    try:
        return FORMATS[width]
    except (KeyError, TypeError):
        raise UnsupportedType("unsupported float width: {!r}".format(width)) from None


def compose(fmt, sign, exponent, mantissa):
    """Assemble a bit pattern from its sign, exponent and mantissa fields."""
    return ((sign & 1) << (fmt.width - 1)) \
        | ((exponent & fmt.exponent_max) << fmt.mantissa_bits) \
        | (mantissa & fmt.mantissa_mask)


def decompose(fmt, bits):
    """Split a bit pattern into a ``(sign, exponent, mantissa)`` tuple."""
    return (bits >> (fmt.width - 1)) & 1, \
        (bits >> fmt.mantissa_bits) & fmt.exponent_max, \
        bits & fmt.mantissa_mask


def to_bits(value, width=64):
    """Return the raw bit pattern of ``value`` stored at ``width`` bits."""
    fmt = float_format(width)
    raw = struct.pack(fmt.struct_code, value)
    return int.from_bytes(raw, "little")


def from_bits(bits, width=64):
    """Return the Python float stored in bit pattern ``bits``."""
    fmt = float_format(width)
    if not 0 <= bits <= fmt.all_bits:
        raise ValueError("bit pattern {:#x} does not fit in {} bits".format(bits, fmt.width))
    return struct.unpack(fmt.struct_code, bits.to_bytes(fmt.width // 8, "little"))[0]


def classify(bits, width=64):
    """
    Classify a bit pattern.

    Returns:
        One of "nan", "infinite", "zero", "subnormal" or "normal"
    """
    fmt = float_format(width)
    _, exponent, mantissa = decompose(fmt, bits)
    if exponent == fmt.exponent_max:
        return "nan" if mantissa else "infinite"
    if exponent == 0:
        return "subnormal" if mantissa else "zero"
    return "normal"


def is_nan_bits(bits, width=64):
    fmt = float_format(width)
    _, exponent, mantissa = decompose(fmt, bits)
    return exponent == fmt.exponent_max and mantissa != 0


def is_signaling_nan_bits(bits, width=64):
    """Return whether ``bits`` is a NaN with the quiet bit clear."""
    fmt = float_format(width)
    return is_nan_bits(bits, fmt) and not bits & fmt.quiet_bit


def is_signaling_nan(value, width=64):
    """Return whether the float ``value`` is a signaling NaN at ``width`` bits."""
    return is_signaling_nan_bits(to_bits(value, width), width)


def exact_eq(lhs, rhs, width=64):
    """Compare two floats bit for bit (``-0.0 != 0.0``, NaN payloads matter)."""
    return to_bits(lhs, width) == to_bits(rhs, width)
