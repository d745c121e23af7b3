"""
Floating-point weird generator.

Builds IEEE-754 binary32 and binary64 bit patterns category by category.
Every category fixes some of the sign, exponent and mantissa fields and
leaves the rest free; free bits are filled from a single bit source draw.

**Category layout** (``E`` = all-ones exponent, ``M`` = all-ones mantissa)::

    QUIET_NAN           exp E       mantissa 1xxx...x       sign free
    SIGNALING_NAN       exp E       mantissa 0xxx...x != 0  sign free
    +/-INFINITY         exp E       mantissa 0              sign fixed
    +/-ZERO             exp 0       mantissa 0              sign fixed
    SMALLEST_DENORMAL   exp 0       mantissa 1              sign free
    LARGEST_DENORMAL    exp 0       mantissa M              sign free
    DENORMAL            exp 0       mantissa != 0           sign free
    SMALLEST_NORMAL     exp 1       mantissa 0              sign free
    EPSILON             exp bias-m  mantissa 0              positive
    ONE                 exp bias    mantissa 0              sign free
    TYPE_MIN / TYPE_MAX exp E-1     mantissa M              sign fixed
    NORMAL              exp 1..E-1  mantissa free           sign free

``UNIFORM_RANDOM`` draws full-width patterns and rejects NaN and infinity,
giving up after ``UNIFORM_RETRIES`` draws and returning ``+0.0``.
"""

import logging

from weirdgen.categories import FloatCategory
from weirdgen.ieee754 import compose, float_format
from weirdgen.weights import DEFAULT_FLOAT_WEIGHTS, install

LOG = logging.getLogger(__name__)

UNIFORM_RETRIES = 16


def _signed_payload(source, count):
    """Draw a sign bit and a payload in ``[1, count]`` with one draw."""
    raw = source.below(2 * count)
    return raw & 1, (raw >> 1) + 1


def nan_bits(fmt, source):
    """Any NaN: quiet or signaling, any payload, either sign."""
    sign, mantissa = _signed_payload(source, fmt.mantissa_mask)
    return compose(fmt, sign, fmt.exponent_max, mantissa)


def quiet_nan_bits(fmt, source):
    raw = source.bits(fmt.mantissa_bits)
    payload = raw >> 1
    return compose(fmt, raw & 1, fmt.exponent_max, fmt.quiet_bit | payload)


def signaling_nan_bits(fmt, source):
    # Payload must stay non-zero: an all-zero mantissa is infinity.
    sign, payload = _signed_payload(source, fmt.quiet_bit - 1)
    return compose(fmt, sign, fmt.exponent_max, payload)


def denormal_bits(fmt, source):
    sign, mantissa = _signed_payload(source, fmt.mantissa_mask)
    return compose(fmt, sign, 0, mantissa)


def normal_bits(fmt, source):
    """Any normal number: exponent in ``[1, E-1]``, free mantissa and sign."""
    exponents = fmt.exponent_max - 1
    raw = source.below(exponents << (fmt.mantissa_bits + 1))
    sign = raw & 1
    mantissa = (raw >> 1) & fmt.mantissa_mask
    exponent = (raw >> (fmt.mantissa_bits + 1)) + 1
    return compose(fmt, sign, exponent, mantissa)


def uniform_finite_bits(fmt, source):
    for _ in range(UNIFORM_RETRIES):
        bits = source.bits(fmt.width)
        if bits & fmt.exponent_mask != fmt.exponent_mask:
            return bits
    LOG.warning("no finite %s pattern in %d draws, using +0.0", fmt.name, UNIFORM_RETRIES)
    return 0


def fixed_bits(fmt, category, sign=0):
    """Bit pattern of a category whose exponent and mantissa are constant."""
    if category is FloatCategory.POSITIVE_INFINITY:
        return compose(fmt, 0, fmt.exponent_max, 0)
    elif category is FloatCategory.NEGATIVE_INFINITY:
        return compose(fmt, 1, fmt.exponent_max, 0)
    elif category is FloatCategory.POSITIVE_ZERO:
        return 0
    elif category is FloatCategory.NEGATIVE_ZERO:
        return fmt.sign_mask
    elif category is FloatCategory.SMALLEST_DENORMAL:
        return compose(fmt, sign, 0, 1)
    elif category is FloatCategory.LARGEST_DENORMAL:
        return compose(fmt, sign, 0, fmt.mantissa_mask)
    elif category is FloatCategory.SMALLEST_NORMAL:
        return compose(fmt, sign, 1, 0)
    elif category is FloatCategory.EPSILON:
        return compose(fmt, sign, fmt.bias - fmt.mantissa_bits, 0)
    elif category is FloatCategory.ONE:
        return compose(fmt, sign, fmt.bias, 0)
    elif category is FloatCategory.TYPE_MAX:
        return compose(fmt, 0, fmt.exponent_max - 1, fmt.mantissa_mask)
    elif category is FloatCategory.TYPE_MIN:
        return compose(fmt, 1, fmt.exponent_max - 1, fmt.mantissa_mask)
    raise ValueError("{} has no fixed bit pattern".format(category.name))


# Fixed patterns whose sign bit is drawn from the source.
_FREE_SIGN = frozenset([
    FloatCategory.SMALLEST_DENORMAL,
    FloatCategory.LARGEST_DENORMAL,
    FloatCategory.SMALLEST_NORMAL,
    FloatCategory.ONE,
])

_BUILDERS = {
    FloatCategory.QUIET_NAN: quiet_nan_bits,
    FloatCategory.SIGNALING_NAN: signaling_nan_bits,
    FloatCategory.DENORMAL: denormal_bits,
    FloatCategory.NORMAL: normal_bits,
    FloatCategory.UNIFORM_RANDOM: uniform_finite_bits,
}


def build_float_bits(fmt, category, source):
    """
    Construct the bit pattern of a value of ``category``.

    Args:
        fmt: FloatFormat (or width) of the result
        category: FloatCategory to build
        source: BitSource filling the free bits

    Returns:
        Integer bit pattern of width ``fmt.width``
    """
    fmt = float_format(fmt)
    builder = _BUILDERS.get(category)
    if builder is not None:
        return builder(fmt, source)
    sign = source.bits(1) if category in _FREE_SIGN else 0
    return fixed_bits(fmt, category, sign)


def install_float_weights(weights):
    return install(weights, FloatCategory)


def sample_float_bits(source, width, weights=None):
    """
    Pick a category and build its bit pattern.

    Returns:
        ``(category, bits)`` tuple
    """
    fmt = float_format(width)
    table = DEFAULT_FLOAT_WEIGHTS if weights is None else install_float_weights(weights)
    category = table.select(source)
    return category, build_float_bits(fmt, category, source)


_SPECIALS = (
    (FloatCategory.POSITIVE_ZERO, 0),
    (FloatCategory.NEGATIVE_ZERO, 0),
    (FloatCategory.POSITIVE_INFINITY, 0),
    (FloatCategory.NEGATIVE_INFINITY, 0),
    (FloatCategory.ONE, 0),
    (FloatCategory.ONE, 1),
    (FloatCategory.TYPE_MIN, 0),
    (FloatCategory.TYPE_MAX, 0),
    (FloatCategory.SMALLEST_NORMAL, 0),
    (FloatCategory.SMALLEST_NORMAL, 1),
    (FloatCategory.EPSILON, 0),
    (FloatCategory.EPSILON, 1),
)


def special_bits(fmt, source):
    """
    One of twelve special values, uniformly.

    Zero and infinity of either sign, +/-1, the finite extrema, +/- the
    smallest normal and +/- epsilon.
    """
    fmt = float_format(fmt)
    category, sign = _SPECIALS[source.below(len(_SPECIALS))]
    return fixed_bits(fmt, category, sign)
