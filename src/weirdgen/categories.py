"""
Edge-case categories.

Each type family has a closed set of categories. A category identifies one
class of values (NaN, type maximum, a small power of two, ...). The order
of declaration is the order in which weight tables are iterated.
"""

from enum import Enum


class IntCategory(Enum):
    """Categories of integer values."""
    ZERO = "zero"
    ONE = "one"
    NEGATIVE_ONE = "negative_one"
    TYPE_MIN = "type_min"
    TYPE_MAX = "type_max"
    SMALL_MAGNITUDE = "small_magnitude"
    UNIFORM_RANDOM = "uniform_random"


class FloatCategory(Enum):
    """Categories of IEEE-754 floating-point values."""
    QUIET_NAN = "quiet_nan"
    SIGNALING_NAN = "signaling_nan"
    POSITIVE_INFINITY = "positive_infinity"
    NEGATIVE_INFINITY = "negative_infinity"
    POSITIVE_ZERO = "positive_zero"
    NEGATIVE_ZERO = "negative_zero"
    SMALLEST_DENORMAL = "smallest_denormal"
    LARGEST_DENORMAL = "largest_denormal"
    DENORMAL = "denormal"
    SMALLEST_NORMAL = "smallest_normal"
    EPSILON = "epsilon"
    ONE = "one"
    TYPE_MIN = "type_min"
    TYPE_MAX = "type_max"
    NORMAL = "normal"
    UNIFORM_RANDOM = "uniform_random"


def lookup(family, name):
    """
    Find a category of ``family`` by name.

    Accepts either the member name (``"QUIET_NAN"``) or its value
    (``"quiet_nan"``), case-insensitively.

    Returns:
        The category, or None when no member matches
    """
    key = name.strip().lower()
    for category in family:
        if category.value == key:
            return category
    return None
