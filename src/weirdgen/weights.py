"""
Weight tables and weighted category selection.

A weight table maps each category of one family to a non-negative relative
weight. Tables are immutable: build a new one to change the distribution.

**Selection (inverse CDF):**
1. Draw ``u`` uniformly in ``[0, total)``. Integer tables use
   ``source.below(total)``; tables with any float weight use
   ``source.random() * total``.
2. Walk the cumulative weights in table order.
3. Return the first category whose cumulative weight exceeds ``u``.

Exactly one bit source draw is consumed per selection, and categories with
zero weight can never be returned.

**Default tables:**
The defaults give every category a non-zero weight and oversample edge
cases heavily: with the default float table roughly one draw in five is a
NaN or an infinity, where uniform bit sampling gives about one in 256
(binary32) or one in 2048 (binary64).
"""

import json
import math
from numbers import Real

from weirdgen.categories import IntCategory, FloatCategory, lookup
from weirdgen.errors import WeightTableError


class WeightTable(object):
    """
    Ordered, immutable sequence of ``(category, weight)`` pairs.

    Categories that are not listed get weight zero. Entries are stored in
    the family's declaration order regardless of the order given.

    Attributes:
        family: Category enum the table applies to
        entries: Tuple of ``(category, weight)`` pairs, zero weights included
        total: Sum of all weights
    """
    __slots__ = ("family", "entries", "total", "_cumulative", "_integral")

    def __init__(self, family, weights):
        """
        Build and validate a weight table.

        Args:
            family: IntCategory or FloatCategory
            weights: Mapping or iterable of ``(category, weight)`` pairs

        Raises:
            WeightTableError: If a weight is negative, NaN, infinite or not
                a number, a category is repeated or belongs to another
                family, or no weight is strictly positive.
        """
        pairs = weights.items() if hasattr(weights, "items") else weights
        given = {}
        for category, weight in pairs:
            if not isinstance(category, family):
                raise WeightTableError(
                    "{!r} is not a {} category".format(category, family.__name__))
            if category in given:
                raise WeightTableError("category {} listed twice".format(category.name))
            if isinstance(weight, bool) or not isinstance(weight, Real):
                raise WeightTableError(
                    "weight for {} must be a number, got {!r}".format(category.name, weight))
            if not math.isfinite(weight) or weight < 0:
                raise WeightTableError(
                    "weight for {} must be finite and non-negative, got {!r}".format(
                        category.name, weight))
            given[category] = weight

        entries = tuple((category, given.get(category, 0)) for category in family)
        total = sum(weight for _, weight in entries)
        if not total > 0:
            raise WeightTableError(
                "{} weight table has no positive weight".format(family.__name__))

        cumulative = []
        running = 0
        for category, weight in entries:
            if weight:
                running += weight
                cumulative.append((running, category))

        self.family = family
        self.entries = entries
        self.total = total
        self._cumulative = tuple(cumulative)
        self._integral = all(isinstance(weight, int) for _, weight in entries)

    @classmethod
    def only(cls, *categories):
        """Build a table giving weight 1 to each of ``categories``, 0 to the rest."""
        if not categories:
            raise WeightTableError("only() needs at least one category")
        return cls(type(categories[0]), [(category, 1) for category in categories])

    @classmethod
    def from_mapping(cls, family, mapping):
        """
        Build a table from a mapping of category names to weights.

        Names are matched case-insensitively against the family's members,
        so ``{"quiet_nan": 3, "TYPE_MAX": 1}`` is accepted.
        """
        pairs = []
        for name, weight in mapping.items():
            category = name if isinstance(name, family) else lookup(family, str(name))
            if category is None:
                raise WeightTableError(
                    "unknown {} category: {!r}".format(family.__name__, name))
            pairs.append((category, weight))
        return cls(family, pairs)

    @classmethod
    def from_json(cls, family, text):
        """Build a table from a JSON object of category names to weights."""
        try:
            mapping = json.loads(text)
        except ValueError as e:
            raise WeightTableError("weight table is not valid JSON: {}".format(e)) from e
        if not isinstance(mapping, dict):
            raise WeightTableError("weight table JSON must be an object")
        return cls.from_mapping(family, mapping)

    def weight(self, category):
        return dict(self.entries)[category]

    def probability(self, category):
        """Return the selection probability of ``category``."""
        return self.weight(category) / self.total

    def enabled(self):
        """Return the categories with a strictly positive weight, in table order."""
        return [category for _, category in self._cumulative]

    def replace(self, **weights):
        """Return a copy with some weights replaced, keyed by member name."""
        mapping = {category.name: weight for category, weight in self.entries}
        mapping.update(weights)
        return WeightTable.from_mapping(self.family, mapping)

    def as_dict(self):
        return {category.value: weight for category, weight in self.entries}

    def select(self, source):
        """
        Pick one category according to the weights.

        Args:
            source: BitSource supplying the single draw

        Returns:
            A category with non-zero weight
        """
        if self._integral:
            u = source.below(self.total)
        else:
            u = source.random() * self.total
        for bound, category in self._cumulative:
            if u < bound:
                return category
        # Float rounding can leave u at the very top of the range.
        return self._cumulative[-1][1]

    def __eq__(self, other):
        if not isinstance(other, WeightTable):
            return NotImplemented
        return self.family is other.family and self.entries == other.entries

    def __hash__(self):
        return hash((self.family, self.entries))

    def __repr__(self):
        body = ", ".join("{}={}".format(category.name, weight)
                         for category, weight in self.entries if weight)
        return "WeightTable({}: {})".format(self.family.__name__, body)


def install(table, family, reject=()):
    """
    Validate a user table before it is installed for a type.

    Args:
        table: WeightTable or mapping of category names to weights
        family: Category enum the table must belong to
        reject: Categories the target type cannot represent; giving any of
                them a positive weight is a configuration error

    Returns:
        The validated WeightTable
    """
    if not isinstance(table, WeightTable):
        table = WeightTable.from_mapping(family, table)
    if table.family is not family:
        raise WeightTableError("expected a {} table, got a {} table".format(
            family.__name__, table.family.__name__))
    for category in reject:
        if table.weight(category):
            raise WeightTableError(
                "category {} cannot be generated for this type".format(category.name))
    return table


DEFAULT_SIGNED_WEIGHTS = WeightTable(IntCategory, [
    (IntCategory.ZERO, 10),
    (IntCategory.ONE, 5),
    (IntCategory.NEGATIVE_ONE, 5),
    (IntCategory.TYPE_MIN, 10),
    (IntCategory.TYPE_MAX, 10),
    (IntCategory.SMALL_MAGNITUDE, 20),
    (IntCategory.UNIFORM_RANDOM, 40),
])

# A 1-bit signed type only holds 0 and -1; one's share goes to zero.
DEFAULT_SIGNED_BIT_WEIGHTS = DEFAULT_SIGNED_WEIGHTS.replace(ONE=0, ZERO=15)

# Unsigned types have no -1; its share goes to the uniform fallback.
DEFAULT_UNSIGNED_WEIGHTS = WeightTable(IntCategory, [
    (IntCategory.ZERO, 10),
    (IntCategory.ONE, 5),
    (IntCategory.TYPE_MIN, 5),
    (IntCategory.TYPE_MAX, 15),
    (IntCategory.SMALL_MAGNITUDE, 20),
    (IntCategory.UNIFORM_RANDOM, 45),
])

DEFAULT_FLOAT_WEIGHTS = WeightTable(FloatCategory, [
    (FloatCategory.QUIET_NAN, 6),
    (FloatCategory.SIGNALING_NAN, 4),
    (FloatCategory.POSITIVE_INFINITY, 5),
    (FloatCategory.NEGATIVE_INFINITY, 5),
    (FloatCategory.POSITIVE_ZERO, 5),
    (FloatCategory.NEGATIVE_ZERO, 5),
    (FloatCategory.SMALLEST_DENORMAL, 4),
    (FloatCategory.LARGEST_DENORMAL, 4),
    (FloatCategory.DENORMAL, 8),
    (FloatCategory.SMALLEST_NORMAL, 4),
    (FloatCategory.EPSILON, 4),
    (FloatCategory.ONE, 4),
    (FloatCategory.TYPE_MIN, 4),
    (FloatCategory.TYPE_MAX, 4),
    (FloatCategory.NORMAL, 14),
    (FloatCategory.UNIFORM_RANDOM, 20),
])
