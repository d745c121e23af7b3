"""
The weird data generator.

``WeirdGenerator`` ties a bit source to the per-type weight tables and
exposes one method per primitive type. Besides the source it only holds
the installed weight tables, which are immutable, so a generator can be
duplicated freely as long as each copy owns its source.

**Usage:**
```python
from weirdgen import WeirdGenerator, WeightTable, FloatCategory

gen = WeirdGenerator(seed=42)
gen.f32()           # NaN, infinities and denormals show up often
gen.i8()            # -128, -1, 0, 1, 127 show up often
gen.weird_integer(24, signed=True)

nan_only = WeightTable.only(FloatCategory.QUIET_NAN, FloatCategory.SIGNALING_NAN)
gen.weird_float(32, weights=nan_only)
```
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Optional, Union

from weirdgen.bitsource import BitSource, RandomBitSource
from weirdgen.categories import FloatCategory, IntCategory
from weirdgen.floats import (
    build_float_bits,
    install_float_weights,
    nan_bits,
    sample_float_bits,
    special_bits,
)
from weirdgen.ieee754 import F32, F64, FloatFormat, from_bits, float_format
from weirdgen.integers import (
    INT_TYPES,
    IntType,
    install_int_weights,
    sample_integer,
    special_integer,
)
from weirdgen.primitives import parse_type
from weirdgen.weights import WeightTable

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sample:
    """A generated value together with the category it was built from."""
    category: Union[IntCategory, FloatCategory]
    bits: int
    value: Union[int, float]
    width: int


class WeirdGenerator(object):
    """
    Generates primitive values that favour edge cases.

    Attributes:
        source: BitSource all randomness is drawn from
        _int_weights: Installed integer tables, keyed by IntType
        _float_weights: Installed float tables, keyed by FloatFormat
    """
    def __init__(self, source: Optional[BitSource] = None, seed=None):
        """
        Initialize a generator.

        Args:
            source: Bit source to draw from. When None, a RandomBitSource
                    seeded with ``seed`` is created.
            seed: Seed for the default source; ignored when ``source`` is
                  given.
        """
        self.source = source if source is not None else RandomBitSource(seed)
        self._int_weights = {}
        self._float_weights = {}

    # -- configuration --------------------------------------------------

    def install_weights(self, kind, weights):
        """
        Install a weight table for later calls.

        Args:
            kind: "float" (both widths), a FloatFormat or IntType, or a type
                  name such as "f32" or "i8"
            weights: WeightTable or mapping of category names to weights;
                     None restores the built-in default

        Raises:
            WeightTableError: If the table cannot generate values for ``kind``
            UnsupportedType: If ``kind`` names no primitive type
        """
        for primitive in _resolve(kind):
            installed = self._tables(primitive)
            if isinstance(primitive, FloatFormat):
                validate = install_float_weights
            else:
                validate = partial(install_int_weights, primitive)
            if weights is None:
                installed.pop(primitive, None)
            else:
                installed[primitive] = validate(weights)
            LOG.debug("installed %r for %s", installed.get(primitive), primitive.name)

    def weights_for(self, kind) -> Optional[WeightTable]:
        """
        Return the installed table for ``kind``, or None for the default.

        For "float" a table is only returned when both widths share it.
        """
        tables = {self._tables(primitive).get(primitive) for primitive in _resolve(kind)}
        return tables.pop() if len(tables) == 1 else None

    def _tables(self, primitive):
        return self._float_weights if isinstance(primitive, FloatFormat) else self._int_weights

    # -- seeding ----------------------------------------------------------

    def seed(self, seed):
        LOG.debug("reseeding %r with %r", self.source, seed)
        self.source.seed(seed)

    def get_seed(self):
        return self.source.get_seed()

    def fork(self):
        """
        Create an independent generator with a child source.

        Installed weight tables are shared with the child.
        """
        child = WeirdGenerator(self.source.fork())
        child._int_weights = dict(self._int_weights)
        child._float_weights = dict(self._float_weights)
        LOG.debug("forked %r into %r", self.source, child.source)
        return child

    # -- integers ---------------------------------------------------------

    def sample_integer(self, width, signed=True, weights=None) -> Sample:
        int_type = IntType(width, signed)
        if weights is None:
            weights = self._int_weights.get(int_type)
        category, value = sample_integer(self.source, int_type, weights)
        return Sample(category, int_type.to_unsigned(value), value, width)

    def weird_integer(self, width, signed=True, weights=None) -> int:
        """
        Generate an integer of ``width`` bits that favours edge cases.

        The result always lies within the type's range.
        """
        return self.sample_integer(width, signed, weights).value

    def special_integer(self, width, signed=True) -> int:
        return special_integer(self.source, IntType(width, signed))

    # -- floats -----------------------------------------------------------

    def sample_float(self, width=64, weights=None) -> Sample:
        if weights is None:
            weights = self._float_weights.get(float_format(width))
        category, bits = sample_float_bits(self.source, width, weights)
        return Sample(category, bits, from_bits(bits, width), width)

    def weird_float_bits(self, width=64, weights=None) -> int:
        """Generate the exact bit pattern of a weird float."""
        return self.sample_float(width, weights).bits

    def weird_float(self, width=64, weights=None) -> float:
        """
        Generate a float that favours edge cases.

        32-bit results are widened to a Python float. See ``weirdgen.ieee754``
        for the signaling NaN caveat that applies to them.
        """
        return self.sample_float(width, weights).value

    def nan(self, width=64) -> float:
        """Any NaN bit pattern, quiet or signaling, including every payload."""
        return from_bits(nan_bits(float_format(width), self.source), width)

    def subnormal(self, width=64) -> float:
        return self._build(width, FloatCategory.DENORMAL)

    def normal(self, width=64) -> float:
        return self._build(width, FloatCategory.NORMAL)

    def special(self, width=64) -> float:
        return from_bits(special_bits(width, self.source), width)

    def _build(self, width, category):
        return from_bits(build_float_bits(width, category, self.source), width)

    def f32(self):
        return self.weird_float(32)

    def f64(self):
        return self.weird_float(64)

    def nan_f32(self):
        return self.nan(32)

    def nan_f64(self):
        return self.nan(64)

    def subnormal_f32(self):
        return self.subnormal(32)

    def subnormal_f64(self):
        return self.subnormal(64)

    def normal_f32(self):
        return self.normal(32)

    def normal_f64(self):
        return self.normal(64)

    def special_f32(self):
        return self.special(32)

    def special_f64(self):
        return self.special(64)

    # -- named integer types ----------------------------------------------

    def u8(self):
        return self._int(INT_TYPES["u8"])

    def u16(self):
        return self._int(INT_TYPES["u16"])

    def u32(self):
        return self._int(INT_TYPES["u32"])

    def u64(self):
        return self._int(INT_TYPES["u64"])

    def u128(self):
        return self._int(INT_TYPES["u128"])

    def usize(self):
        return self._int(INT_TYPES["usize"])

    def i8(self):
        return self._int(INT_TYPES["i8"])

    def i16(self):
        return self._int(INT_TYPES["i16"])

    def i32(self):
        return self._int(INT_TYPES["i32"])

    def i64(self):
        return self._int(INT_TYPES["i64"])

    def i128(self):
        return self._int(INT_TYPES["i128"])

    def isize(self):
        return self._int(INT_TYPES["isize"])

    def special_u8(self):
        return special_integer(self.source, INT_TYPES["u8"])

    def special_u16(self):
        return special_integer(self.source, INT_TYPES["u16"])

    def special_u32(self):
        return special_integer(self.source, INT_TYPES["u32"])

    def special_u64(self):
        return special_integer(self.source, INT_TYPES["u64"])

    def special_u128(self):
        return special_integer(self.source, INT_TYPES["u128"])

    def special_usize(self):
        return special_integer(self.source, INT_TYPES["usize"])

    def special_i8(self):
        return special_integer(self.source, INT_TYPES["i8"])

    def special_i16(self):
        return special_integer(self.source, INT_TYPES["i16"])

    def special_i32(self):
        return special_integer(self.source, INT_TYPES["i32"])

    def special_i64(self):
        return special_integer(self.source, INT_TYPES["i64"])

    def special_i128(self):
        return special_integer(self.source, INT_TYPES["i128"])

    def special_isize(self):
        return special_integer(self.source, INT_TYPES["isize"])

    def _int(self, int_type):
        return self.weird_integer(int_type.width, int_type.signed)

    def __repr__(self):
        return "WeirdGenerator({!r})".format(self.source)


def _resolve(kind):
    if kind == "float":
        return (F32, F64)
    if isinstance(kind, (FloatFormat, IntType)):
        return (kind,)
    return (parse_type(kind),)
