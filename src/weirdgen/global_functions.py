"""
Module-level generation functions backed by a thread-local generator.

Each thread lazily gets its own ``WeirdGenerator`` seeded from system
entropy; call ``seed()`` to make a thread's sequence reproducible.

**Usage:**
```python
import weirdgen

weirdgen.seed(7)
weirdgen.f64()
weirdgen.i32()
weirdgen.weird_integer(12, signed=False)
```
"""

import threading

from weirdgen.generator import WeirdGenerator
from weirdgen.integers import INT_TYPES

_local = threading.local()


def default_generator():
    """Return the calling thread's generator, creating it on first use."""
    gen = getattr(_local, "generator", None)
    if gen is None:
        gen = _local.generator = WeirdGenerator()
    return gen


def new():
    """Create a generator forked from the calling thread's generator."""
    return default_generator().fork()


def seed(seed):
    """Reseed the calling thread's generator."""
    default_generator().seed(seed)


def get_seed():
    """Return the seed of the calling thread's generator."""
    return default_generator().get_seed()


def weird_integer(width, signed=True, weights=None):
    return default_generator().weird_integer(width, signed, weights)


def weird_float(width=64, weights=None):
    return default_generator().weird_float(width, weights)


def weird_float_bits(width=64, weights=None):
    return default_generator().weird_float_bits(width, weights)


def sample_integer(width, signed=True, weights=None):
    return default_generator().sample_integer(width, signed, weights)


def sample_float(width=64, weights=None):
    return default_generator().sample_float(width, weights)


def f32():
    return default_generator().f32()


def f64():
    return default_generator().f64()


def nan_f32():
    return default_generator().nan_f32()


def nan_f64():
    return default_generator().nan_f64()


def subnormal_f32():
    return default_generator().subnormal_f32()


def subnormal_f64():
    return default_generator().subnormal_f64()


def normal_f32():
    return default_generator().normal_f32()


def normal_f64():
    return default_generator().normal_f64()


def special_f32():
    return default_generator().special_f32()


def special_f64():
    return default_generator().special_f64()


def _forward(name):
    def function():
        return getattr(default_generator(), name)()
    function.__name__ = name
    function.__doc__ = getattr(WeirdGenerator, name).__doc__
    return function


# Add i8, u8, special_i8, ... to the module namespace
for _name in INT_TYPES:
    globals()[_name] = _forward(_name)
    globals()["special_" + _name] = _forward("special_" + _name)
del _name

__all__ = [
    "default_generator", "new", "seed", "get_seed",
    "weird_integer", "weird_float", "weird_float_bits",
    "sample_integer", "sample_float",
    "f32", "f64", "nan_f32", "nan_f64", "subnormal_f32", "subnormal_f64",
    "normal_f32", "normal_f64", "special_f32", "special_f64",
] + list(INT_TYPES) + ["special_" + name for name in INT_TYPES]
