"""
Uniform bit sources.

Every generator in weirdgen draws its randomness from a bit source, a narrow
capability with four operations:

- ``below(n)``: uniform integer in ``[0, n)``
- ``bits(width)``: uniform integer made of ``width`` random bits
- ``random()``: uniform float in ``[0, 1)``
- ``seed(seed)``: restart the sequence deterministically

Two implementations are provided:

1. **RandomBitSource**: wraps a private ``random.Random`` instance. It is
   seedable, remembers its seed and can fork child sources.
2. **ScriptedBitSource**: replays a prearranged list of draws. It is meant
   for tests that need exact control over every bit a generator consumes.

The module never touches the global ``random`` state.
"""

import random
from abc import ABC, abstractmethod

from weirdgen.errors import BitSourceError, BitSourceExhausted


class BitSource(ABC):
    """Base class for uniform bit suppliers."""

    @abstractmethod
    def below(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``; ``n`` must be positive."""
        pass

    @abstractmethod
    def bits(self, width: int) -> int:
        """Return a uniform integer in ``[0, 2**width)``."""
        pass

    @abstractmethod
    def random(self) -> float:
        """Return a uniform float in ``[0, 1)``."""
        pass

    @abstractmethod
    def seed(self, seed) -> None:
        """Restart the draw sequence from ``seed``."""
        pass


class RandomBitSource(BitSource):
    """
    Bit source backed by a private ``random.Random`` generator.

    Not cryptographically secure. Two sources built with the same seed
    produce the same sequence of draws.

    Attributes:
        _seed: Seed the current sequence was started from
        _rng: Underlying Mersenne Twister instance
    """
    def __init__(self, seed=None):
        """
        Initialize a bit source.

        Args:
            seed: Integer seed. When None, a 64-bit seed is taken from
                  system entropy so that ``get_seed()`` can still report it.
        """
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self._seed = seed
        self._rng = random.Random(seed)

    def below(self, n):
        if n < 1:
            raise BitSourceError("below() needs a positive bound, got {}".format(n))
        return self._rng.randrange(n)

    def bits(self, width):
        if width < 0:
            raise BitSourceError("bits() needs a non-negative width, got {}".format(width))
        if width == 0:
            return 0
        return self._rng.getrandbits(width)

    def random(self):
        return self._rng.random()

    def seed(self, seed=None):
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self._seed = seed
        self._rng.seed(seed)

    def get_seed(self):
        """Return the seed the current sequence was started from."""
        return self._seed

    def fork(self):
        """
        Create a child source seeded from this one.

        The child's seed is drawn from this source, so forking advances the
        parent's sequence by one 64-bit draw.
        """
        return RandomBitSource(self.bits(64))

    def __repr__(self):
        return "RandomBitSource(seed={!r})".format(self._seed)


class ScriptedBitSource(BitSource):
    """
    Bit source that replays a fixed script of draws.

    Each call consumes the next entry of the script. The entry must fit the
    request (``below(n)`` needs an integer in ``[0, n)``, ``bits(w)`` an
    integer below ``2**w``, ``random()`` a float in ``[0, 1)``), otherwise
    ``BitSourceError`` is raised. Running past the end raises
    ``BitSourceExhausted``.

    Example:
        >>> source = ScriptedBitSource([3, 0xff])
        >>> source.below(10), source.bits(8)
        (3, 255)
    """
    def __init__(self, draws):
        self._draws = list(draws)
        self._pos = 0

    @property
    def consumed(self):
        """Number of draws taken since construction or the last reseed."""
        return self._pos

    @property
    def remaining(self):
        """Number of draws left in the script."""
        return len(self._draws) - self._pos

    def _next(self, request):
        if self._pos >= len(self._draws):
            raise BitSourceExhausted(
                "script exhausted after {} draws while serving {}".format(self._pos, request))
        value = self._draws[self._pos]
        self._pos += 1
        return value

    def below(self, n):
        value = self._next("below({})".format(n))
        if not isinstance(value, int) or not 0 <= value < n:
            raise BitSourceError("scripted draw {!r} does not fit below({})".format(value, n))
        return value

    def bits(self, width):
        value = self._next("bits({})".format(width))
        if not isinstance(value, int) or not 0 <= value < (1 << width):
            raise BitSourceError("scripted draw {!r} does not fit bits({})".format(value, width))
        return value

    def random(self):
        value = self._next("random()")
        if not isinstance(value, float) or not 0.0 <= value < 1.0:
            raise BitSourceError("scripted draw {!r} is not a float in [0, 1)".format(value))
        return value

    def seed(self, seed=None):
        # A script has a single sequence; reseeding rewinds it.
        self._pos = 0
