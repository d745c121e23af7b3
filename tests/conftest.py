from __future__ import annotations

import pytest

from weirdgen import RandomBitSource, ScriptedBitSource, WeirdGenerator


@pytest.fixture()
def gen():
    return WeirdGenerator(seed=0x5EED)


@pytest.fixture()
def source():
    return RandomBitSource(0xC0FFEE)


@pytest.fixture()
def script():
    """Build a ScriptedBitSource from the given draws."""
    def _script(*draws):
        return ScriptedBitSource(draws)
    return _script
