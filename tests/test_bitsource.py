from __future__ import annotations

import pytest

from weirdgen import BitSourceError, BitSourceExhausted, RandomBitSource, ScriptedBitSource


def test_same_seed_same_draws():
    a = RandomBitSource(42)
    b = RandomBitSource(42)
    assert [a.below(1000) for _ in range(20)] == [b.below(1000) for _ in range(20)]
    assert [a.bits(64) for _ in range(5)] == [b.bits(64) for _ in range(5)]
    assert a.random() == b.random()


def test_reseed_restarts_sequence():
    source = RandomBitSource(7)
    first = [source.bits(32) for _ in range(10)]
    source.seed(7)
    assert [source.bits(32) for _ in range(10)] == first
    assert source.get_seed() == 7


def test_unseeded_source_reports_its_seed():
    source = RandomBitSource()
    seed = source.get_seed()
    assert 0 <= seed < 2 ** 64
    replay = RandomBitSource(seed)
    assert [source.bits(16) for _ in range(8)] == [replay.bits(16) for _ in range(8)]


def test_reseed_without_seed_reports_the_new_seed():
    source = RandomBitSource(7)
    source.seed(None)
    seed = source.get_seed()
    assert seed is not None and 0 <= seed < 2 ** 64
    first = [source.bits(32) for _ in range(10)]
    source.seed(seed)
    assert [source.bits(32) for _ in range(10)] == first


def test_draw_ranges(source):
    for _ in range(1000):
        assert 0 <= source.below(3) < 3
        assert 0 <= source.bits(5) < 32
        assert 0.0 <= source.random() < 1.0
    assert source.below(1) == 0
    assert source.bits(0) == 0


def test_invalid_requests(source):
    with pytest.raises(BitSourceError):
        source.below(0)
    with pytest.raises(BitSourceError):
        source.bits(-1)


def test_fork_is_deterministic():
    assert RandomBitSource(5).fork().bits(64) == RandomBitSource(5).fork().bits(64)
    parent = RandomBitSource(5)
    child = parent.fork()
    assert child.get_seed() != parent.get_seed()


def test_scripted_replays_draws(script):
    source = script(3, 0xFF, 0.25)
    assert source.below(10) == 3
    assert source.bits(8) == 0xFF
    assert source.random() == 0.25
    assert source.consumed == 3
    assert source.remaining == 0


def test_scripted_exhaustion(script):
    source = script(1)
    source.below(2)
    with pytest.raises(BitSourceExhausted):
        source.below(2)
    # exhaustion is a bit source fault like any other
    assert issubclass(BitSourceExhausted, BitSourceError)


def test_scripted_rejects_draws_that_do_not_fit(script):
    with pytest.raises(BitSourceError):
        script(10).below(10)
    with pytest.raises(BitSourceError):
        script(256).bits(8)
    with pytest.raises(BitSourceError):
        script(1).random()


def test_scripted_reseed_rewinds():
    source = ScriptedBitSource([4, 5])
    assert source.below(10) == 4
    source.seed(0)
    assert source.consumed == 0
    assert source.below(10) == 4
