"""Seed utilities: FNV-1a hashing, mulberry32 streams, hash noise, chunk seeds."""

from __future__ import annotations

import pytest

from pokerpg.systems.seed import (
    FNV_OFFSET_BASIS,
    chunk_seed,
    create_rng,
    create_seed_string,
    noise2d_signed,
    seed_to_uint32,
)


class TestSeedToUint32:

    def test_empty_string_is_offset_basis(self):
        assert seed_to_uint32("") == FNV_OFFSET_BASIS

    def test_known_vectors(self):
        assert seed_to_uint32("a") == 0xE40C292C
        assert seed_to_uint32("foobar") == 0xBF9CF968

    def test_stable_and_32_bit(self):
        for seed in ("dev", "world:continental:3:-2", "éàü", "🙂"):
            h = seed_to_uint32(seed)
            assert h == seed_to_uint32(seed)
            assert 0 <= h <= 0xFFFFFFFF

    def test_different_seeds_differ(self):
        assert seed_to_uint32("dev") != seed_to_uint32("dew")


class TestRng:

    def test_same_seed_same_stream(self):
        a = create_rng("dev")
        b = create_rng("dev")
        assert [a.next_float() for _ in range(50)] == [b.next_float() for _ in range(50)]

    def test_different_seed_different_stream(self):
        a = create_rng("dev")
        b = create_rng("prod")
        assert [a.next_float() for _ in range(10)] != [b.next_float() for _ in range(10)]

    def test_floats_in_unit_interval(self):
        rng = create_rng("range")
        for _ in range(1000):
            v = rng.next_float()
            assert 0.0 <= v < 1.0

    def test_int_bounds_inclusive(self):
        rng = create_rng("ints")
        seen = {rng.int(-2, 2) for _ in range(500)}
        assert seen == {-2, -1, 0, 1, 2}

    def test_int_rounds_bounds_inward(self):
        rng = create_rng("frac")
        for _ in range(200):
            assert rng.int(1.2, 3.8) in (2, 3)

    def test_empty_range_returns_ceil_min_without_draw(self):
        rng = create_rng("empty")
        assert rng.int(5, 3) == 5
        assert rng.int(2.5, 2.7) == 3
        # No value was consumed
        assert rng.next_float() == create_rng("empty").next_float()

    def test_pick_and_shuffle(self):
        rng = create_rng("shuffle")
        items = list(range(20))
        shuffled = rng.shuffle(items)
        assert shuffled is items
        assert sorted(items) == list(range(20))
        assert create_rng("shuffle").shuffle(list(range(20))) == items
        assert create_rng("pick").pick(["a", "b", "c"]) in ("a", "b", "c")


class TestNoise:

    def test_range_and_determinism(self):
        for x in range(-10, 11):
            for y in range(-10, 11):
                v = noise2d_signed("dev", x, y, 7)
                assert -1.0 <= v <= 1.0
                assert v == noise2d_signed("dev", x, y, 7)

    def test_salt_changes_values(self):
        a = [noise2d_signed("dev", x, 0, 0) for x in range(20)]
        b = [noise2d_signed("dev", x, 0, 1337) for x in range(20)]
        assert a != b

    def test_seed_changes_values(self):
        a = [noise2d_signed("dev", x, 3) for x in range(20)]
        b = [noise2d_signed("other", x, 3) for x in range(20)]
        assert a != b


class TestChunkSeed:

    def test_deterministic(self):
        assert chunk_seed("dev", 1, -2, "continental") == chunk_seed("dev", 1, -2, "continental")

    @pytest.mark.parametrize("q,r", [(0, 1), (1, 0), (-1, 0), (0, -1), (10, 10)])
    def test_distinct_per_coordinate(self, q, r):
        assert chunk_seed("dev", q, r) != chunk_seed("dev", 0, 0)

    def test_salt_and_world_seed_matter(self):
        assert chunk_seed("dev", 0, 0, "a") != chunk_seed("dev", 0, 0, "b")
        assert chunk_seed("dev", 0, 0) != chunk_seed("prod", 0, 0)


def test_create_seed_string_is_base36():
    s = create_seed_string()
    assert s
    assert set(s) <= set("0123456789abcdefghijklmnopqrstuvwxyz")


class TestReferenceVectors:
    """Pinned outputs; a change here breaks compatibility with existing seeds."""

    def test_seed_hash(self):
        assert seed_to_uint32("dev") == 0xD55997BC
        assert seed_to_uint32("🙂") == 0x8D31631E

    def test_mulberry32_stream_for_dev(self):
        rng = create_rng("dev")
        assert [rng.next_float() for _ in range(5)] == [
            0.42145066638477147,
            0.22664024750702083,
            0.8185794602613896,
            0.6777880690060556,
            0.5060893152840436,
        ]

    def test_mulberry32_stream_for_astral_seed(self):
        rng = create_rng("🙂")
        assert [rng.next_float() for _ in range(3)] == [
            0.5327385740820318,
            0.5430800020694733,
            0.5862857648171484,
        ]

    @pytest.mark.parametrize("x,y,salt,expected", [
        (0, 0, 0, 0.033066970536733686),
        (-3, 5, 0, 0.6420677536265151),
        (4, -7, 1337, 0.973412322805592),
        (-12, -9, 42, -0.2970257912057046),
    ])
    def test_noise(self, x, y, salt, expected):
        assert noise2d_signed("dev", x, y, salt) == expected
