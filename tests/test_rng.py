"""Tests for the seeded PRNG and seed helpers."""

import pytest

from cosmogen.errors import InvalidSeedError
from cosmogen.utils import (
    MASK_32,
    Mulberry32,
    derive_seed,
    hash_coord,
    hash_string,
    js_round,
    lerp,
    mix,
    normalize_seed,
    pick,
    seed_from_id,
)


class FixedStream:
    """Stream that replays a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.position = 0

    def random(self):
        value = self.values[self.position]
        self.position += 1
        return value


class TestMulberry32:
    """Test the Mulberry32 stream."""

    def test_same_seed_same_sequence(self):
        """Test that two streams with the same seed agree."""
        a = Mulberry32(42)
        b = Mulberry32(42)
        assert [a.random() for _ in range(100)] == [b.random() for _ in range(100)]

    def test_different_seeds_differ(self):
        """Test that neighbouring seeds produce different sequences."""
        a = Mulberry32(1)
        b = Mulberry32(2)
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_values_in_unit_interval(self):
        """Test that every draw is in [0, 1)."""
        rng = Mulberry32(12345)
        for _ in range(10000):
            value = rng.random()
            assert 0.0 <= value < 1.0

    def test_seed_reduced_modulo_2_32(self):
        """Test that seeds wrap to 32 bits."""
        a = Mulberry32(7)
        b = Mulberry32(7 + (1 << 32))
        assert a.seed == b.seed == 7
        assert a.random() == b.random()

    def test_reference_values(self):
        """Test the first draws against the reference mulberry32 output."""
        for seed, expected in [
            (0, [0.26642920868471265, 0.0003297457005828619, 0.2232720274478197]),
            (1, [0.6270739405881613, 0.002735721180215478, 0.5274470399599522]),
            (12345, [0.9797282677609473, 0.3067522644996643, 0.484205421525985]),
        ]:
            rng = Mulberry32(seed)
            assert [rng.random() for _ in range(3)] == expected

    def test_callable_alias(self):
        """Test that calling the stream draws like random()."""
        a = Mulberry32(99)
        b = Mulberry32(99)
        assert a() == b.random()

    def test_state_round_trip(self):
        """Test that restoring state replays the same draws."""
        rng = Mulberry32(5)
        rng.random()
        state = rng.get_state()
        expected = [rng.random() for _ in range(3)]
        rng.set_state(state)
        assert [rng.random() for _ in range(3)] == expected

    def test_uniform_and_choice(self):
        """Test the convenience draws stay in range."""
        rng = Mulberry32(3)
        for _ in range(100):
            assert 10 <= rng.uniform(10, 20) < 20
            assert rng.choice("abc") in "abc"

    def test_roughly_uniform(self):
        """Test that draws spread evenly over ten buckets."""
        rng = Mulberry32(2024)
        buckets = [0] * 10
        for _ in range(20000):
            buckets[int(rng.random() * 10)] += 1
        for count in buckets:
            assert 1700 < count < 2300


class TestHashCoord:
    """Test coordinate hashing and seed mixing."""

    def test_origin_hashes_to_zero(self):
        assert hash_coord(0, 0, 0) == 0

    def test_single_axis(self):
        """Test per-axis multipliers."""
        assert hash_coord(1, 0, 0) == 73856093
        assert hash_coord(0, 1, 0) == 19349663
        assert hash_coord(0, 0, 1) == 83492791

    def test_negative_coordinates_wrap(self):
        """Test that negative products wrap to unsigned 32 bits."""
        assert hash_coord(-1, 0, 0) == (1 << 32) - 73856093

    def test_always_32_bit(self):
        """Test range for large and mixed-sign coordinates."""
        for cell in [(1000, -2000, 3000), (-7, -7, -7), (123456, 654321, -999999)]:
            assert 0 <= hash_coord(*cell) <= MASK_32

    def test_mix(self):
        """Test that mix xors the seed with the cell hash."""
        assert mix(12345, 0, 0, 0) == 12345
        assert mix(12345, 1, 0, 0) == 12345 ^ 73856093


class TestPick:
    """Test uniform selection."""

    def test_pick_uses_floor_of_scaled_draw(self):
        stream = FixedStream([0.0, 0.34, 0.99])
        items = ["a", "b", "c"]
        assert pick(stream, items) == "a"
        assert pick(stream, items) == "b"
        assert pick(stream, items) == "c"

    def test_pick_covers_every_element(self):
        """Test that a dense stream selects every element at least once."""
        n = 1000
        stream = FixedStream((k + 0.5) / n for k in range(n))
        items = list(range(7))
        chosen = {pick(stream, items) for _ in range(n)}
        assert chosen == set(items)

    def test_pick_counts_balanced(self):
        """Test that a dense stream spreads picks evenly."""
        n = 700
        stream = FixedStream((k + 0.5) / n for k in range(n))
        counts = [0] * 7
        for _ in range(n):
            counts[pick(stream, list(range(7)))] += 1
        assert counts == [100] * 7


class TestHelpers:
    """Test small numeric helpers."""

    def test_lerp(self):
        assert lerp(0, 10, 0.5) == 5
        assert lerp(10, 20, 0) == 10
        assert lerp(0, 10, 1.5) == 15  # Not clamped

    def test_js_round_half_up(self):
        assert js_round(2.5) == 3
        assert js_round(3.5) == 4
        assert js_round(-2.5) == -2
        assert js_round(2.4) == 2

    def test_hash_string(self):
        assert hash_string("") == 0
        assert hash_string("a") == 97
        assert hash_string("ab") == 97 * 31 + 98

    def test_hash_string_non_negative(self):
        """Test that long strings that overflow stay non-negative."""
        for text in ["STAR-12345-7", "x" * 200, "GAL-4000000000-1-2-3"]:
            assert hash_string(text) >= 0

    def test_seed_from_id_deterministic(self):
        assert seed_from_id("PH-1-2") == seed_from_id("PH-1-2")
        assert seed_from_id("PH-1-2") != seed_from_id("PH-1-3")

    def test_derive_seed(self):
        """Test that child seeds depend only on parent and index."""
        assert derive_seed(100, 0, 977) == 100
        assert derive_seed(100, 3, 977) == 100 ^ (3 * 977)
        assert 0 <= derive_seed(MASK_32, 12345, 104729) <= MASK_32


class TestNormalizeSeed:
    """Test permissive seed coercion."""

    def test_plain_int(self):
        assert normalize_seed(42) == 42

    def test_negative_made_positive(self):
        assert normalize_seed(-42) == 42

    def test_float_truncated(self):
        assert normalize_seed(3.9) == 3
        assert normalize_seed(-3.9) == 3

    def test_masked_to_32_bits(self):
        assert normalize_seed((1 << 32) + 5) == 5

    def test_rejects_non_numbers(self):
        with pytest.raises(InvalidSeedError, match="Invalid seed"):
            normalize_seed("abc")
        with pytest.raises(InvalidSeedError):
            normalize_seed(None)
        with pytest.raises(InvalidSeedError):
            normalize_seed(True)
        with pytest.raises(InvalidSeedError):
            normalize_seed(float("nan"))

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_seed([1])
