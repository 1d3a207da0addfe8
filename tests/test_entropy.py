"""Unit tests for bit packing and the entropy pool."""

import hashlib
from collections import Counter

import pytest

from passt.entropy import EntropyPool, amplify_entropy, bits_to_bytes, bytes_to_bits
from passt.errors import PasstError


class TestBitPacking:
    """Test suite for bits_to_bytes and bytes_to_bits."""

    def test_empty(self) -> None:
        assert bits_to_bytes([]) == b""
        assert bytes_to_bits(b"") == []

    def test_full_byte(self) -> None:
        assert bits_to_bytes([1, 1, 1, 1, 0, 0, 0, 1]) == b"\xf1"

    def test_partial_byte_is_zero_padded(self) -> None:
        """Test that trailing bits are padded on the right."""
        assert bits_to_bytes([1, 0, 1]) == b"\xa0"
        assert bits_to_bytes([1] * 9) == b"\xff\x80"

    def test_msb_first_unpacking(self) -> None:
        assert bytes_to_bits(b"\x80\x01") == [1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1]


class TestAmplifyEntropy:
    """Test suite for amplify_entropy."""

    def test_zero_rounds_returns_input(self) -> None:
        bits = [1, 0, 1]
        assert amplify_entropy(bits, 0) == bits

    def test_one_round_is_sha256_of_packed_bits(self) -> None:
        bits = [1, 0, 1, 1, 0, 0, 1, 0]
        expected = bytes_to_bits(hashlib.sha256(b"\xb2").digest())

        assert amplify_entropy(bits, 1) == expected
        assert len(expected) == 256

    def test_rounds_chain(self) -> None:
        bits = [0, 1] * 10
        once = amplify_entropy(bits, 1)

        assert amplify_entropy(bits, 2) == bytes_to_bits(hashlib.sha256(bits_to_bytes(once)).digest())


class TestEntropyPool:
    """Test suite for EntropyPool."""

    def test_refills_on_demand(self, counting_bit_stream) -> None:
        """Test that each refill adds one SHA-256 block of bits."""
        calls = []
        stream = counting_bit_stream()

        def refill():
            calls.append(1)
            return stream()

        pool = EntropyPool(refill)
        assert len(pool.take_bits(10)) == 10
        assert len(calls) == 1
        assert len(pool) == 246

        pool.take_bits(300)
        assert len(calls) == 2
        assert len(pool) == 202

    def test_bits_are_binary(self, counting_bit_stream) -> None:
        pool = EntropyPool(counting_bit_stream(), rounds=2)
        assert set(pool.take_bits(1024)) <= {0, 1}

    def test_identical_batches_give_different_blocks(self) -> None:
        """Test that the counter keeps repeated input from repeating output."""
        pool = EntropyPool(lambda: [1, 0, 1, 0])
        first = pool.take_bits(256)
        second = pool.take_bits(256)

        assert first != second

    def test_deterministic_for_the_same_stream(self, counting_bit_stream) -> None:
        a = EntropyPool(counting_bit_stream())
        b = EntropyPool(counting_bit_stream())

        assert [a.randbelow(1000) for _ in range(50)] == [b.randbelow(1000) for _ in range(50)]

    def test_randbelow_range(self, counting_bit_stream) -> None:
        pool = EntropyPool(counting_bit_stream())
        values = [pool.randbelow(5) for _ in range(500)]

        assert set(values) == {0, 1, 2, 3, 4}

    @pytest.mark.parametrize(
        "n, draws, critical",
        [
            # df = 2; the 1e-6 tail starts near 27.6
            (3, 12000, 30),
            # df = 61; 130 is far beyond the 1e-6 tail
            (62, 62 * 200, 130),
        ],
    )
    def test_randbelow_is_uniform(self, counting_bit_stream, n: int, draws: int, critical: float) -> None:
        """Test that rejection sampling shows no modulo bias for sizes that are not powers of two."""
        pool = EntropyPool(counting_bit_stream())
        counts = Counter(pool.randbelow(n) for _ in range(draws))
        expected = draws / n
        statistic = sum((counts.get(v, 0) - expected) ** 2 / expected for v in range(n))

        assert set(counts) <= set(range(n))
        assert statistic < critical

    def test_randbelow_one_needs_no_bits(self) -> None:
        """Test that n == 1 returns 0 without calling refill."""

        def refill():
            raise AssertionError("refill should not be called")

        assert EntropyPool(refill).randbelow(1) == 0

    @pytest.mark.parametrize("n", [0, -3])
    def test_randbelow_rejects_non_positive(self, n: int) -> None:
        with pytest.raises(ValueError):
            EntropyPool(lambda: [1]).randbelow(n)

    def test_take_bits_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            EntropyPool(lambda: [1]).take_bits(-1)

    def test_empty_refill_raises(self) -> None:
        with pytest.raises(PasstError):
            EntropyPool(lambda: []).take_bits(1)
