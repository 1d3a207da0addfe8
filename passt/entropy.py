"""
Entropy pool:
Collects raw measurement bits, mixes them with SHA-256 and hands out
uniformly distributed integers.
"""

from __future__ import annotations

import hashlib
from typing import Callable, List

from .errors import PasstError


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes, MSB first.
    A trailing partial byte is padded with zeros.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    value = 0
    for bit in bits:
        value = (value << 1) | (bit & 1)
    value <<= pad_len

    return value.to_bytes((len(bits) + pad_len) // 8, "big")


def bytes_to_bits(data: bytes) -> List[int]:
    """
    Unpack bytes into a list of bits, MSB first.
    """
    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Apply SHA-256 `rounds` times over the packed bits and return the
    digest as 256 bits. With rounds <= 0 the bits come back unchanged.
    """
    if rounds <= 0:
        return list(bits)

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)


class EntropyPool:
    """
    Bit reservoir fed by a `refill` callable.

    Every batch returned by `refill` is chained into a running SHA-256
    state together with a counter, so each output block depends on all
    samples taken so far and never repeats even when a batch does.
    """

    def __init__(self, refill: Callable[[], List[int]], rounds: int = 1) -> None:
        self._refill = refill
        self._rounds = max(1, rounds)
        self._state = b""
        self._counter = 0
        self._bits: list[int] = []

    def __len__(self) -> int:
        return len(self._bits)

    def _mix(self) -> None:
        batch = self._refill()
        if not batch:
            raise PasstError("entropy source returned no bits")

        self._counter += 1
        data = (
            self._state
            + self._counter.to_bytes(8, "big")
            + bits_to_bytes(batch)
        )
        for _ in range(self._rounds):
            data = hashlib.sha256(data).digest()

        self._state = data
        self._bits.extend(bytes_to_bits(data))

    def take_bits(self, k: int) -> List[int]:
        """Remove and return the next `k` bits, refilling as needed."""
        if k < 0:
            raise ValueError("k must be >= 0")
        while len(self._bits) < k:
            self._mix()
        taken, self._bits = self._bits[:k], self._bits[k:]
        return taken

    def randbelow(self, n: int) -> int:
        """
        Uniform integer in [0, n) by rejection sampling.

        Draw just enough bits to cover n-1 and retry on overflow; each
        attempt succeeds with probability above 1/2.
        """
        if n <= 0:
            raise ValueError("n must be > 0")

        k = (n - 1).bit_length()
        while True:
            value = 0
            for bit in self.take_bits(k):
                value = (value << 1) | bit
            if value < n:
                return value
