"""Shared fixtures for the passt test suite."""

from __future__ import annotations

import pytest


class SequenceSource:
    """Deterministic source replaying a fixed list of indices.

    Records every `n` it is asked for so tests can check the alphabet size
    the generator used.
    """

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self._pos = 0
        self.requested: list[int] = []

    def randbelow(self, n: int) -> int:
        self.requested.append(n)
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        return value % n


@pytest.fixture
def sequence_source():
    """Factory for SequenceSource instances."""
    return SequenceSource


@pytest.fixture
def counting_bit_stream():
    """Bit stream producing the binary form of an increasing counter."""

    def make(width: int = 16):
        counter = {"value": 0}

        def stream() -> list[int]:
            counter["value"] += 1
            value = counter["value"]
            return [(value >> shift) & 1 for shift in range(width - 1, -1, -1)]

        return stream

    return make
