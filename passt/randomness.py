"""
Randomness sources for the password generator.

A source is any object with `randbelow(n) -> int` returning a uniform
integer in [0, n). Sources are passed to the generator explicitly.
"""

from __future__ import annotations

import secrets
from typing import Callable, List, Protocol

from .config import PasstConfig, DEFAULT_CONFIG
from .entropy import EntropyPool
from .logger import get_logger

logger = get_logger(__name__)


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        ...


class SystemRandomSource:
    """Operating system CSPRNG via `secrets`."""

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be > 0")
        return secrets.randbelow(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class QuantumRandomSource:
    """
    Source backed by simulated quantum measurements.

    Each refill samples `quantum_streams` independent shots, XOR-combines
    them bit by bit and mixes the result into an EntropyPool with
    `entropy_rounds` rounds of SHA-256.

    `bit_stream` replaces the simulator with any callable returning a
    list of bits; tests use it to avoid running circuits.
    """

    def __init__(
        self,
        config: PasstConfig | None = None,
        bit_stream: Callable[[], List[int]] | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        if bit_stream is None:
            # Local import keeps qiskit off the default code path.
            from .quantum_engine import QuantumEngine

            bit_stream = QuantumEngine(self.config).sample_bits
        self._bit_stream = bit_stream
        self._pool = EntropyPool(self._combined_bits, rounds=self.config.entropy_rounds)

    def _combined_bits(self) -> List[int]:
        combined: list[int] | None = None
        for _ in range(max(1, self.config.quantum_streams)):
            bits = self._bit_stream()
            if combined is None:
                combined = list(bits)
            elif len(bits) != len(combined):
                raise ValueError(
                    "Quantum streams produced different bit-lengths; "
                    "this should not happen."
                )
            else:
                combined = [b ^ c for b, c in zip(bits, combined)]

        assert combined is not None
        logger.debug("mixed %d quantum bits into the pool", len(combined))
        return combined

    def randbelow(self, n: int) -> int:
        return self._pool.randbelow(n)

    def __repr__(self) -> str:
        return (
            f"QuantumRandomSource(streams={self.config.quantum_streams}, "
            f"rounds={self.config.entropy_rounds})"
        )
