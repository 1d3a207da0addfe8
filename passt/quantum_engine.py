"""
Quantum bit sampler for QuantumRandomSource.

Every qubit gets a single Hadamard gate and is measured in the
computational basis, so each measured bit is an unbiased coin flip.
"""

from __future__ import annotations

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import PasstConfig, DEFAULT_CONFIG
from .logger import get_logger

logger = get_logger(__name__)


class QuantumEngine:
    """
    Holds one transpiled coin-flip circuit and samples bits from it.
    """

    def __init__(self, config: PasstConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.num_qubits = self.config.num_qubits
        if self.num_qubits < 1:
            raise ValueError(f"num_qubits must be >= 1, got {self.num_qubits}")

        self.backend = AerSimulator()
        limit = self._qubit_limit()
        if limit is not None and self.num_qubits > limit:
            raise ValueError(
                f"Configured num_qubits={self.num_qubits} exceeds "
                f"backend limit ({limit}). Lower num_qubits in PasstConfig."
            )

        # Built once; every refill reuses the same transpiled circuit.
        circuit = QuantumCircuit(self.num_qubits, self.num_qubits)
        circuit.h(range(self.num_qubits))
        circuit.measure(range(self.num_qubits), range(self.num_qubits))
        self._circuit = transpile(circuit, self.backend)

    def _qubit_limit(self) -> int | None:
        configuration = getattr(self.backend, "configuration", None)
        if not callable(configuration):
            return None
        return getattr(configuration(), "num_qubits", None)

    def sample_bits(self, shots: int = 1) -> list[int]:
        """
        Run `shots` shots and return num_qubits * shots bits, shot by
        shot, each shot ordered by qubit index.
        """
        if shots < 1:
            raise ValueError(f"shots must be >= 1, got {shots}")

        result = self.backend.run(self._circuit, shots=shots, memory=True).result()

        bits: list[int] = []
        # qiskit writes each shot as q_(n-1) ... q_0
        for bitstring in result.get_memory():
            bits.extend(int(b) for b in reversed(bitstring))

        logger.debug("sampled %d quantum bits over %d shots", len(bits), shots)
        return bits
