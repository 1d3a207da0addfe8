"""
Configuration for the passt password generator.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

VERSION = "1.0.0"

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits

# Symbol subset appended to the default alphabet when specials are enabled.
SPECIAL_CHARACTERS = "!@#$%^&*()-_=+[];:,.<>?/|~"

# Used when `-n` is missing or does not parse as an integer.
DEFAULT_COUNT = 1


@dataclass
class PasstConfig:
    # Requested password length. None means "not given on the command line".
    length: int | None = None

    # How many passwords to print, one per line.
    count: int = DEFAULT_COUNT

    # Append SPECIAL_CHARACTERS to the default alphabet.
    use_specials: bool = False

    # Literal alphabet; when non-empty it replaces the default one entirely
    # and use_specials is ignored.
    custom_charset: str = ""

    # Draw from the quantum-simulated source instead of the OS CSPRNG.
    quantum: bool = False

    # Quantum source knobs. Each shot gives num_qubits raw bits.
    # NOTE: Keep num_qubits <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20
    quantum_streams: int = 2
    entropy_rounds: int = 2


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasstConfig()
