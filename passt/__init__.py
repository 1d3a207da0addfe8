"""
passt: random password generator.
"""

from .config import PasstConfig, DEFAULT_CONFIG, VERSION
from .errors import EmptyAlphabet, InvalidLength, PasstError
from .generator import default_alphabet, random_password, random_password_with_custom_set
from .randomness import QuantumRandomSource, RandomSource, SystemRandomSource
from .cli import generate_password, generate_passwords

__version__ = VERSION

__all__ = [
    "PasstConfig",
    "DEFAULT_CONFIG",
    "PasstError",
    "InvalidLength",
    "EmptyAlphabet",
    "RandomSource",
    "SystemRandomSource",
    "QuantumRandomSource",
    "default_alphabet",
    "random_password",
    "random_password_with_custom_set",
    "generate_password",
    "generate_passwords",
]
