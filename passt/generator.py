"""
Password engine: pick an alphabet and draw characters from it uniformly.
"""

from __future__ import annotations

from .config import LOWERCASE, UPPERCASE, DIGITS, SPECIAL_CHARACTERS
from .errors import EmptyAlphabet, InvalidLength
from .logger import get_logger
from .randomness import RandomSource, SystemRandomSource

logger = get_logger(__name__)


def default_alphabet(include_specials: bool = False) -> str:
    """Letters and digits, plus the symbol subset when asked for."""
    alphabet = LOWERCASE + UPPERCASE + DIGITS
    if include_specials:
        alphabet += SPECIAL_CHARACTERS
    return alphabet


def _check_length(length: int) -> None:
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength(length)
    if length < 0:
        raise InvalidLength(length)


def _draw(length: int, alphabet: str, source: RandomSource | None) -> str:
    """
    Build a password of `length` characters, each picked at a uniformly
    random position of `alphabet`. Duplicate characters keep their weight.
    """
    if length == 0:
        return ""
    if not alphabet:
        raise EmptyAlphabet()

    rng = source if source is not None else SystemRandomSource()
    size = len(alphabet)
    logger.debug("drawing %d characters from an alphabet of %d", length, size)

    return "".join(alphabet[rng.randbelow(size)] for _ in range(length))


def random_password(
    length: int,
    include_specials: bool = False,
    source: RandomSource | None = None,
) -> str:
    """
    Generate a password from the default alphabet.

    Raises InvalidLength for negative or non-integer lengths. A length of
    zero gives the empty string.
    """
    _check_length(length)
    return _draw(length, default_alphabet(include_specials), source)


def random_password_with_custom_set(
    length: int,
    chars: str,
    source: RandomSource | None = None,
) -> str:
    """
    Generate a password from a caller-supplied alphabet.

    Raises EmptyAlphabet when `chars` is empty and length > 0.
    """
    _check_length(length)
    return _draw(length, chars, source)
