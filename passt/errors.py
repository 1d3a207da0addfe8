"""
Exceptions raised by the password engine and the command line.
"""

from __future__ import annotations

__all__ = [
    "PasstError",
    "InvalidLength",
    "EmptyAlphabet",
    "UsageError",
    "MissingParameterValue",
]


class PasstError(Exception):
    """Base exception for passt."""


class InvalidLength(PasstError, ValueError):
    """Password length is negative or not an integer."""

    def __init__(self, length: object) -> None:
        super().__init__(f"invalid password length: {length!r}")
        self.length = length


class EmptyAlphabet(PasstError, ValueError):
    """A non-empty password was requested from an empty alphabet."""

    def __init__(self) -> None:
        super().__init__("cannot draw characters from an empty alphabet")


class UsageError(PasstError):
    """Malformed command line. The message is shown above the usage text."""


class MissingParameterValue(UsageError):
    """A flag that takes a value was the last argument."""

    def __init__(self, param: str) -> None:
        super().__init__(f"Parameter {param} requires value.")
        self.param = param
