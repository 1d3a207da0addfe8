"""
Command-line interface and high-level generator functions.
"""
from __future__ import annotations

import argparse
import re
import sys
from typing import Sequence

from .config import PasstConfig, DEFAULT_CONFIG, DEFAULT_COUNT, VERSION
from .errors import MissingParameterValue, PasstError, UsageError
from .generator import random_password, random_password_with_custom_set
from .logger import get_logger
from .randomness import QuantumRandomSource, RandomSource, SystemRandomSource

logger = get_logger(__name__)

USAGE = """USAGE: passt -l <int> [-s] [-chars "<str>"] [-n <int>] [-q]

-l      length of the generated password
-n      number of passwords to create (default: 1)
-s      use special characters
-chars  possible characters as a string, e.g. "abc012"
-q      draw from the simulated quantum source instead of the OS CSPRNG
"""

# Flags that consume the following argument.
VALUE_FLAGS = ("-l", "-n", "-chars")

# Optional sign and ASCII digits only; no whitespace or underscores.
_INTEGER = re.compile(r"[+-]?[0-9]+")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(prog="passt", add_help=False, allow_abbrev=False)
    parser.add_argument("-l", dest="length", default=None)
    parser.add_argument("-n", dest="count", default=None)
    parser.add_argument("-s", dest="use_specials", action="store_true")
    parser.add_argument("-chars", dest="custom_charset", default="")
    parser.add_argument("-q", dest="quantum", action="store_true")
    return parser


def usage(msg: str | None = None) -> str:
    """Usage text, with an optional error line between header and options."""
    return f"passt v{VERSION}\n\n{msg or ''}{USAGE}"


def _parse_int(value: str) -> int | None:
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def parse_length(value: str | None) -> int:
    if value is None:
        raise UsageError("Parameter -l is required.")
    length = _parse_int(value)
    if length is None:
        raise UsageError(f"-l expects an integer, got {value!r}.")
    return length


def parse_count(value: str | None) -> int:
    """
    Parse `-n`. Missing or non-numeric input falls back to DEFAULT_COUNT
    without raising.
    """
    if value is None:
        return DEFAULT_COUNT
    count = _parse_int(value)
    if count is None:
        logger.info("ignoring non-numeric count %r, using %d", value, DEFAULT_COUNT)
        return DEFAULT_COUNT
    return count


def _bind_values(argv: Sequence[str]) -> list[str]:
    """
    Rewrite `flag value` pairs into `flag=value` so argparse takes the
    value literally, even when it starts with `-`.

    Only the first occurrence of a value flag counts; later ones are
    dropped together with their values.
    """
    bound: list[str] = []
    seen: set[str] = set()
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg not in VALUE_FLAGS:
            bound.append(arg)
            i += 1
            continue
        if arg in seen:
            i += 2
            continue
        if i + 1 == len(argv):
            raise MissingParameterValue(arg)
        seen.add(arg)
        bound.append(f"{arg}={argv[i + 1]}")
        i += 2
    return bound


def parse_args(argv: Sequence[str]) -> PasstConfig:
    """
    Turn process arguments into a PasstConfig.

    Unknown arguments are ignored. Raises UsageError (or its
    MissingParameterValue subclass) on a malformed command line.
    """
    args, unknown = _build_parser().parse_known_args(_bind_values(argv))
    if unknown:
        logger.debug("ignoring unknown arguments: %s", unknown)

    return PasstConfig(
        length=parse_length(args.length),
        count=parse_count(args.count),
        use_specials=args.use_specials,
        custom_charset=args.custom_charset,
        quantum=args.quantum,
    )


def make_source(config: PasstConfig) -> RandomSource:
    if config.quantum:
        return QuantumRandomSource(config)
    return SystemRandomSource()


def generate_password(
    config: PasstConfig | None = None,
    source: RandomSource | None = None,
) -> str:
    """
    One password for `config`. A non-empty custom charset wins over the
    default alphabet and `use_specials`.
    """
    cfg = config or DEFAULT_CONFIG
    if cfg.length is None:
        raise UsageError("Parameter -l is required.")

    rng = source if source is not None else make_source(cfg)
    if cfg.custom_charset:
        return random_password_with_custom_set(cfg.length, cfg.custom_charset, rng)
    return random_password(cfg.length, cfg.use_specials, rng)


def generate_passwords(
    config: PasstConfig | None = None,
    source: RandomSource | None = None,
) -> list[str]:
    """
    `config.count` passwords drawn from one shared source. Zero or
    negative counts give an empty list.
    """
    cfg = config or DEFAULT_CONFIG
    rng = source if source is not None else make_source(cfg)
    return [generate_password(cfg, rng) for _ in range(max(0, cfg.count))]


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `passt`, `python -m passt` and `run_passt.py`.

    Usage errors print the usage text and still return 0.
    """
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(usage())
        return 0

    try:
        config = parse_args(argv)
        passwords = generate_passwords(config)
    except PasstError as exc:
        logger.info("usage error: %s", exc)
        print(usage(f"Error: {exc}\n"))
        return 0

    for password in passwords:
        print(password)
    return 0
