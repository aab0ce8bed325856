"""Shared alphabet, input guards, and error types for the checksum engines.

Every engine checks its input through :func:`check_digit_string` or
:func:`check_alphanumeric` before doing any arithmetic.  The guards return
an :class:`InputErrorKind` describing the first problem found, or ``None``
when the input is acceptable.  Each engine then decides how to report the
failure.
"""
from __future__ import annotations

import re
from enum import Enum

# Digits map to 0-9, letters A-Z map to 10-35.
ALPHABET: str = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE: int = len(ALPHABET)

_VALUES: dict[str, int] = {char: index for index, char in enumerate(ALPHABET)}

_ASCII_DIGITS = re.compile(r"[0-9]+")


class InputErrorKind(str, Enum):
    """Reason a checksum engine rejected its input."""

    INVALID_TYPE = "invalid_type"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER = "invalid_character"


class InvalidInputError(ValueError):
    """Raised when a check digit cannot be generated from the given input.

    Attributes
    ----------
    kind:
        The :class:`InputErrorKind` describing the rejection.
    value:
        The offending input, as received.
    """

    def __init__(self, kind: InputErrorKind, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.value}: {value!r}")


def char_value(char: str) -> int:
    """Return the alphabet value of ``char`` or ``-1`` when it is not a symbol."""
    return _VALUES.get(char, -1)


def check_digit_string(value: object) -> InputErrorKind | None:
    """Check that ``value`` is a non-empty string of ASCII decimal digits."""
    if not isinstance(value, str):
        return InputErrorKind.INVALID_TYPE
    if not value:
        return InputErrorKind.INVALID_LENGTH
    if _ASCII_DIGITS.fullmatch(value) is None:
        return InputErrorKind.INVALID_CHARACTER
    return None


def check_alphanumeric(value: object, length: int) -> InputErrorKind | None:
    """Check that ``value`` is an upper-case alphabet string of exactly ``length``.

    Callers are expected to upper-case the value first when case folding
    is wanted.
    """
    if not isinstance(value, str):
        return InputErrorKind.INVALID_TYPE
    if len(value) != length:
        return InputErrorKind.INVALID_LENGTH
    for char in value:
        if char not in _VALUES:
            return InputErrorKind.INVALID_CHARACTER
    return None
