"""Verhoeff check digit engine.

Detects every single-digit substitution and every adjacent transposition
in a decimal string, which a weighted mod-10 sum cannot guarantee.  Used
for the trailing check digit of Aadhaar numbers.

Example
-------
>>> generate_verhoeff("23")
6
>>> validate_verhoeff("236")
True
>>> validate_verhoeff("237")
False
"""
from __future__ import annotations

from collections.abc import Sequence

from indic_id.checksums.alphabet import InvalidInputError, check_digit_string

# ---------------------------------------------------------------------------
# Multiplication table of the dihedral group D5
# ---------------------------------------------------------------------------
D_TABLE: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# ---------------------------------------------------------------------------
# Position permutations: row i is the base permutation applied i times
# ---------------------------------------------------------------------------
P_TABLE: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)

# inv[j] is the element k with D_TABLE[j][k] == 0.
INV_TABLE: tuple[int, ...] = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)


def compute_checksum(digits: Sequence[int], includes_check_digit: bool) -> int:
    """Fold ``digits`` right to left through the D5 and permutation tables.

    Parameters
    ----------
    digits:
        Digit values (0-9), most significant first.
    includes_check_digit:
        ``True`` when the last element is already the check digit.  When
        ``False`` every digit is shifted one position left, as if the
        check digit had been appended.

    Returns
    -------
    int
        The accumulator after the last digit.  ``0`` means a full string
        is consistent; for a base string, ``INV_TABLE`` of the result is
        the check digit to append.
    """
    offset = 0 if includes_check_digit else 1
    checksum = 0
    for position, digit in enumerate(reversed(digits)):
        checksum = D_TABLE[checksum][P_TABLE[(position + offset) % 8][digit]]
    return checksum


def generate_verhoeff(base: str) -> int:
    """Return the Verhoeff check digit to append to ``base``.

    Parameters
    ----------
    base:
        Non-empty string of ASCII decimal digits, without separators or
        surrounding whitespace.

    Returns
    -------
    int
        Check digit in the range 0-9.

    Raises
    ------
    InvalidInputError
        When ``base`` is not a non-empty ASCII digit string.
    """
    error = check_digit_string(base)
    if error is not None:
        raise InvalidInputError(error, base)
    return INV_TABLE[compute_checksum([int(char) for char in base], includes_check_digit=False)]


def validate_verhoeff(full: object) -> bool:
    """Return ``True`` when ``full`` ends in a correct Verhoeff check digit.

    Any input that is not a non-empty ASCII digit string returns ``False``.
    """
    if not isinstance(full, str) or check_digit_string(full) is not None:
        return False
    return compute_checksum([int(char) for char in full], includes_check_digit=True) == 0
