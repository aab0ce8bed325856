"""Mod-36 check character engine used by GSTIN.

The 14-character GSTIN base is folded left to right.  Each character's
alphabet value is multiplied by an alternating weight (1 at index 0,
then 2, 1, 2, ...) and the quotient and remainder of the product by 36
are both added to the running sum.  The check index is
``(36 - sum % 36) % 36``.

Lowercase input is upper-cased before processing.  Invalid input never
raises: generation returns ``-1`` and validation returns ``False``.

Example
-------
>>> generate_mod36_check_digit("27AAPFR5055K1Z")
22
>>> ALPHABET[22]
'M'
>>> validate_mod36_check_digit("27AAPFR5055K1ZM")
True
"""
from __future__ import annotations

from indic_id.checksums.alphabet import ALPHABET, BASE, char_value, check_alphanumeric

BASE_LENGTH: int = 14
FULL_LENGTH: int = BASE_LENGTH + 1

INVALID_CHECK_DIGIT: int = -1


def generate_mod36_check_digit(base: object) -> int:
    """Return the alphabet index of the check character for ``base``.

    Parameters
    ----------
    base:
        Exactly 14 characters from ``0-9``/``A-Z`` (either case).

    Returns
    -------
    int
        Index 0-35 into :data:`ALPHABET`, or ``-1`` when ``base`` is not a
        string, has the wrong length, or contains any other character.
    """
    # Only ASCII letters are case-folded; str.upper() maps some non-ASCII
    # letters onto A-Z.
    if not isinstance(base, str) or not base.isascii():
        return INVALID_CHECK_DIGIT
    normalised = base.upper()
    if check_alphanumeric(normalised, BASE_LENGTH) is not None:
        return INVALID_CHECK_DIGIT

    total = 0
    for index, char in enumerate(normalised):
        product = char_value(char) * ((index % 2) + 1)
        total += product // BASE + product % BASE
    return (BASE - total % BASE) % BASE


def mod36_check_char(base: object) -> str | None:
    """Return the check character for ``base``, or ``None`` for invalid input."""
    index = generate_mod36_check_digit(base)
    if index == INVALID_CHECK_DIGIT:
        return None
    return ALPHABET[index]


def validate_mod36_check_digit(full: object) -> bool:
    """Return ``True`` when the 15th character of ``full`` is its check character.

    Comparison is case-insensitive.  Wrong type or length, or any
    character outside the alphabet, returns ``False``.
    """
    if not isinstance(full, str) or len(full) != FULL_LENGTH or not full.isascii():
        return False
    normalised = full.upper()
    expected = generate_mod36_check_digit(normalised[:BASE_LENGTH])
    if expected == INVALID_CHECK_DIGIT:
        return False
    return normalised[BASE_LENGTH] == ALPHABET[expected]
