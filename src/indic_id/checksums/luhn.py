"""Luhn (mod 10) check for payment card numbers, IMEIs and similar."""
from __future__ import annotations

from indic_id.checksums.alphabet import check_digit_string


def validate_luhn(number: object) -> bool:
    """Return ``True`` when ``number`` passes the Luhn check.

    Anything other than a non-empty string of ASCII digits returns
    ``False``, so separators and whitespace must be stripped by the caller.

    Example
    -------
    >>> validate_luhn("79927398713")
    True
    """
    if not isinstance(number, str) or check_digit_string(number) is not None:
        return False

    total = 0
    for position, char in enumerate(reversed(number)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0
