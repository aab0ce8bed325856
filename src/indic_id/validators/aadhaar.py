"""Aadhaar number validation.

An Aadhaar number is 12 ASCII digits, never starting with ``0`` or ``1``,
whose last digit is a Verhoeff check digit over the first eleven.

Example
-------
>>> is_valid_aadhaar("999999990019")
True
>>> get_aadhaar_info("999999990019").masked
'XXXX XXXX 0019'
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from indic_id.checksums.verhoeff import generate_verhoeff, validate_verhoeff

_STRUCTURE = re.compile(r"[2-9][0-9]{11}")

_MAX_SERIAL: int = 10**10 - 1


@dataclass(frozen=True)
class AadhaarInfo:
    """Validity of an Aadhaar number and its display-safe masked form.

    Attributes
    ----------
    valid:
        Whether the number passed structural and checksum validation.
    masked:
        ``"XXXX XXXX 1234"`` style rendering keeping only the last four
        digits; ``None`` when invalid.
    """

    valid: bool
    masked: str | None = None


def is_valid_aadhaar(aadhaar: object) -> bool:
    """Return ``True`` for a well-formed, checksum-consistent Aadhaar number."""
    if not isinstance(aadhaar, str) or _STRUCTURE.fullmatch(aadhaar) is None:
        return False
    return validate_verhoeff(aadhaar)


def mask_aadhaar(aadhaar: str, mask_char: str = "X") -> str:
    """Mask all but the last four digits, grouped as printed on the card."""
    return f"{mask_char * 4} {mask_char * 4} {aadhaar[-4:]}"


def get_aadhaar_info(aadhaar: object) -> AadhaarInfo:
    """Return an :class:`AadhaarInfo` for ``aadhaar``."""
    if not isinstance(aadhaar, str) or not is_valid_aadhaar(aadhaar):
        return AadhaarInfo(valid=False)
    return AadhaarInfo(valid=True, masked=mask_aadhaar(aadhaar))


def generate_aadhaar(serial: int, first_digit: int = 2) -> str:
    """Build a valid 12-digit Aadhaar-format number, for test fixtures.

    Layout is ``first_digit`` + ``serial`` zero-padded to ten digits + the
    Verhoeff check digit.

    Raises
    ------
    ValueError
        When ``serial`` is outside 0..9999999999 or ``first_digit`` is
        outside 2..9.
    """
    if not 0 <= serial <= _MAX_SERIAL:
        raise ValueError(f"serial must be between 0 and {_MAX_SERIAL}")
    if first_digit not in range(2, 10):
        raise ValueError("first_digit must be between 2 and 9")
    base = f"{first_digit}{serial:010d}"
    return f"{base}{generate_verhoeff(base)}"
