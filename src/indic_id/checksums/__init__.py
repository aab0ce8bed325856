"""Checksum engines: Verhoeff (Aadhaar), Mod-36 (GSTIN), and Luhn."""
from __future__ import annotations

from indic_id.checksums.alphabet import (
    ALPHABET,
    InputErrorKind,
    InvalidInputError,
)
from indic_id.checksums.luhn import validate_luhn
from indic_id.checksums.mod36 import (
    generate_mod36_check_digit,
    mod36_check_char,
    validate_mod36_check_digit,
)
from indic_id.checksums.verhoeff import (
    compute_checksum,
    generate_verhoeff,
    validate_verhoeff,
)

__all__ = [
    "ALPHABET",
    "InputErrorKind",
    "InvalidInputError",
    "compute_checksum",
    "generate_mod36_check_digit",
    "generate_verhoeff",
    "mod36_check_char",
    "validate_luhn",
    "validate_mod36_check_digit",
    "validate_verhoeff",
]
