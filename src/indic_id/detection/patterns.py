"""Candidate patterns for Indian identifiers in free text.

Patterns only find *candidates*; each is paired with a verifier that runs
the full validator (structure plus checksum or category lookup) on the
matched text, so a random 12-digit number is not mistaken for an Aadhaar.

Each entry is a tuple of ``(label, compiled_pattern, verifier)``.
"""
from __future__ import annotations

import re
from typing import Callable

from indic_id.validators.aadhaar import is_valid_aadhaar
from indic_id.validators.gstin import GSTIN_PATTERN, is_valid_gstin
from indic_id.validators.pan import is_valid_pan

Verifier = Callable[[str], bool]

_AADHAAR_SEPARATORS = re.compile(r"[ -]")


def _verify_aadhaar(candidate: str) -> bool:
    return is_valid_aadhaar(_AADHAAR_SEPARATORS.sub("", candidate))


# ---------------------------------------------------------------------------
# Aadhaar number: 12 digits, optionally space/hyphen separated in groups of 4
# ---------------------------------------------------------------------------
AADHAAR: tuple[str, re.Pattern[str], Verifier] = (
    "aadhaar",
    re.compile(
        r"\b[2-9][0-9]{3}[ -]?[0-9]{4}[ -]?[0-9]{4}\b",
    ),
    _verify_aadhaar,
)

# ---------------------------------------------------------------------------
# Permanent Account Number (PAN)
# Format: AAAAA9999A (5 letters, 4 digits, 1 letter)
# ---------------------------------------------------------------------------
PAN: tuple[str, re.Pattern[str], Verifier] = (
    "pan",
    re.compile(
        r"\b[A-Z]{5}[0-9]{4}[A-Z]\b",
    ),
    is_valid_pan,
)

# ---------------------------------------------------------------------------
# Goods and Services Tax Identification Number (GSTIN)
# Format: 2 digits state code + PAN + 1 entity + Z + 1 check character
# ---------------------------------------------------------------------------
GSTIN: tuple[str, re.Pattern[str], Verifier] = (
    "gstin",
    re.compile(
        rf"\b{GSTIN_PATTERN}\b",
    ),
    is_valid_gstin,
)

# ---------------------------------------------------------------------------
# Exported collection
# ---------------------------------------------------------------------------
INDIA_PATTERNS: list[tuple[str, re.Pattern[str], Verifier]] = [
    AADHAAR,
    PAN,
    GSTIN,
]

PATTERN_LABELS: frozenset[str] = frozenset(label for label, _, _ in INDIA_PATTERNS)
