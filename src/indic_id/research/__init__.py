"""Heuristic helpers: text normalisation, phonetic matching, address parsing,
and structural verification of IDs that carry no checksum."""
from __future__ import annotations

from indic_id.research.address import AddressObject, parse_address
from indic_id.research.deep_verify import VerificationType, deep_verify
from indic_id.research.phonetic import phonetic_code, phonetic_match
from indic_id.research.text import normalize_indic

__all__ = [
    "AddressObject",
    "VerificationType",
    "deep_verify",
    "normalize_indic",
    "parse_address",
    "phonetic_code",
    "phonetic_match",
]
