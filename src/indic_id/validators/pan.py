"""Permanent Account Number (PAN) validation.

Format ``AAAAA9999A``: five letters, four digits, one letter.  The fourth
letter encodes the holder's category.  PAN carries no checksum.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

_STRUCTURE = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")

PAN_CATEGORIES: Mapping[str, str] = MappingProxyType(
    {
        "C": "Company",
        "P": "Person",
        "H": "Hindu Undivided Family",
        "F": "Firm",
        "A": "Association of Persons",
        "T": "Trust",
        "B": "Body of Individuals",
        "L": "Local Authority",
        "J": "Artificial Juridical Person",
        "G": "Government",
    }
)


@dataclass(frozen=True)
class PanInfo:
    """Metadata decoded from a PAN.

    Attributes
    ----------
    valid:
        Whether the PAN is well-formed with a known category.
    category:
        Fourth character of the PAN (e.g. ``"P"``).
    category_desc:
        Human-readable category (e.g. ``"Person"``).
    """

    valid: bool
    category: str | None = None
    category_desc: str | None = None


def is_valid_pan(pan: object) -> bool:
    """Return ``True`` for a well-formed PAN with a known holder category."""
    if not isinstance(pan, str) or _STRUCTURE.fullmatch(pan) is None:
        return False
    return pan[3] in PAN_CATEGORIES


def get_pan_info(pan: object) -> PanInfo:
    """Return the holder category encoded in ``pan``."""
    if not isinstance(pan, str) or not is_valid_pan(pan):
        return PanInfo(valid=False)
    category = pan[3]
    return PanInfo(valid=True, category=category, category_desc=PAN_CATEGORIES[category])
