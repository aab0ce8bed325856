"""Indian postal index number (pincode) validation."""
from __future__ import annotations

import re
from dataclasses import dataclass

from indic_id.data.pincodes import PINCODE_REGIONS

_STRUCTURE = re.compile(r"[1-9][0-9]{5}")


@dataclass(frozen=True)
class PincodeInfo:
    """Validity and postal region of a pincode."""

    valid: bool
    region: str | None = None


def is_valid_pincode(pincode: object) -> bool:
    """Return ``True`` for six digits whose two-digit prefix is a known region."""
    if not isinstance(pincode, str) or _STRUCTURE.fullmatch(pincode) is None:
        return False
    return pincode[:2] in PINCODE_REGIONS


def get_pincode_info(pincode: object) -> PincodeInfo:
    """Return the postal region for ``pincode``.

    Example
    -------
    >>> get_pincode_info("110001").region
    'Delhi'
    """
    if not isinstance(pincode, str) or not is_valid_pincode(pincode):
        return PincodeInfo(valid=False)
    return PincodeInfo(valid=True, region=PINCODE_REGIONS[pincode[:2]])
