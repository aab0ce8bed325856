"""GSTIN (Goods and Services Tax Identification Number) validation.

Layout of the 15 characters::

    27  AAPFR5055K  1  Z  M
    │   │           │  │  └─ Mod-36 check character
    │   │           │  └──── fixed "Z"
    │   │           └─────── entity number for this PAN in the state
    │   └─────────────────── holder's PAN
    └─────────────────────── GST state code

The structural pattern is matched first; only then is the check character
verified by the Mod-36 engine.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from indic_id.checksums.mod36 import validate_mod36_check_digit
from indic_id.data.gst_states import GST_STATE_CODES

GSTIN_PATTERN: str = r"[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]"

_STRUCTURE = re.compile(GSTIN_PATTERN)


@dataclass(frozen=True)
class GstinInfo:
    """Metadata decoded from a GSTIN.

    Attributes
    ----------
    valid:
        Whether the GSTIN passed structural and checksum validation.
    state_code:
        Leading two digits.
    state:
        State name for ``state_code``; ``None`` when the code is not a
        known GST state code.
    pan:
        The embedded PAN (characters 3-12).
    entity_number:
        Character 13.
    check_char:
        Character 15.
    """

    valid: bool
    state_code: str | None = None
    state: str | None = None
    pan: str | None = None
    entity_number: str | None = None
    check_char: str | None = None


def is_valid_gstin(gstin: object) -> bool:
    """Return ``True`` for a well-formed GSTIN with a correct check character."""
    if not isinstance(gstin, str) or _STRUCTURE.fullmatch(gstin) is None:
        return False
    return validate_mod36_check_digit(gstin)


def get_gstin_info(gstin: object) -> GstinInfo:
    """Decode the state, PAN and entity number embedded in ``gstin``."""
    if not isinstance(gstin, str) or not is_valid_gstin(gstin):
        return GstinInfo(valid=False)
    state_code = gstin[:2]
    return GstinInfo(
        valid=True,
        state_code=state_code,
        state=GST_STATE_CODES.get(state_code),
        pan=gstin[2:12],
        entity_number=gstin[12],
        check_char=gstin[14],
    )
