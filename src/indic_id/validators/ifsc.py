"""IFSC (Indian Financial System Code) validation.

Format: four-letter bank code, a literal ``0``, six-character branch code.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from indic_id.data.banks import BANK_CODES, BANK_NAMES

_STRUCTURE = re.compile(r"[A-Z]{4}0[A-Z0-9]{6}")


@dataclass(frozen=True)
class IfscInfo:
    """Bank and branch decoded from an IFSC."""

    valid: bool
    bank_code: str | None = None
    bank: str | None = None
    branch_code: str | None = None


def is_valid_ifsc(ifsc: object, strict: bool = True) -> bool:
    """Return ``True`` for a well-formed IFSC.

    Parameters
    ----------
    ifsc:
        Candidate code.
    strict:
        When ``True`` (default) the bank code must be in
        :data:`~indic_id.data.banks.BANK_CODES`.  When ``False`` only the
        structure is checked.
    """
    if not isinstance(ifsc, str) or _STRUCTURE.fullmatch(ifsc) is None:
        return False
    return not strict or ifsc[:4] in BANK_CODES


def get_ifsc_info(ifsc: object, strict: bool = True) -> IfscInfo:
    """Return bank code, bank name (when known) and branch code."""
    if not isinstance(ifsc, str) or not is_valid_ifsc(ifsc, strict=strict):
        return IfscInfo(valid=False)
    bank_code = ifsc[:4]
    return IfscInfo(
        valid=True,
        bank_code=bank_code,
        bank=BANK_NAMES.get(bank_code),
        branch_code=ifsc[5:],
    )
