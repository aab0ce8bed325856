"""Static reference tables used by the validators and heuristics."""
from __future__ import annotations

from indic_id.data.banks import BANK_CODES, BANK_NAMES
from indic_id.data.gst_states import GST_STATE_CODES
from indic_id.data.pincodes import PINCODE_REGIONS
from indic_id.data.states import COMMON_CITIES, STATE_ABBREVIATIONS

__all__ = [
    "BANK_CODES",
    "BANK_NAMES",
    "COMMON_CITIES",
    "GST_STATE_CODES",
    "PINCODE_REGIONS",
    "STATE_ABBREVIATIONS",
]
