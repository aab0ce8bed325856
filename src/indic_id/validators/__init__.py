"""Format validators for Indian identifiers.

Every ``is_valid_*`` function is total: any input, including ``None`` and
non-strings, yields a ``bool``.  :data:`VALIDATORS` maps identifier type
names to their validator so callers can dispatch by name.

Example
-------
>>> validate("pan", "ABCPE1234F")
True
>>> get_info("pincode", "110001").region
'Delhi'
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from indic_id.validators.aadhaar import (
    AadhaarInfo,
    generate_aadhaar,
    get_aadhaar_info,
    is_valid_aadhaar,
    mask_aadhaar,
)
from indic_id.validators.gstin import GstinInfo, get_gstin_info, is_valid_gstin
from indic_id.validators.ifsc import IfscInfo, get_ifsc_info, is_valid_ifsc
from indic_id.validators.pan import PAN_CATEGORIES, PanInfo, get_pan_info, is_valid_pan
from indic_id.validators.pincode import PincodeInfo, get_pincode_info, is_valid_pincode

VALIDATORS: dict[str, Callable[[object], bool]] = {
    "aadhaar": is_valid_aadhaar,
    "pan": is_valid_pan,
    "gstin": is_valid_gstin,
    "ifsc": is_valid_ifsc,
    "pincode": is_valid_pincode,
}

INFO_EXTRACTORS: dict[str, Callable[[object], object]] = {
    "aadhaar": get_aadhaar_info,
    "pan": get_pan_info,
    "gstin": get_gstin_info,
    "ifsc": get_ifsc_info,
    "pincode": get_pincode_info,
}


class UnknownIdentifierTypeError(KeyError):
    """Raised when dispatching on an identifier type with no validator.

    Attributes
    ----------
    id_type:
        The requested type name.
    """

    def __init__(self, id_type: str) -> None:
        self.id_type = id_type
        super().__init__(
            f"Unknown identifier type '{id_type}'. Valid: {sorted(VALIDATORS)}"
        )


def _lookup(registry: Mapping[str, Callable[[object], Any]], id_type: str) -> Callable[[object], Any]:
    try:
        return registry[id_type.lower()]
    except KeyError:
        raise UnknownIdentifierTypeError(id_type) from None


def validate(id_type: str, value: object) -> bool:
    """Validate ``value`` as an identifier of type ``id_type`` (case-insensitive name).

    Raises
    ------
    UnknownIdentifierTypeError
        When ``id_type`` is not a key of :data:`VALIDATORS`.
    """
    return bool(_lookup(VALIDATORS, id_type)(value))


def get_info(id_type: str, value: object) -> object:
    """Return the metadata object for ``value`` as an identifier of ``id_type``."""
    return _lookup(INFO_EXTRACTORS, id_type)(value)


__all__ = [
    "AadhaarInfo",
    "GstinInfo",
    "INFO_EXTRACTORS",
    "IfscInfo",
    "PAN_CATEGORIES",
    "PanInfo",
    "PincodeInfo",
    "UnknownIdentifierTypeError",
    "VALIDATORS",
    "generate_aadhaar",
    "get_aadhaar_info",
    "get_gstin_info",
    "get_ifsc_info",
    "get_info",
    "get_pan_info",
    "get_pincode_info",
    "is_valid_aadhaar",
    "is_valid_gstin",
    "is_valid_ifsc",
    "is_valid_pan",
    "is_valid_pincode",
    "mask_aadhaar",
    "validate",
]
