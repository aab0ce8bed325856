"""Pydantic v2 field types backed by the identifier validators.

Each type is an ``Annotated[str, AfterValidator(...)]`` that rejects any
string its validator does not accept, with a fixed error message.

Example
-------
>>> from pydantic import BaseModel
>>> class Supplier(BaseModel):
...     gstin: Gstin
...     pan: PanNumber
>>> Supplier(gstin="27AAPFR5055K1ZM", pan="AAPFR5055K").pan
'AAPFR5055K'
"""
from __future__ import annotations

from typing import Annotated, Callable

from pydantic import AfterValidator

from indic_id.validators.aadhaar import is_valid_aadhaar
from indic_id.validators.gstin import is_valid_gstin
from indic_id.validators.ifsc import is_valid_ifsc
from indic_id.validators.pan import is_valid_pan
from indic_id.validators.pincode import is_valid_pincode


def refine(predicate: Callable[[object], bool], message: str) -> AfterValidator:
    """Wrap ``predicate`` as a pydantic after-validator raising ``message``."""

    def _check(value: str) -> str:
        if not predicate(value):
            raise ValueError(message)
        return value

    return AfterValidator(_check)


AadhaarNumber = Annotated[str, refine(is_valid_aadhaar, "Invalid Aadhaar Number")]
PanNumber = Annotated[str, refine(is_valid_pan, "Invalid PAN Number")]
Gstin = Annotated[str, refine(is_valid_gstin, "Invalid GSTIN Number")]
IfscCode = Annotated[str, refine(is_valid_ifsc, "Invalid IFSC Code")]
Pincode = Annotated[str, refine(is_valid_pincode, "Invalid Pincode")]

__all__ = [
    "AadhaarNumber",
    "Gstin",
    "IfscCode",
    "PanNumber",
    "Pincode",
    "refine",
]
