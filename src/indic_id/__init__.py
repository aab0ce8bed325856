"""indic-id: validation and metadata extraction for Indian identifiers.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import indic_id
>>> indic_id.__version__
'0.1.0'
>>> indic_id.is_valid_gstin("27AAPFR5055K1ZM")
True
>>> indic_id.generate_verhoeff("23")
6
>>> indic_id.get_pan_info("ABCPE1234F").category_desc
'Person'
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Checksums
# ---------------------------------------------------------------------------
from indic_id.checksums.alphabet import ALPHABET, InputErrorKind, InvalidInputError
from indic_id.checksums.luhn import validate_luhn
from indic_id.checksums.mod36 import (
    generate_mod36_check_digit,
    mod36_check_char,
    validate_mod36_check_digit,
)
from indic_id.checksums.verhoeff import generate_verhoeff, validate_verhoeff

# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------
from indic_id.validators import (
    AadhaarInfo,
    GstinInfo,
    IfscInfo,
    PanInfo,
    PincodeInfo,
    UnknownIdentifierTypeError,
    generate_aadhaar,
    get_aadhaar_info,
    get_gstin_info,
    get_ifsc_info,
    get_info,
    get_pan_info,
    get_pincode_info,
    is_valid_aadhaar,
    is_valid_gstin,
    is_valid_ifsc,
    is_valid_pan,
    is_valid_pincode,
    validate,
)

# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------
from indic_id.detection.pii_detector import PiiDetector, PiiMatch
from indic_id.detection.redactor import PiiRedactor, ScrubOptions, scrub_pii

# ---------------------------------------------------------------------------
# Research suite
# ---------------------------------------------------------------------------
from indic_id.research.address import AddressObject, parse_address
from indic_id.research.deep_verify import VerificationType, deep_verify
from indic_id.research.phonetic import phonetic_match
from indic_id.research.text import normalize_indic

# ---------------------------------------------------------------------------
# Schemas and configuration
# ---------------------------------------------------------------------------
from indic_id.schemas import AadhaarNumber, Gstin, IfscCode, PanNumber, Pincode
from indic_id.config import ConfigError, ConfigLoader, IndicIdConfig

__all__ = [
    "__version__",
    # Checksums
    "ALPHABET",
    "InputErrorKind",
    "InvalidInputError",
    "generate_mod36_check_digit",
    "generate_verhoeff",
    "mod36_check_char",
    "validate_luhn",
    "validate_mod36_check_digit",
    "validate_verhoeff",
    # Validators
    "AadhaarInfo",
    "GstinInfo",
    "IfscInfo",
    "PanInfo",
    "PincodeInfo",
    "UnknownIdentifierTypeError",
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
    "validate",
    # Detection
    "PiiDetector",
    "PiiMatch",
    "PiiRedactor",
    "ScrubOptions",
    "scrub_pii",
    # Research
    "AddressObject",
    "VerificationType",
    "deep_verify",
    "normalize_indic",
    "parse_address",
    "phonetic_match",
    # Schemas
    "AadhaarNumber",
    "Gstin",
    "IfscCode",
    "PanNumber",
    "Pincode",
    # Configuration
    "ConfigError",
    "ConfigLoader",
    "IndicIdConfig",
]
