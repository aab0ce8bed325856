"""Structural verification of government IDs without checksums.

Goes beyond a single regex by validating embedded components, chiefly the
two-letter state abbreviation, for Voter ID (EPIC), vehicle registration
certificate (RC), and Unique Disability ID (UDID) numbers.

Example
-------
>>> deep_verify("ABC1234567", VerificationType.VOTER_ID)
True
>>> deep_verify("DL 1C AB 1234", "RC")
True
>>> deep_verify("XX1CAB1234", "RC")
False
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable

from indic_id.data.states import STATE_ABBREVIATIONS

logger = logging.getLogger(__name__)


class VerificationType(str, Enum):
    """ID families supported by :func:`deep_verify`."""

    VOTER_ID = "VOTER_ID"
    RC = "RC"
    UDID = "UDID"


# Modern EPIC: three-letter series + seven digits.
_EPIC = re.compile(r"[A-Z]{3}[0-9]{7}")
# Legacy EPIC: state/constituency/part/serial.
_EPIC_LEGACY = re.compile(r"([A-Z]{2})/[0-9]{2}/[0-9]{3}/[0-9]{6}")
# State, RTO district (1-2 digits), optional series (0-3 letters), number.
_RC = re.compile(r"[A-Z]{2}[0-9]{1,2}[A-Z]{0,3}[0-9]{4}")
_RC_SEPARATORS = re.compile(r"[- ]")
_UDID = re.compile(r"[A-Z]{2}[0-9A-Z]{16}")


def _verify_voter_id(value: str) -> bool:
    if _EPIC.fullmatch(value):
        return True
    legacy = _EPIC_LEGACY.fullmatch(value)
    return legacy is not None and legacy.group(1) in STATE_ABBREVIATIONS


def _verify_rc(value: str) -> bool:
    compact = _RC_SEPARATORS.sub("", value)
    if _RC.fullmatch(compact) is None:
        return False
    return compact[:2] in STATE_ABBREVIATIONS


def _verify_udid(value: str) -> bool:
    if _UDID.fullmatch(value) is None:
        return False
    return value[:2] in STATE_ABBREVIATIONS


_VERIFIERS: dict[VerificationType, Callable[[str], bool]] = {
    VerificationType.VOTER_ID: _verify_voter_id,
    VerificationType.RC: _verify_rc,
    VerificationType.UDID: _verify_udid,
}


def deep_verify(id_value: object, id_type: VerificationType | str) -> bool:
    """Return ``True`` when ``id_value`` is a structurally valid ID of ``id_type``.

    The value is upper-cased and stripped first.  Non-string or empty
    values, and unknown ``id_type`` names, return ``False``.
    """
    if not isinstance(id_value, str) or not id_value:
        return False
    if isinstance(id_type, VerificationType):
        verification_type = id_type
    else:
        try:
            verification_type = VerificationType(str(id_type).upper())
        except ValueError:
            logger.debug("Unknown verification type %r", id_type)
            return False

    accepted = _VERIFIERS[verification_type](id_value.upper().strip())
    if not accepted:
        logger.debug("%s failed structural verification", verification_type.value)
    return accepted
