"""Heuristic parser for free-form Indian postal addresses.

Pulls out the pincode, the state, a metropolitan city, and landmark
phrases ("near ...", "opp ...", "behind ...").  Anything it cannot
recognise is left as ``None``; no gazetteer lookups are performed.

Example
-------
>>> parsed = parse_address("Flat 4, Near City Mall, MG Road, Bengaluru, Karnataka 560001")
>>> parsed.pincode, parsed.city, parsed.state
('560001', 'Bengaluru', 'Karnataka')
>>> parsed.landmarks
['Near City Mall']
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

from indic_id.data.gst_states import state_names
from indic_id.data.states import COMMON_CITIES

_PINCODE = re.compile(r"\b[0-9]{6}\b")
_SEGMENT_DELIMITERS = re.compile(r"[,.\n]+")

LANDMARK_KEYWORDS: tuple[str, ...] = (
    "near",
    "opposite",
    "opp",
    "behind",
    "adj",
    "adjacent",
    "next to",
)


def _word_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE)


_STATE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (name, _word_pattern(name)) for name in state_names()
]
_CITY_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (name, _word_pattern(name)) for name in COMMON_CITIES
]


@dataclass
class AddressObject:
    """Components recovered from an address string."""

    pincode: str | None = None
    city: str | None = None
    state: str | None = None
    landmarks: list[str] = field(default_factory=list)


def _first_match(patterns: list[tuple[str, re.Pattern[str]]], text: str) -> str | None:
    for name, pattern in patterns:
        if pattern.search(text):
            return name
    return None


def _is_landmark(segment: str) -> bool:
    lowered = segment.lower()
    return any(
        lowered.startswith(f"{keyword} ") or f" {keyword} " in lowered
        for keyword in LANDMARK_KEYWORDS
    )


def parse_address(address: str | None) -> AddressObject:
    """Parse ``address`` into an :class:`AddressObject`.

    The first six-digit run is taken as the pincode.  The state is the
    longest known state name found as a whole word, returned in its
    canonical spelling.  Landmarks are the comma/period/newline separated
    segments that start with or contain a landmark keyword.
    """
    result = AddressObject()
    if not address:
        return result

    pin_match = _PINCODE.search(address)
    if pin_match:
        result.pincode = pin_match.group()

    result.state = _first_match(_STATE_PATTERNS, address)
    result.city = _first_match(_CITY_PATTERNS, address)

    for segment in _SEGMENT_DELIMITERS.split(address):
        trimmed = segment.strip()
        if trimmed and _is_landmark(trimmed):
            result.landmarks.append(trimmed)

    return result
