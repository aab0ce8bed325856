"""Postal regions keyed by the first two digits of a pincode.

Army Postal Service prefixes (90-99) are absent; they do
not identify a civil region.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


def _span(first: int, last: int, region: str) -> dict[str, str]:
    return {f"{prefix:02d}": region for prefix in range(first, last + 1)}


PINCODE_REGIONS: Mapping[str, str] = MappingProxyType(
    {
        "11": "Delhi",
        **_span(12, 13, "Haryana"),
        **_span(14, 15, "Punjab"),
        "16": "Chandigarh",
        "17": "Himachal Pradesh",
        **_span(18, 19, "Jammu and Kashmir"),
        **_span(20, 23, "Uttar Pradesh"),
        "24": "Uttarakhand",
        **_span(25, 28, "Uttar Pradesh"),
        **_span(30, 34, "Rajasthan"),
        **_span(36, 39, "Gujarat"),
        **_span(40, 44, "Maharashtra"),
        **_span(45, 48, "Madhya Pradesh"),
        "49": "Chhattisgarh",
        "50": "Telangana",
        **_span(51, 53, "Andhra Pradesh"),
        **_span(56, 59, "Karnataka"),
        **_span(60, 64, "Tamil Nadu"),
        **_span(67, 69, "Kerala"),
        **_span(70, 74, "West Bengal"),
        **_span(75, 77, "Odisha"),
        "78": "Assam",
        "79": "North Eastern States",
        **_span(80, 82, "Bihar"),
        **_span(83, 83, "Jharkhand"),
        **_span(84, 85, "Bihar"),
    }
)
