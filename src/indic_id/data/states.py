"""Two-letter state abbreviations used by vehicle registration, EPIC, and UDID."""
from __future__ import annotations

STATE_ABBREVIATIONS: frozenset[str] = frozenset(
    {
        "AP", "AR", "AS", "BR", "CG", "GA", "GJ", "HR", "HP", "JK",
        "JH", "KA", "KL", "MP", "MH", "MN", "ML", "MZ", "NL", "OR",
        "PB", "RJ", "SK", "TN", "TS", "TR", "UP", "UK", "WB", "AN",
        "CH", "DN", "DD", "DL", "LD", "PY", "LA",
    }
)

# Metropolitan cities recognised by the address parser.
COMMON_CITIES: tuple[str, ...] = (
    "Mumbai",
    "Delhi",
    "Bangalore",
    "Bengaluru",
    "Chennai",
    "Kolkata",
    "Hyderabad",
    "Pune",
    "Ahmedabad",
    "Jaipur",
    "Lucknow",
)
