"""GST state and union territory codes (first two digits of a GSTIN)."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

GST_STATE_CODES: Mapping[str, str] = MappingProxyType(
    {
        "01": "Jammu and Kashmir",
        "02": "Himachal Pradesh",
        "03": "Punjab",
        "04": "Chandigarh",
        "05": "Uttarakhand",
        "06": "Haryana",
        "07": "Delhi",
        "08": "Rajasthan",
        "09": "Uttar Pradesh",
        "10": "Bihar",
        "11": "Sikkim",
        "12": "Arunachal Pradesh",
        "13": "Nagaland",
        "14": "Manipur",
        "15": "Mizoram",
        "16": "Tripura",
        "17": "Meghalaya",
        "18": "Assam",
        "19": "West Bengal",
        "20": "Jharkhand",
        "21": "Odisha",
        "22": "Chhattisgarh",
        "23": "Madhya Pradesh",
        "24": "Gujarat",
        "25": "Daman and Diu",
        "26": "Dadra and Nagar Haveli and Daman and Diu",
        "27": "Maharashtra",
        "28": "Andhra Pradesh",
        "29": "Karnataka",
        "30": "Goa",
        "31": "Lakshadweep",
        "32": "Kerala",
        "33": "Tamil Nadu",
        "34": "Puducherry",
        "35": "Andaman and Nicobar Islands",
        "36": "Telangana",
        "37": "Andhra Pradesh",
        "38": "Ladakh",
        "97": "Other Territory",
        "99": "Centre Jurisdiction",
    }
)

# Codes that do not name a geographic state.
NON_GEOGRAPHIC_CODES: frozenset[str] = frozenset({"97", "99"})


def state_names() -> list[str]:
    """Return the distinct geographic state names, longest first.

    Longest-first ordering lets a scan match
    "Dadra and Nagar Haveli and Daman and Diu" before "Daman and Diu".
    """
    names = {
        name for code, name in GST_STATE_CODES.items() if code not in NON_GEOGRAPHIC_CODES
    }
    return sorted(names, key=lambda name: (-len(name), name))
