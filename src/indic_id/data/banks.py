"""Known bank codes: the first four characters of an IFSC.

Not exhaustive.  Covers the major public and private sector banks,
including codes of banks since merged, whose IFSCs remain in circulation.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

BANK_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "SBIN": "State Bank of India",
        "HDFC": "HDFC Bank",
        "ICIC": "ICICI Bank",
        "UTIB": "Axis Bank",
        "PUNB": "Punjab National Bank",
        "BKID": "Bank of India",
        "BARB": "Bank of Baroda",
        "CNRB": "Canara Bank",
        "UBIN": "Union Bank of India",
        "IOBA": "Indian Overseas Bank",
        "IDIB": "Indian Bank",
        "CBIN": "Central Bank of India",
        "MAHB": "Bank of Maharashtra",
        "ORBC": "Oriental Bank of Commerce",
        "ALLA": "Allahabad Bank",
        "ANDB": "Andhra Bank",
        "SYNB": "Syndicate Bank",
        "CORP": "Corporation Bank",
        "VYSA": "ING Vysya Bank",
        "KKBK": "Kotak Mahindra Bank",
        "YESB": "Yes Bank",
        "INDB": "IndusInd Bank",
        "FDRL": "Federal Bank",
    }
)

BANK_CODES: frozenset[str] = frozenset(BANK_NAMES)
