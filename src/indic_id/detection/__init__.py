"""Detection and redaction of Indian identifiers in free text."""
from __future__ import annotations

from indic_id.detection.patterns import INDIA_PATTERNS
from indic_id.detection.pii_detector import PiiDetector, PiiMatch
from indic_id.detection.redactor import PiiRedactor, ScrubOptions, scrub_pii

__all__ = [
    "INDIA_PATTERNS",
    "PiiDetector",
    "PiiMatch",
    "PiiRedactor",
    "ScrubOptions",
    "scrub_pii",
]
