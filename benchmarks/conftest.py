"""Shared bootstrap for indic-id benchmarks."""
from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT = Path(__file__).parent.parent
_SRC = _REPO_ROOT / "src"
_BENCHMARKS = _REPO_ROOT / "benchmarks"

for _path in [str(_SRC), str(_BENCHMARKS)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from indic_id.checksums.mod36 import generate_mod36_check_digit, validate_mod36_check_digit
from indic_id.checksums.verhoeff import generate_verhoeff, validate_verhoeff
from indic_id.detection.redactor import PiiRedactor, scrub_pii

__all__ = [
    "PiiRedactor",
    "generate_mod36_check_digit",
    "generate_verhoeff",
    "scrub_pii",
    "validate_mod36_check_digit",
    "validate_verhoeff",
]
