"""Indic text normalisation for tokenisers and LLM preprocessing."""
from __future__ import annotations

import re
import unicodedata

# Zero-width non-joiner and joiner.
_JOINERS = re.compile(r"[\u200c\u200d]")
_WHITESPACE = re.compile(r"[\s\u200b]+")


def normalize_indic(text: str | None) -> str:
    """Return ``text`` in NFC form without joiners and with collapsed whitespace.

    Zero-width joiner (U+200D) and non-joiner (U+200C) are removed, runs of
    whitespace and zero-width spaces become one space, and the result is
    stripped.  Empty or ``None`` input returns ``""``.
    """
    if not text:
        return ""
    normalised = unicodedata.normalize("NFC", text)
    normalised = _JOINERS.sub("", normalised)
    return _WHITESPACE.sub(" ", normalised).strip()
