"""Phonetic similarity tuned for romanised Indian names.

Names are reduced to a consonant skeleton after folding spelling variants
common in transliteration ("Aditya"/"Adithya", "Vikram"/"Bikram",
"Deepak"/"Dipak").  Two skeletons are compared by Levenshtein distance.

Example
-------
>>> phonetic_match("Aditya", "Adithya")
1.0
>>> phonetic_match("Vikram", "Bikram")
1.0
"""
from __future__ import annotations

import re

_NON_ALPHA = re.compile(r"[^A-Z]")
_REPEATS = re.compile(r"(.)\1+")
_VOWELS = re.compile(r"[AEIOUY]")

# Applied in order; multi-letter digraphs before single letters.
_SUBSTITUTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile("PH"), "F"),
    (re.compile("BH"), "B"),
    (re.compile("TH"), "T"),
    (re.compile("SH"), "S"),
    (re.compile("X"), "K"),
    (re.compile("KS"), "K"),
    (re.compile("[VW]"), "B"),
    (re.compile("Z"), "J"),
    (re.compile("EE"), "I"),
    (re.compile("OO"), "U"),
    (re.compile("AU|OU"), "O"),
)


def phonetic_code(word: str) -> str:
    """Return the phonetic skeleton of ``word``.

    The first letter is kept; later vowels are dropped after digraph
    folding and de-duplication of repeated letters.
    """
    if not word:
        return ""
    code = _NON_ALPHA.sub("", word.upper())
    if not code:
        return ""
    for pattern, replacement in _SUBSTITUTIONS:
        code = pattern.sub(replacement, code)
    code = _REPEATS.sub(r"\1", code)
    return code[0] + _VOWELS.sub("", code[1:])


def levenshtein(a: str, b: str) -> int:
    """Return the edit distance between ``a`` and ``b``."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def phonetic_match(first: str, second: str) -> float:
    """Return a similarity score in ``[0.0, 1.0]`` for two names.

    ``1.0`` means identical phonetic skeletons; ``0.0`` is returned when
    either input has no letters.
    """
    code_a = phonetic_code(first)
    code_b = phonetic_code(second)
    if not code_a or not code_b:
        return 0.0
    if code_a == code_b:
        return 1.0
    distance = levenshtein(code_a, code_b)
    return 1 - distance / max(len(code_a), len(code_b))
