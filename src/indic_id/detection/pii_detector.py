"""Regex-then-verify detector for Indian identifiers in text.

The detector scans text with each candidate pattern and keeps only the
matches whose verifier accepts them.  Pass ``verify=False`` to see every
raw candidate instead.

Example
-------
>>> detector = PiiDetector()
>>> detector.contains_pii("Aadhaar: 9999 9999 0019")
True
>>> detector.contains_pii("Order no. 9999 9999 0018")
False
>>> [m.label for m in detector.detect("PAN ABCPE1234F on file")]
['pan']
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from indic_id.detection.patterns import INDIA_PATTERNS, Verifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PiiMatch:
    """Represents a single identifier found within a text.

    Attributes
    ----------
    label:
        Identifier type label (``"aadhaar"``, ``"pan"``, ``"gstin"`` or a
        custom label).
    matched_text:
        The exact substring that was matched, separators included.
    start:
        Start index within the scanned text.
    end:
        End index within the scanned text.
    verified:
        ``True`` when the verifier accepted the match.
    """

    label: str
    matched_text: str
    start: int
    end: int
    verified: bool = True


class PiiDetector:
    """Scans text for Indian identifiers.

    Parameters
    ----------
    labels:
        Which built-in patterns to load (``"aadhaar"``, ``"pan"``,
        ``"gstin"``).  ``None`` loads all of them.
    extra_patterns:
        Additional ``(label, compiled_pattern, verifier)`` tuples.  Use a
        verifier of ``None`` to accept every regex match.
    """

    def __init__(
        self,
        labels: list[str] | None = None,
        extra_patterns: list[tuple[str, re.Pattern[str], Verifier | None]] | None = None,
    ) -> None:
        self._patterns: list[tuple[str, re.Pattern[str], Verifier | None]] = [
            (label, pattern, verifier)
            for label, pattern, verifier in INDIA_PATTERNS
            if labels is None or label in labels
        ]
        for label, pattern, verifier in (extra_patterns or []):
            self._patterns.append((label, pattern, verifier))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def labels(self) -> list[str]:
        """Labels of the loaded patterns, in scan order."""
        return [label for label, _, _ in self._patterns]

    def contains_pii(self, text: str) -> bool:
        """Return ``True`` as soon as any verified identifier is found."""
        for _, pattern, verifier in self._patterns:
            for m in pattern.finditer(text):
                if verifier is None or verifier(m.group()):
                    return True
        return False

    def detect(self, text: str, verify: bool = True) -> list[PiiMatch]:
        """Return identifiers found in ``text``, ordered by position.

        Parameters
        ----------
        text:
            The string to scan.
        verify:
            When ``True`` (default) candidates failing their verifier are
            dropped.  When ``False`` they are returned with
            ``verified=False``.

        Returns
        -------
        list[PiiMatch]
            Matches in order of appearance.  Overlapping matches from
            different patterns are all included.
        """
        matches: list[PiiMatch] = []
        for label, pattern, verifier in self._patterns:
            for m in pattern.finditer(text):
                accepted = verifier is None or verifier(m.group())
                if not accepted:
                    logger.debug(
                        "Rejected %s candidate at %d-%d: verification failed",
                        label,
                        m.start(),
                        m.end(),
                    )
                    if verify:
                        continue
                matches.append(
                    PiiMatch(
                        label=label,
                        matched_text=m.group(),
                        start=m.start(),
                        end=m.end(),
                        verified=accepted,
                    )
                )
        matches.sort(key=lambda m: m.start)
        return matches

    def detect_labels(self, text: str) -> set[str]:
        """Return the set of identifier labels verified in ``text``."""
        return {m.label for m in self.detect(text)}

    def add_pattern(
        self,
        label: str,
        pattern: re.Pattern[str],
        verifier: Verifier | None = None,
    ) -> None:
        """Add a custom pattern to the detector at runtime."""
        self._patterns.append((label, pattern, verifier))
