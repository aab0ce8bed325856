"""Identifier redactor and the :func:`scrub_pii` convenience function.

Replaces verified identifiers in text with placeholder tokens of the form
``[<LABEL>_MASKED]``, or with a run of mask characters of the same length.
Text that merely looks like an identifier but fails verification (a random
12-digit number, say) is left alone.

Example
-------
>>> scrub_pii("Aadhaar 9999 9999 0019, PAN ABCPE1234F")
'Aadhaar [AADHAAR_MASKED], PAN [PAN_MASKED]'
>>> scrub_pii("PAN ABCPE1234F", ScrubOptions(mask_char="*"))
'PAN **********'
"""
from __future__ import annotations

from dataclasses import dataclass

from indic_id.detection.pii_detector import PiiDetector, PiiMatch

DEFAULT_PLACEHOLDER: str = "[{label}_MASKED]"


@dataclass(frozen=True)
class ScrubOptions:
    """Which identifiers :func:`scrub_pii` removes, and how.

    Attributes
    ----------
    aadhaar, pan, gstin:
        Enable scrubbing of each identifier type.  All default to ``True``.
    placeholder_template:
        Replacement token; ``{label}`` is replaced by the upper-cased
        identifier label.
    mask_char:
        When set, each match is replaced by this character repeated to the
        match's length and ``placeholder_template`` is ignored.
    """

    aadhaar: bool = True
    pan: bool = True
    gstin: bool = True
    placeholder_template: str = DEFAULT_PLACEHOLDER
    mask_char: str | None = None

    def enabled_labels(self) -> list[str]:
        """Detector labels switched on by these options."""
        flags = {"aadhaar": self.aadhaar, "pan": self.pan, "gstin": self.gstin}
        return [label for label, enabled in flags.items() if enabled]


class PiiRedactor:
    """Redacts verified identifiers from text.

    Parameters
    ----------
    detector:
        Optional :class:`PiiDetector` instance.  A default detector with
        every built-in pattern is created when omitted.
    placeholder_template:
        Format string for the replacement token.  Use ``{label}`` to
        insert the identifier label.  Default: ``"[{label}_MASKED]"``.
    mask_char:
        When set, replace matches with ``mask_char * len(match)`` instead of
        a placeholder token.
    """

    def __init__(
        self,
        detector: PiiDetector | None = None,
        placeholder_template: str = DEFAULT_PLACEHOLDER,
        mask_char: str | None = None,
    ) -> None:
        self._detector = detector or PiiDetector()
        self._template = placeholder_template
        self._mask_char = mask_char

    @classmethod
    def from_options(cls, options: ScrubOptions) -> PiiRedactor:
        """Build a redactor for the identifier types enabled in ``options``."""
        return cls(
            detector=PiiDetector(labels=options.enabled_labels()),
            placeholder_template=options.placeholder_template,
            mask_char=options.mask_char,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def redact(self, text: str) -> str:
        """Return a copy of ``text`` with all verified identifiers replaced.

        Overlapping matches are resolved by preferring the earlier start
        position.  When two matches start at the same position, the longer
        match wins.
        """
        redacted, _ = self.redact_with_report(text)
        return redacted

    def redact_with_report(self, text: str) -> tuple[str, list[PiiMatch]]:
        """Redact identifiers and return both the redacted text and match details.

        Returns
        -------
        tuple[str, list[PiiMatch]]
            ``(redacted_text, matches_applied)`` where ``matches_applied``
            is the non-overlapping list of matches that were replaced.
        """
        matches = self._detector.detect(text)
        if not matches:
            return text, []

        resolved = self._resolve_overlaps(matches)

        parts: list[str] = []
        cursor = 0
        for match in resolved:
            if match.start > cursor:
                parts.append(text[cursor : match.start])
            parts.append(self._replacement(match))
            cursor = match.end

        if cursor < len(text):
            parts.append(text[cursor:])

        return "".join(parts), resolved

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _replacement(self, match: PiiMatch) -> str:
        if self._mask_char is not None:
            return self._mask_char * len(match.matched_text)
        return self._template.format(label=match.label.upper())

    @staticmethod
    def _resolve_overlaps(matches: list[PiiMatch]) -> list[PiiMatch]:
        """Remove overlapping matches, keeping the earlier/longer match."""
        sorted_matches = sorted(matches, key=lambda m: (m.start, -(m.end - m.start)))
        resolved: list[PiiMatch] = []
        last_end = -1
        for match in sorted_matches:
            if match.start >= last_end:
                resolved.append(match)
                last_end = match.end
        return resolved


def scrub_pii(text: str | None, options: ScrubOptions | None = None) -> str:
    """Scan ``text`` for Aadhaar, PAN and GSTIN numbers and redact them.

    Each candidate is verified with its full validator before it is
    replaced.  Empty or ``None`` input returns ``""``.
    """
    if not text:
        return ""
    return PiiRedactor.from_options(options or ScrubOptions()).redact(text)
