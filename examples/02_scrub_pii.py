#!/usr/bin/env python3
"""Example: PII Scrubbing

Finds Aadhaar, PAN and GSTIN numbers in free text, verifies each candidate
with its checksum or category rule, and redacts only the real ones.

Usage:
    python examples/02_scrub_pii.py

Requirements:
    pip install indic-id
"""
from __future__ import annotations

from indic_id import PiiDetector, PiiRedactor, ScrubOptions, scrub_pii


def main() -> None:
    note = (
        "KYC for M/s Rao Traders: GSTIN 27AAPFR5055K1ZM, proprietor PAN ABCPE1234F, "
        "Aadhaar 9999 9999 0019. Invoice ref 9999-9999-0018 is not an Aadhaar."
    )

    # Step 1: Detection
    detector = PiiDetector()
    print("Detected identifiers:")
    for match in detector.detect(note):
        print(f"  {match.label:<8} {match.start:>3}-{match.end:<3} {match.matched_text}")

    print("\nRejected candidates:")
    for match in detector.detect(note, verify=False):
        if not match.verified:
            print(f"  {match.label:<8} {match.matched_text}")

    # Step 2: Default scrubbing
    print(f"\nScrubbed: {scrub_pii(note)}")

    # Step 3: Keep GSTINs (business identifiers) and mask the rest in place
    options = ScrubOptions(gstin=False, mask_char="X")
    print(f"Masked:   {scrub_pii(note, options)}")

    # Step 4: Report what was replaced
    redactor = PiiRedactor.from_options(ScrubOptions(placeholder_template="<{label}>"))
    redacted, applied = redactor.redact_with_report(note)
    print(f"\nRedacted: {redacted}")
    print(f"Replaced {len(applied)} identifiers: {[m.label for m in applied]}")


if __name__ == "__main__":
    main()
