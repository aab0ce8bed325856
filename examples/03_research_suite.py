#!/usr/bin/env python3
"""Example: Research Suite

Heuristics that go beyond checksums: Indic text normalisation, phonetic
name matching, address parsing and structural checks for Voter ID,
vehicle RC and UDID numbers.

Usage:
    python examples/03_research_suite.py

Requirements:
    pip install indic-id
"""
from __future__ import annotations

from indic_id import VerificationType, deep_verify, normalize_indic, parse_address, phonetic_match


def main() -> None:
    # Step 1: Normalisation
    raw = "  Ramesh \u200b  Kumar  "
    print(f"Normalised: {normalize_indic(raw)!r}")

    # Step 2: Phonetic matching of transliterated names
    pairs = [("Aditya", "Adithya"), ("Vikram", "Bikram"), ("Ramesh", "Rakesh"), ("Rahul", "Suresh")]
    print("\nPhonetic similarity:")
    for first, second in pairs:
        print(f"  {first:<8} ~ {second:<8} {phonetic_match(first, second):.2f}")

    # Step 3: Address parsing
    address = parse_address("Flat 4, Near City Mall, MG Road, Bengaluru, Karnataka 560001")
    print(f"\nAddress: pincode={address.pincode} city={address.city} state={address.state}")
    print(f"  landmarks={address.landmarks}")

    # Step 4: Structural verification
    checks = [
        ("ABC1234567", VerificationType.VOTER_ID),
        ("DL 1C AB 1234", VerificationType.RC),
        ("XX1CAB1234", VerificationType.RC),
        ("MH0123456789ABCDEF", VerificationType.UDID),
    ]
    print("\nDeep verification:")
    for value, id_type in checks:
        status = "PASS" if deep_verify(value, id_type) else "FAIL"
        print(f"  [{status}] {id_type.value}: {value}")


if __name__ == "__main__":
    main()
