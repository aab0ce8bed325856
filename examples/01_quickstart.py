#!/usr/bin/env python3
"""Example: Quickstart, indic-id

Validate Aadhaar, PAN, GSTIN, IFSC and pincode values and decode the
metadata embedded in them.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install indic-id
"""
from __future__ import annotations

import indic_id as ids


def main() -> None:
    print(f"indic-id version: {ids.__version__}")

    # Step 1: Validate by type name
    samples = [
        ("aadhaar", "999999990019"),
        ("aadhaar", "999999990018"),
        ("pan", "ABCPE1234F"),
        ("gstin", "27AAPFR5055K1ZM"),
        ("ifsc", "SBIN0001234"),
        ("pincode", "012345"),
    ]

    print("\nValidation:")
    for id_type, value in samples:
        status = "VALID" if ids.validate(id_type, value) else "INVALID"
        print(f"  [{status}] {id_type}: {value}")

    # Step 2: Decode metadata
    gstin = ids.get_gstin_info("27AAPFR5055K1ZM")
    print(f"\nGSTIN state: {gstin.state}  PAN: {gstin.pan}  entity: {gstin.entity_number}")
    print(f"PAN holder: {ids.get_pan_info('ABCPE1234F').category_desc}")
    print(f"IFSC bank: {ids.get_ifsc_info('HDFC0000001').bank}")
    print(f"Pincode region: {ids.get_pincode_info('560001').region}")
    print(f"Aadhaar masked: {ids.get_aadhaar_info('999999990019').masked}")

    # Step 3: Generate check digits
    base = "27AAPFR5055K1Z"
    check = ids.mod36_check_char(base)
    print(f"\nMod-36 check for {base}: {check}")
    print(f"Verhoeff check for 99999999001: {ids.generate_verhoeff('99999999001')}")
    print(f"Test Aadhaar fixture: {ids.generate_aadhaar(12345)}")


if __name__ == "__main__":
    main()
