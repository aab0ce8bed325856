"""Unit tests for checksums/mod36.py."""
from __future__ import annotations

import pytest

from indic_id.checksums.alphabet import ALPHABET
from indic_id.checksums.mod36 import (
    generate_mod36_check_digit,
    mod36_check_char,
    validate_mod36_check_digit,
)


def _complete(base: str) -> str:
    return base + ALPHABET[generate_mod36_check_digit(base)]


# ---------------------------------------------------------------------------
# generate_mod36_check_digit
# ---------------------------------------------------------------------------


class TestGenerateMod36CheckDigit:
    def test_known_gstin_base(self) -> None:
        # 'M' is index 22.
        assert generate_mod36_check_digit("27AAPFR5055K1Z") == 22

    def test_constructed_karnataka_base(self) -> None:
        assert ALPHABET[generate_mod36_check_digit("29ABCDE1234F1Z")] == "W"

    def test_constructed_delhi_base(self) -> None:
        assert ALPHABET[generate_mod36_check_digit("07ABCDE1234F1Z")] == "2"

    def test_thirteen_characters_returns_sentinel(self) -> None:
        assert generate_mod36_check_digit("29ABCDE1234F1") == -1

    def test_fifteen_characters_returns_sentinel(self) -> None:
        assert generate_mod36_check_digit("29ABCDE1234F1ZZ") == -1

    @pytest.mark.parametrize("base", ["29ABCDE1234F1@", "29ABCDE1234F1!", "29ABCDE-234F1Z"])
    def test_invalid_characters_return_sentinel(self, base: str) -> None:
        assert generate_mod36_check_digit(base) == -1

    @pytest.mark.parametrize("base", ["29ABCDE 234F1Z", " 9ABCDE1234F1Z", "29ABCDE1234F1 "])
    def test_whitespace_returns_sentinel(self, base: str) -> None:
        assert generate_mod36_check_digit(base) == -1

    @pytest.mark.parametrize("base", ["", None, 29, {}, [], b"27AAPFR5055K1Z"])
    def test_empty_and_non_string_return_sentinel(self, base: object) -> None:
        assert generate_mod36_check_digit(base) == -1

    def test_non_ascii_letters_return_sentinel(self) -> None:
        # Dotless i upper-cases to 'I'.
        assert generate_mod36_check_digit("27AAPFR5055K1ı") == -1

    def test_lowercase_matches_uppercase(self) -> None:
        assert generate_mod36_check_digit("29abcde1234f1z") == generate_mod36_check_digit(
            "29ABCDE1234F1Z"
        )

    @pytest.mark.parametrize("base", ["29123456789012", "29ABCDEFGHIJKL", "29A1B2C3D4E5F6"])
    def test_result_in_range(self, base: str) -> None:
        assert 0 <= generate_mod36_check_digit(base) < 36

    def test_weight_alternation_starts_at_one(self) -> None:
        # 'I' (18) adds 18 at index 0; at index 1 the product 36 folds to 1 + 0.
        assert generate_mod36_check_digit("I" + "0" * 13) == 36 - 18
        assert generate_mod36_check_digit("0I" + "0" * 12) == 36 - 1

    def test_all_zero_base(self) -> None:
        assert generate_mod36_check_digit("0" * 14) == 0


# ---------------------------------------------------------------------------
# mod36_check_char
# ---------------------------------------------------------------------------


class TestMod36CheckChar:
    def test_returns_character(self) -> None:
        assert mod36_check_char("27AAPFR5055K1Z") == "M"

    def test_invalid_returns_none(self) -> None:
        assert mod36_check_char("27AAPFR5055K1") is None


# ---------------------------------------------------------------------------
# validate_mod36_check_digit
# ---------------------------------------------------------------------------


class TestValidateMod36CheckDigit:
    def test_known_valid(self) -> None:
        assert validate_mod36_check_digit("27AAPFR5055K1ZM")

    @pytest.mark.parametrize("value", ["27AAPFR5055K1Z0", "27AAPFR5055K1Z1", "27AAPFR5055K1Z9"])
    def test_wrong_check_character(self, value: str) -> None:
        assert not validate_mod36_check_digit(value)

    @pytest.mark.parametrize("value", ["27AAPFR5055K1", "27AAPFR5055K1Z", "27AAPFR5055K1Z11"])
    def test_wrong_length(self, value: str) -> None:
        assert not validate_mod36_check_digit(value)

    @pytest.mark.parametrize(
        "value",
        ["27AAPFR5055K1@1", "27AAPFR5055K1!1", "27AAPFR5055K1Z@", "27AAPFR5055K1Z!"],
    )
    def test_invalid_characters(self, value: str) -> None:
        assert not validate_mod36_check_digit(value)

    @pytest.mark.parametrize(
        "value", [" 27AAPFR5055K1ZM", "27AAPFR5055K1ZM ", "27AAPFR5055 K1ZM", " 7AAPFR5055K1ZM"]
    )
    def test_whitespace(self, value: str) -> None:
        assert not validate_mod36_check_digit(value)

    @pytest.mark.parametrize("value", ["", None, 27, {}, []])
    def test_empty_and_non_string(self, value: object) -> None:
        assert validate_mod36_check_digit(value) is False

    def test_lowercase_equals_uppercase(self) -> None:
        assert validate_mod36_check_digit("27aapfr5055k1zm") is True
        assert validate_mod36_check_digit("27aapfr5055k1z1") == validate_mod36_check_digit(
            "27AAPFR5055K1Z1"
        )

    def test_all_zero_and_all_z_round_trip(self) -> None:
        for base in ["0" * 14, "Z" * 14]:
            assert validate_mod36_check_digit(_complete(base))

    def test_round_trip_real_world_bases(self) -> None:
        for base in ["27AAPFR5055K1Z", "29ABCDE1234F1Z", "07ABCDE1234F1Z", "37AZBPU5054C1Z"]:
            assert validate_mod36_check_digit(_complete(base))

    def test_round_trip_every_symbol_at_every_position(self) -> None:
        for position in range(14):
            for symbol in ALPHABET:
                base = "0" * position + symbol + "0" * (13 - position)
                assert validate_mod36_check_digit(_complete(base)), base

    def test_cycling_any_position_breaks_validation(self) -> None:
        full = _complete("27AAPFR5055K1Z")
        for position in range(len(full)):
            next_symbol = ALPHABET[(ALPHABET.index(full[position]) + 1) % 36]
            altered = full[:position] + next_symbol + full[position + 1 :]
            assert not validate_mod36_check_digit(altered), altered
