"""Unit tests for cli/main.py."""
from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from indic_id.cli.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def lenient_config(tmp_path: Path) -> str:
    path = tmp_path / "indic-id.yaml"
    path.write_text(
        "validation:\n  strict_bank_codes: false\nscrub:\n  mask_char: '*'\n  gstin: false\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture()
def restore_logger_level() -> Iterator[logging.Logger]:
    logger = logging.getLogger("indic_id")
    saved = logger.level
    yield logger
    logger.setLevel(saved)


# ---------------------------------------------------------------------------
# CLI: validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid_exits_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", "aadhaar", "999999990019"])
        assert result.exit_code == 0
        assert "AADHAAR 999999990019: VALID" in result.output
        assert "INVALID" not in result.output

    def test_invalid_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", "gstin", "27AAPFR5055K1ZN"])
        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_type_is_case_insensitive(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", "PAN", "ABCPE1234F"])
        assert result.exit_code == 0

    def test_unknown_type_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", "passport", "X1234567"])
        assert result.exit_code == 2

    def test_config_relaxes_bank_codes(self, runner: CliRunner, lenient_config: str) -> None:
        strict = runner.invoke(cli, ["validate", "ifsc", "ABCD0123456"])
        lenient = runner.invoke(cli, ["validate", "ifsc", "ABCD0123456", "-c", lenient_config])
        assert strict.exit_code == 1
        assert lenient.exit_code == 0

    def test_invalid_config_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("log_level: LOUD\n", encoding="utf-8")
        result = runner.invoke(cli, ["validate", "pan", "ABCPE1234F", "--config", str(path)])
        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_undecodable_config_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"version: '\xff'\n")
        result = runner.invoke(cli, ["validate", "pan", "ABCPE1234F", "-c", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid config" in result.output

    def test_bad_placeholder_attribute_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("scrub:\n  placeholder_template: '[{label.x}]'\n", encoding="utf-8")
        result = runner.invoke(cli, ["validate", "pan", "ABCPE1234F", "-c", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid config" in result.output


# ---------------------------------------------------------------------------
# CLI: info
# ---------------------------------------------------------------------------


class TestInfoCommand:
    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["info", "gstin", "27AAPFR5055K1ZM", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "valid": True,
            "state_code": "27",
            "state": "Maharashtra",
            "pan": "AAPFR5055K",
            "entity_number": "1",
            "check_char": "M",
        }

    def test_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["info", "pan", "ABCPE1234F"])
        assert result.exit_code == 0
        assert "category_desc" in result.output
        assert "Person" in result.output

    def test_invalid_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["info", "pincode", "012345", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output) == {"valid": False, "region": None}

    def test_ifsc_unknown_bank_with_config(self, runner: CliRunner, lenient_config: str) -> None:
        result = runner.invoke(cli, ["info", "ifsc", "ABCD0123456", "--json", "-c", lenient_config])
        assert result.exit_code == 0
        assert json.loads(result.output)["bank"] is None


# ---------------------------------------------------------------------------
# CLI: scrub
# ---------------------------------------------------------------------------


class TestScrubCommand:
    def test_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["scrub"], input="PAN ABCPE1234F, UID 9999 9999 0019\n")
        assert result.exit_code == 0
        assert result.output == "PAN [PAN_MASKED], UID [AADHAAR_MASKED]\n"

    def test_file_with_config(self, runner: CliRunner, tmp_path: Path, lenient_config: str) -> None:
        source = tmp_path / "note.txt"
        source.write_text("PAN ABCPE1234F GSTIN 27AAPFR5055K1ZM", encoding="utf-8")
        result = runner.invoke(cli, ["scrub", str(source), "-c", lenient_config])
        assert result.exit_code == 0
        assert result.output == "PAN ********** GSTIN 27AAPFR5055K1ZM"

    def test_report(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["scrub", "--report"], input="PAN ABCPE1234F")
        assert result.exit_code == 0
        assert "PAN [PAN_MASKED]" in result.output
        assert "Redacted identifiers" in result.output


# ---------------------------------------------------------------------------
# CLI: checksum
# ---------------------------------------------------------------------------


class TestChecksumCommand:
    def test_verhoeff(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["checksum", "verhoeff", "99999999001"])
        assert result.exit_code == 0
        assert "Check: 9" in result.output
        assert "Full:  999999990019" in result.output

    def test_mod36_upper_cases_base(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["checksum", "mod36", "27aapfr5055k1z"])
        assert result.exit_code == 0
        assert "Full:  27AAPFR5055K1ZM" in result.output

    def test_verhoeff_bad_base(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["checksum", "verhoeff", "12a"])
        assert result.exit_code == 1
        assert "Cannot generate Verhoeff digit" in result.output

    def test_mod36_bad_base(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["checksum", "mod36", "27AAPFR"])
        assert result.exit_code == 1
        assert "Cannot generate Mod-36 character" in result.output


# ---------------------------------------------------------------------------
# CLI: verify, match, address, version
# ---------------------------------------------------------------------------


class TestResearchCommands:
    def test_verify_rc(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["verify", "rc", "MH12AB1234"])
        assert result.exit_code == 0
        assert "RC MH12AB1234: VALID" in result.output

    def test_verify_failure(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["verify", "UDID", "ZZ0123456789ABCDEF"])
        assert result.exit_code == 1

    def test_match(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["match", "Vikram", "Bikram"])
        assert result.exit_code == 0
        assert "BKRM" in result.output
        assert "Similarity: 1.00" in result.output

    def test_address_json(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["address", "Near Clock Tower, Lucknow, Uttar Pradesh 226001", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "pincode": "226001",
            "city": "Lucknow",
            "state": "Uttar Pradesh",
            "landmarks": ["Near Clock Tower"],
        }

    def test_address_table(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["address", "Chennai 600001"])
        assert result.exit_code == 0
        assert "600001" in result.output
        assert "Chennai" in result.output

    def test_version(self, runner: CliRunner) -> None:
        from indic_id import __version__

        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# CLI: logging
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("restore_logger_level")
class TestLogLevel:
    @pytest.fixture()
    def quiet_config(self, tmp_path: Path) -> str:
        path = tmp_path / "quiet.yaml"
        path.write_text("log_level: ERROR\n", encoding="utf-8")
        return str(path)

    def test_config_level_applied(self, runner: CliRunner, quiet_config: str) -> None:
        result = runner.invoke(cli, ["scrub", "-c", quiet_config], input="Ref 999999990018")
        assert result.exit_code == 0
        assert logging.getLogger("indic_id").level == logging.ERROR

    def test_verbose_overrides_config_level(
        self, runner: CliRunner, quiet_config: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG):
            result = runner.invoke(cli, ["-v", "scrub", "-c", quiet_config], input="Ref 999999990018")
        assert result.exit_code == 0
        assert logging.getLogger("indic_id").level == logging.DEBUG
        assert "Rejected aadhaar candidate" in caplog.text

    def test_config_without_level_leaves_logger_alone(
        self, runner: CliRunner, lenient_config: str
    ) -> None:
        logger = logging.getLogger("indic_id")
        logger.setLevel(logging.INFO)
        result = runner.invoke(cli, ["validate", "pan", "ABCPE1234F", "-c", lenient_config])
        assert result.exit_code == 0
        assert logger.level == logging.INFO
