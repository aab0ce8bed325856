"""CLI entry point for indic-id.

Invoked as::

    indic-id [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m indic_id.cli.main

Commands
--------
- validate   Check an identifier's structure and checksum
- info       Show metadata decoded from an identifier
- scrub      Redact Aadhaar, PAN and GSTIN numbers from text
- checksum   Generate a Verhoeff or Mod-36 check digit
- verify     Structurally verify a Voter ID, RC or UDID number
- match      Phonetic similarity of two names
- address    Parse an Indian postal address
- version    Show version information
"""
from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Callable, TextIO

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from indic_id.checksums.alphabet import InvalidInputError
from indic_id.checksums.mod36 import mod36_check_char
from indic_id.checksums.verhoeff import generate_verhoeff
from indic_id.config import ConfigError, ConfigLoader, IndicIdConfig
from indic_id.detection.redactor import PiiRedactor
from indic_id.research.address import parse_address
from indic_id.research.deep_verify import VerificationType, deep_verify
from indic_id.research.phonetic import phonetic_code, phonetic_match
from indic_id.validators import INFO_EXTRACTORS, VALIDATORS
from indic_id.validators.ifsc import get_ifsc_info, is_valid_ifsc

console = Console()
err_console = Console(stderr=True)

_ID_TYPES = click.Choice(sorted(VALIDATORS), case_sensitive=False)

_CONFIG_OPTION = click.option(
    "--config",
    "-c",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to an indic-id YAML config file.",
)


def _load_config(config_path: str | None) -> IndicIdConfig:
    loader = ConfigLoader()
    if config_path is None:
        return loader.defaults()
    try:
        config = loader.load(Path(config_path))
    except ConfigError as exc:
        err_console.print(f"[red]Invalid config:[/red] {exc}")
        sys.exit(1)
    # --verbose wins over the file; an unset log_level leaves levels alone.
    verbose = click.get_current_context().find_root().params.get("verbose", False)
    if "log_level" in config.model_fields_set and not verbose:
        logging.getLogger("indic_id").setLevel(config.log_level)
    return config


def _validator(id_type: str, config: IndicIdConfig) -> Callable[[object], bool]:
    if id_type == "ifsc":
        strict = config.validation.strict_bank_codes
        return lambda value: is_valid_ifsc(value, strict=strict)
    return VALIDATORS[id_type]


def _info_extractor(id_type: str, config: IndicIdConfig) -> Callable[[object], object]:
    if id_type == "ifsc":
        strict = config.validation.strict_bank_codes
        return lambda value: get_ifsc_info(value, strict=strict)
    return INFO_EXTRACTORS[id_type]


def _status(ok: bool) -> str:
    return "[green]VALID[/green]" if ok else "[red]INVALID[/red]"


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="indic-id")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging to stderr.")
def cli(verbose: bool) -> None:
    """indic-id: validate and inspect Indian identity and financial identifiers."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        logging.getLogger("indic_id").setLevel(logging.DEBUG)


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from indic_id import __version__

    console.print(
        Panel(
            f"[bold]indic-id[/bold]  v[cyan]{__version__}[/cyan]\n"
            "Checksum validation for Aadhaar, PAN, GSTIN, IFSC and pincodes.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# validate / info
# ---------------------------------------------------------------------------


@cli.command(name="validate")
@click.argument("id_type", type=_ID_TYPES)
@click.argument("value")
@_CONFIG_OPTION
def validate_command(id_type: str, value: str, config_path: str | None) -> None:
    """Validate VALUE as an identifier of ID_TYPE.  Exits 1 when invalid."""
    config = _load_config(config_path)
    ok = _validator(id_type.lower(), config)(value)
    console.print(f"{id_type.upper()} {escape(value)}: {_status(ok)}")
    sys.exit(0 if ok else 1)


@cli.command(name="info")
@click.argument("id_type", type=_ID_TYPES)
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Print metadata as JSON.")
@_CONFIG_OPTION
def info_command(id_type: str, value: str, as_json: bool, config_path: str | None) -> None:
    """Show metadata decoded from VALUE.  Exits 1 when invalid."""
    config = _load_config(config_path)
    info = dataclasses.asdict(_info_extractor(id_type.lower(), config)(value))  # type: ignore[arg-type]

    if as_json:
        click.echo(json.dumps(info, indent=2))
    else:
        table = Table(title=f"{id_type.upper()} {escape(value)}", box=box.SIMPLE)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        for field_name, field_value in info.items():
            table.add_row(field_name, "" if field_value is None else str(field_value))
        console.print(table)

    sys.exit(0 if info["valid"] else 1)


# ---------------------------------------------------------------------------
# scrub
# ---------------------------------------------------------------------------


@cli.command(name="scrub")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--report", is_flag=True, help="List the redacted identifiers on stderr.")
@_CONFIG_OPTION
def scrub_command(source: TextIO, report: bool, config_path: str | None) -> None:
    """Redact verified Aadhaar, PAN and GSTIN numbers from SOURCE (default stdin)."""
    config = _load_config(config_path)
    redactor = PiiRedactor.from_options(config.scrub.to_options())

    redacted, applied = redactor.redact_with_report(source.read())
    click.echo(redacted, nl=False)

    if report:
        table = Table(title="Redacted identifiers", box=box.SIMPLE)
        table.add_column("Type", style="cyan")
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        for match in applied:
            table.add_row(match.label, str(match.start), str(match.end))
        err_console.print(table)


# ---------------------------------------------------------------------------
# checksum
# ---------------------------------------------------------------------------


@cli.command(name="checksum")
@click.argument("algorithm", type=click.Choice(["verhoeff", "mod36"], case_sensitive=False))
@click.argument("base")
def checksum_command(algorithm: str, base: str) -> None:
    """Print the check digit for BASE and the completed identifier."""
    if algorithm.lower() == "verhoeff":
        try:
            check = str(generate_verhoeff(base))
        except InvalidInputError as exc:
            err_console.print(f"[red]Cannot generate Verhoeff digit:[/red] {exc}")
            sys.exit(1)
    else:
        mod36_char = mod36_check_char(base)
        if mod36_char is None:
            err_console.print(
                "[red]Cannot generate Mod-36 character:[/red] "
                "base must be 14 characters from 0-9 and A-Z"
            )
            sys.exit(1)
        check = mod36_char
        base = base.upper()

    console.print(f"Check: [bold cyan]{check}[/bold cyan]")
    console.print(f"Full:  {base}{check}")


# ---------------------------------------------------------------------------
# verify
# ---------------------------------------------------------------------------


@cli.command(name="verify")
@click.argument(
    "id_type",
    type=click.Choice([t.value for t in VerificationType], case_sensitive=False),
)
@click.argument("value")
def verify_command(id_type: str, value: str) -> None:
    """Structurally verify a Voter ID, RC or UDID number.  Exits 1 when invalid."""
    ok = deep_verify(value, id_type)
    console.print(f"{id_type.upper()} {escape(value)}: {_status(ok)}")
    sys.exit(0 if ok else 1)


# ---------------------------------------------------------------------------
# match
# ---------------------------------------------------------------------------


@cli.command(name="match")
@click.argument("first")
@click.argument("second")
def match_command(first: str, second: str) -> None:
    """Show the phonetic similarity of two names (0.00 to 1.00)."""
    score = phonetic_match(first, second)
    table = Table(box=box.SIMPLE)
    table.add_column("Name", style="cyan")
    table.add_column("Code", style="magenta")
    table.add_row(first, phonetic_code(first))
    table.add_row(second, phonetic_code(second))
    console.print(table)
    console.print(f"Similarity: [bold]{score:.2f}[/bold]")


# ---------------------------------------------------------------------------
# address
# ---------------------------------------------------------------------------


@cli.command(name="address")
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed address as JSON.")
def address_command(text: str, as_json: bool) -> None:
    """Parse TEXT as an Indian postal address."""
    parsed = dataclasses.asdict(parse_address(text))
    if as_json:
        click.echo(json.dumps(parsed, indent=2))
        return

    table = Table(title="Parsed address", box=box.SIMPLE)
    table.add_column("Component", style="cyan")
    table.add_column("Value")
    table.add_row("pincode", parsed["pincode"] or "")
    table.add_row("city", parsed["city"] or "")
    table.add_row("state", parsed["state"] or "")
    table.add_row("landmarks", "; ".join(parsed["landmarks"]))
    console.print(table)


if __name__ == "__main__":
    cli()
