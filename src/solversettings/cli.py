"""Solver block settings CLI.

This module provides a command-line front end for checking a Solver block:
the label/value pairs are given on the command line, resolved against a fresh
settings record and printed as YAML.
"""

from __future__ import annotations

import logging
import sys
from typing import Final

import typer
import yaml

from solversettings.defaults import DEFAULTS
from solversettings.errors import FatalError
from solversettings.limiters import Limiter
from solversettings.resolver import LabelValuePair, SettingsResolver
from solversettings.settings import SolverSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Solver block settings CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "solversettings.cli"

INPUT_FILE_OPTION = typer.Option(
    "<command line>", "--input-file", "-f", help="Input file name used in diagnostics"
)
SET_OPTION = typer.Option(
    None, "--set", "-s", help="Solver block entry as 'label=value' (repeatable)"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def parse_pairs(entries: list[str]) -> list[LabelValuePair]:
    """Split ``label=value`` entries on the first ``=``.

    Args:
        entries: Raw ``--set`` option values

    Returns:
        (label, value) pairs in the order given

    Raises:
        typer.BadParameter: If an entry has no ``=``
    """
    pairs: list[LabelValuePair] = []
    for entry in entries:
        label, sep, value = entry.partition("=")
        if not sep:
            raise typer.BadParameter(f"expected 'label=value', got '{entry}'")
        pairs.append((label.strip(), value.strip()))
    return pairs


@app.command()
def resolve(
    input_file: str = INPUT_FILE_OPTION,
    entries: list[str] | None = SET_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Resolve Solver block entries and print the resulting settings."""
    _configure_logging(debug)
    pairs = parse_pairs(entries or [])

    logger.debug("Resolving %d Solver block entries for %s", len(pairs), input_file)

    settings = SolverSettings(input_file=input_file)
    try:
        SettingsResolver().resolve(pairs, settings)
    except FatalError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(yaml.safe_dump(settings.summary(), sort_keys=False), nl=False)


@app.command()
def defaults() -> None:
    """Print the values used for Solver block entries that are not given."""
    typer.echo(yaml.safe_dump(DEFAULTS.as_dict(), sort_keys=False), nl=False)


@app.command()
def limiters() -> None:
    """List the accepted limiter names."""
    for token in Limiter.tokens():
        limiter = Limiter.from_token(token)
        marker = " (default)" if limiter is DEFAULTS.limiter else ""
        typer.echo(f"{token:<12} → {limiter}{marker}")


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
