from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from periodcrack.classical.common import parse_key_alphabets
from periodcrack.classical.polyalphabetic.hillclimb import crack as crack_periodic
from periodcrack.classical.polyalphabetic.keys import decrypt as decrypt_periodic
from periodcrack.classical.polyalphabetic.keys import encrypt as encrypt_periodic
from periodcrack.classical.polyalphabetic.period import ioc_scan
from periodcrack.core.config import DEFAULT_CONFIG
from periodcrack.core.errors import CrackError
from periodcrack.core.ngrams import TetragramTable
from periodcrack.core.results import CrackResult
from periodcrack.core.utils import normalize_az

app = typer.Typer(help="periodcrack: ciphertext-only attack on periodic substitution ciphers.")


def _prepare(text: str, strip: bool) -> str:
    return normalize_az(text) if strip else text


def _report(result: CrackResult) -> None:
    typer.echo(result.plaintext)
    typer.echo("key alphabets:")
    for column in result.key:
        typer.echo(f"    [{column}]")
    typer.echo(f"fitness: {result.fitness:8.4f}")


@app.command()
def crack(
    text: str = typer.Argument(..., help="Ciphertext (A-Z)."),
    period: Optional[int] = typer.Option(None, "--period", "-p", help="Skip detection and use this period."),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for a repeatable search."),
    tetragrams: Optional[Path] = typer.Option(
        None, "--tetragrams", help="Tetragram file ('GRAM value' lines). Default: bundled English table."
    ),
    max_seconds: Optional[float] = typer.Option(None, "--max-seconds", help="Wall-clock limit for the search."),
    budget: Optional[int] = typer.Option(
        None, "--budget", help=f"Search budget coefficient (default {DEFAULT_CONFIG.budget_coefficient})."
    ),
    stagnation: Optional[int] = typer.Option(
        None, "--stagnation", help=f"Misses before a column restarts (default {DEFAULT_CONFIG.stagnation_limit})."
    ),
    ioc_threshold: Optional[float] = typer.Option(None, "--ioc-threshold", help="Minimum average IoC for a period."),
    ioc_jump: Optional[float] = typer.Option(None, "--ioc-jump", help="Required IoC rise over the previous period."),
    strip: bool = typer.Option(True, "--strip/--no-strip", help="Uppercase and drop non-letters first."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Progress on stderr (-v, -vv)."),
):
    """Recover the period and key alphabets from ciphertext alone."""
    try:
        config = DEFAULT_CONFIG.with_overrides(
            seed=seed,
            max_seconds=max_seconds,
            budget_coefficient=budget,
            stagnation_limit=stagnation,
            ioc_threshold=ioc_threshold,
            ioc_jump=ioc_jump,
        )
        table = TetragramTable.from_file(tetragrams) if tetragrams is not None else None
        result = crack_periodic(
            _prepare(text, strip),
            config=config,
            period=period,
            table=table,
            log_level=verbose,
        )
    except (ValueError, OSError) as e:
        raise typer.BadParameter(str(e))

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _report(result)


@app.command()
def analyze(
    text: str,
    max_period: int = typer.Option(20, "--max-period", help="Largest period to scan."),
    strip: bool = typer.Option(True, "--strip/--no-strip"),
):
    """Average index of coincidence for each candidate period."""
    az = _prepare(text, strip)
    typer.echo(f"length: {len(az)}")
    for k, val in ioc_scan(az, max_period=max_period):
        typer.echo(f"  k={k:2d}  avg_ioc={val:.4f}")


@app.command()
def decrypt(
    key: str = typer.Option(..., "--key", "-k", help="Key alphabets, e.g. 'PGFY...XZ | ESFM...LV'."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
    strip: bool = typer.Option(True, "--strip/--no-strip"),
):
    """Decrypt with known key alphabets."""
    try:
        typer.echo(decrypt_periodic(_prepare(text, strip), parse_key_alphabets(key)))
    except CrackError as e:
        raise typer.BadParameter(str(e))


@app.command()
def encrypt(
    key: str = typer.Option(..., "--key", "-k", help="Key alphabets, e.g. 'PGFY...XZ | ESFM...LV'."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
    strip: bool = typer.Option(True, "--strip/--no-strip"),
):
    """Encrypt with known key alphabets."""
    try:
        typer.echo(encrypt_periodic(_prepare(text, strip), parse_key_alphabets(key)))
    except CrackError as e:
        raise typer.BadParameter(str(e))


def main():
    app()


if __name__ == "__main__":
    main()
