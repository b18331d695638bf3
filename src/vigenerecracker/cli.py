from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

import typer

from vigenerecracker.classical.vigenere import VigenereCracker, vigenere_decrypt, vigenere_encrypt
from vigenerecracker.core.config import CrackConfig
from vigenerecracker.core.errors import CrackError

app = typer.Typer(help="Vigenère cracker: Kasiski examination + frequency analysis.")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline details to stderr."),
):
    if verbose:
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger("vigenerecracker").setLevel(logging.DEBUG)


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        try:
            raw = file.read_text(encoding="utf-8")
        except OSError as e:
            raise typer.BadParameter(f"Cannot read {file}: {e}")
        # Line breaks would shift the column split against the letter-only key cursor
        return " ".join(raw.splitlines())
    if text is None:
        raise typer.BadParameter("Provide ciphertext as an argument or with --file.")
    return text


@app.command()
def crack(
    text: Optional[str] = typer.Argument(None, help="Ciphertext to crack."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read ciphertext from a UTF-8 file."),
    show_key: bool = typer.Option(False, "--show-key", help="Print the recovered key first."),
    timing: bool = typer.Option(False, "--time", help="Append elapsed time in microseconds."),
    workers: int = typer.Option(1, "--workers", "-w", min=1, help="Threads for the column search."),
    min_occurrences: int = typer.Option(
        3, "--min-occurrences", min=2, help="Occurrences before a sequence counts as repeated."
    ),
):
    """Recover plaintext without the key."""
    ciphertext = _read_input(text, file)
    cracker = VigenereCracker(CrackConfig(workers=workers, min_occurrences=min_occurrences))

    start = time.perf_counter()
    try:
        result = cracker.crack(ciphertext)
    except CrackError as e:
        raise typer.BadParameter(str(e))
    elapsed_us = int((time.perf_counter() - start) * 1_000_000)

    if show_key:
        typer.echo(f"key={result.key}  key_length={result.key_length}")
    if timing:
        typer.echo(f"{result.plaintext} ({elapsed_us}us)")
    else:
        typer.echo(result.plaintext)


@app.command()
def kasiski(
    text: Optional[str] = typer.Argument(None, help="Ciphertext to examine."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read ciphertext from a UTF-8 file."),
    min_occurrences: int = typer.Option(
        3, "--min-occurrences", min=2, help="Occurrences before a sequence counts as repeated."
    ),
):
    """Show repeated sequences, their gaps and the inferred key length."""
    ciphertext = _read_input(text, file)
    try:
        report = VigenereCracker(CrackConfig(min_occurrences=min_occurrences)).examine(ciphertext)
    except CrackError as e:
        raise typer.BadParameter(str(e))

    for seq in sorted(report.sequences, key=lambda s: (len(s), s)):
        typer.echo(f"  {seq:<6}  at={report.sequences[seq]}  gaps={report.gaps[seq]}")
    typer.echo(f"key_length: {report.key_length}")


@app.command()
def decrypt(
    key: str = typer.Option(..., "--key", "-k", help="Vigenère key."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
):
    """Decrypt when you already have the key."""
    try:
        pt = vigenere_decrypt(text, key)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    typer.echo(pt)


@app.command()
def encrypt(
    key: str = typer.Option(..., "--key", "-k", help="Vigenère key."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
):
    """Encrypt with a repeating key (letters come out lowercase)."""
    try:
        ct = vigenere_encrypt(text, key)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    typer.echo(ct)


def main():
    app()


if __name__ == "__main__":
    main()
