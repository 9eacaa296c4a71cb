from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, TypeVar

import typer

from classicalcrypto.classical import register_all
from classicalcrypto.config import Settings, configure_logging
from classicalcrypto.core.cipher import SymbolPermutationCipher
from classicalcrypto.core.errors import ClassicalCryptoError
from classicalcrypto.core.registry import brute_force, get_cipher, list_ciphers
from classicalcrypto.core.scoring import chi_squared_english, letter_frequencies
from classicalcrypto.core.texts import Ciphertext, Plaintext

T = TypeVar("T")

logger = logging.getLogger(__name__)

app = typer.Typer(help="Classical cryptosystems demo: shift, affine and substitution ciphers. Not for real secrets.")


@app.callback()
def _init(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL."),
):
    try:
        settings = Settings.from_env()
        configure_logging(log_level or settings.log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    # Register ciphers exactly once per CLI run
    register_all()
    ctx.obj = settings


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


def _resolve_cipher(ctx: typer.Context, name: Optional[str]) -> SymbolPermutationCipher:
    try:
        return get_cipher(name or _settings(ctx).default_cipher)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command()
def ciphers():
    """List all registered ciphers."""
    for name in list_ciphers():
        typer.echo(name)


@app.command()
def keygen(
    ctx: typer.Context,
    cipher: Optional[str] = typer.Option(None, "--cipher", "-c", help="Cipher name (e.g., shift, affine)."),
):
    """Generate a random key and print it (insecurely)."""
    c = _resolve_cipher(ctx, cipher)
    key = c.random_key(_settings(ctx).make_rng())
    typer.echo(key.export())


@app.command()
def encrypt(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Message to encrypt: letters only, any case."),
    key: str = typer.Option(..., "--key", "-k", help="Key material for the cipher."),
    cipher: Optional[str] = typer.Option(None, "--cipher", "-c", help="Cipher name (e.g., shift, affine)."),
):
    """Encrypt a message with a known key."""
    c = _resolve_cipher(ctx, cipher)
    try:
        msg = Plaintext.from_str(text)
        k = c.parse_key(key)
    except ClassicalCryptoError as e:
        raise typer.BadParameter(str(e))
    typer.echo(str(c.encrypt(k, msg)))


@app.command()
def decrypt(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
    key: str = typer.Option(..., "--key", "-k", help="Key material for the cipher."),
    cipher: Optional[str] = typer.Option(None, "--cipher", "-c", help="Cipher name (e.g., shift, affine)."),
):
    """Decrypt when you already know the cipher type and have the key."""
    c = _resolve_cipher(ctx, cipher)
    try:
        ct = Ciphertext.from_str(text)
        k = c.parse_key(key)
    except ClassicalCryptoError as e:
        raise typer.BadParameter(str(e))
    typer.echo(str(c.decrypt(k, ct)))


@app.command()
def crack(
    text: str = typer.Argument(...),
    top: int = typer.Option(5, "--top", "-t"),
    cipher: Optional[List[str]] = typer.Option(
        None,
        "--cipher",
        "-c",
        help="Limit to specific cipher(s). Can repeat: -c shift -c affine",
    ),
):
    """Try every key and rank the results by English letter frequencies."""
    include = {c.lower().strip() for c in cipher} if cipher else None
    try:
        ct = Ciphertext.from_str(text)
        results = brute_force(ct, include=include, top_n=top)
    except (ClassicalCryptoError, ValueError) as e:
        raise typer.BadParameter(str(e))

    if not results:
        typer.echo("No candidates produced.")
        raise typer.Exit(code=0)

    for i, r in enumerate(results, start=1):
        typer.echo(f"#{i}  cipher={r.cipher_name}  key={r.key}  chi2={r.score:.2f}")
        typer.echo(r.plaintext)
        typer.echo("-" * 60)


@app.command()
def analyze(text: str):
    """Show letter frequencies; shift and affine ciphers only move them around."""
    try:
        symbols = Ciphertext.from_str(text)
    except ClassicalCryptoError as e:
        raise typer.BadParameter(str(e))
    freqs = letter_frequencies(symbols)
    typer.echo(f"length: {len(symbols)}")
    typer.echo(f"chi2_english: {chi_squared_english(symbols):.2f}")
    for ch, f in sorted(freqs.items(), key=lambda kv: (-kv[1], kv[0])):
        if f > 0:
            typer.echo(f"  {ch.upper()}  {f:.3f}")


# ----------------------------
# Interactive menu
# ----------------------------

_MAIN_MENU = (("1", "Generate a key."), ("2", "Encrypt a message."), ("3", "Decrypt a ciphertext."), ("4", "Quit"))
_DECRYPT_MENU = (("1", "Decrypt using a known key."), ("2", "Guess random keys (brute force)."), ("3", "Back"))


def _print_menu(items) -> None:
    typer.echo("\nPlease enter one of the following options:")
    for k, msg in items:
        typer.echo(f"{k}: {msg}")


def _prompt_parsed(prompt: str, parse: Callable[[str], T]) -> T:
    """Prompt until the answer parses, explaining what was wrong each time."""
    while True:
        raw = typer.prompt(prompt)
        try:
            return parse(raw.strip())
        except ClassicalCryptoError as e:
            typer.echo(f"{e}. Please try again.")


def _menu_keygen(c: SymbolPermutationCipher, rng: random.Random) -> None:
    while True:
        key = c.random_key(rng)
        typer.echo("\nWe generated your key successfully!")
        typer.echo("We shouldn't export your key (or, say, save it in logs), but we can!")
        typer.echo(f"Here it is: {key.export()}")
        if typer.confirm("Are you happy with your key?"):
            typer.echo("Great! There is no key storage here, so please remember your key.")
            return


def _menu_encrypt(c: SymbolPermutationCipher) -> None:
    msg = _prompt_parsed("Message to encrypt (letters only)", Plaintext.from_str)
    key = _prompt_parsed("Key", c.parse_key)
    typer.echo(f"\nYour ciphertext is {c.encrypt(key, msg)}")
    typer.echo("Look for patterns in your ciphertext. Could you recover the message without the key?")


def _menu_decrypt(c: SymbolPermutationCipher, rng: random.Random) -> None:
    ct = _prompt_parsed("Ciphertext (letters only)", Ciphertext.from_str)
    while True:
        _print_menu(_DECRYPT_MENU)
        choice = typer.prompt("Choice").strip()
        if choice == "3":
            return
        if choice not in ("1", "2"):
            continue

        tries = 0
        while True:
            key = _prompt_parsed("Key", c.parse_key) if choice == "1" else c.random_key(rng)
            tries += 1
            typer.echo(f"\nYour computed plaintext is {c.decrypt(key, ct)}")
            if typer.confirm("Are you happy with this decryption?"):
                logger.info("%s: decryption accepted after %d tries", c.name, tries)
                return


@app.command()
def menu(
    ctx: typer.Context,
    cipher: Optional[str] = typer.Option(None, "--cipher", "-c", help="Cipher name (e.g., shift, affine)."),
):
    """Interactive key generation, encryption and decryption."""
    c = _resolve_cipher(ctx, cipher)
    rng = _settings(ctx).make_rng()
    typer.echo(f"\nWelcome to the {c.name} cipher demo!")
    while True:
        _print_menu(_MAIN_MENU)
        choice = typer.prompt("Choice").strip()
        if choice == "1":
            _menu_keygen(c, rng)
        elif choice == "2":
            _menu_encrypt(c)
        elif choice == "3":
            _menu_decrypt(c, rng)
        elif choice == "4":
            break
    typer.echo("Goodbye!")


def main():
    app()


if __name__ == "__main__":
    main()
