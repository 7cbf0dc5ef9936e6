"""pbecrypt — password-based AES-256-CBC encryption from the command line.

Commands
--------
  run       Encrypt and decrypt a string with freshly generated material
  encrypt   Encrypt a string with a given password, salt and IV
  decrypt   Decrypt a hex ciphertext with a given password, salt and IV
  info      Show the active cipher and scrypt settings
"""

from __future__ import annotations

import logging
from typing import Annotated, NoReturn

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from . import __version__
from .cipher import CipherEngine
from .config import CryptoConfig
from .errors import PbecryptError
from .kdf import KeyDerivationFunction, scrypt_memory
from .models import InitializationVector, Password, Salt
from .pipeline import Pipeline

# ---------------------------------------------------------------------------
# App & consoles
# ---------------------------------------------------------------------------

_THEME = Theme(
    {
        "success": "bold green",
        "danger": "bold red",
        "muted": "dim",
        "label": "cyan",
        "highlight": "bold white",
    }
)

console = Console(theme=_THEME)
err = Console(stderr=True, theme=_THEME)

app = typer.Typer(
    name="pbecrypt",
    help="[bold cyan]pbecrypt[/bold cyan] — scrypt + AES-256-CBC encryption demo.",
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

PasswordOpt = Annotated[str, typer.Option("--password", "-p", help="16-byte password (text).")]
SaltOpt = Annotated[str, typer.Option("--salt", "-s", help="Salt of at least 16 bytes (text).")]
IvOpt = Annotated[str, typer.Option("--iv", help="16-byte IV as 32 hex characters.")]


def _config() -> CryptoConfig:
    try:
        return CryptoConfig.from_env()
    except ValueError as exc:
        err.print(f"[danger]Invalid PBECRYPT_* setting:[/danger] {exc}")
        raise typer.Exit(1) from exc


def _parse_iv(value: str) -> InitializationVector:
    try:
        raw = bytes.fromhex(value)
    except ValueError as exc:
        err.print("[danger]--iv must be hexadecimal.[/danger]")
        raise typer.Exit(1) from exc
    return InitializationVector.of(raw)


def _fail(exc: PbecryptError) -> NoReturn:
    err.print(f"[danger]{type(exc).__name__}:[/danger] {exc}")
    raise typer.Exit(1) from exc


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Enable debug logging.")] = False,
) -> None:
    """Password-based symmetric encryption with scrypt and AES-256-CBC."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def run(
    text: Annotated[str, typer.Argument(help="Plaintext to encrypt.")],
) -> None:
    """Encrypt and decrypt TEXT with a random password, salt and IV."""
    try:
        ciphertext, recovered = Pipeline(_config()).run(text)
    except PbecryptError as exc:
        _fail(exc)

    body = Text()
    body.append(f"  {'Input':<12}", style="label")
    body.append(text + "\n", style="highlight")
    body.append(f"  {'Ciphertext':<12}", style="label")
    body.append(ciphertext + "\n", style="highlight")
    body.append(f"  {'Decrypted':<12}", style="label")
    body.append(recovered + "\n", style="highlight")
    console.print(Panel(body, title="[bold cyan]Round trip[/bold cyan]", expand=False, border_style="cyan"))

    if recovered != text:
        err.print("[danger]Decrypted text does not match the input.[/danger]")
        raise typer.Exit(1)
    console.print("[success]Round trip verified.[/success]")


@app.command()
def encrypt(
    text: Annotated[str, typer.Argument(help="Plaintext to encrypt.")],
    password: PasswordOpt,
    salt: SaltOpt,
    iv: IvOpt,
) -> None:
    """Encrypt TEXT and print the ciphertext as hex."""
    config = _config()
    try:
        key = KeyDerivationFunction(config).derive(Password.of(password), Salt.of(salt))
        ciphertext = CipherEngine(config).encrypt(key, _parse_iv(iv), text)
    except PbecryptError as exc:
        _fail(exc)
    console.print(ciphertext, highlight=False, soft_wrap=True)


@app.command()
def decrypt(
    ciphertext: Annotated[str, typer.Argument(help="Hex ciphertext.")],
    password: PasswordOpt,
    salt: SaltOpt,
    iv: IvOpt,
) -> None:
    """Decrypt a hex CIPHERTEXT and print the plaintext."""
    config = _config()
    try:
        key = KeyDerivationFunction(config).derive(Password.of(password), Salt.of(salt))
        plaintext = CipherEngine(config).decrypt(key, _parse_iv(iv), ciphertext)
    except PbecryptError as exc:
        _fail(exc)
    console.print(plaintext, highlight=False, markup=False, soft_wrap=True)


@app.command()
def info() -> None:
    """Show the active cipher and scrypt settings."""
    config = _config()

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Version", __version__)
    table.add_row("Cipher", config.algorithm)
    table.add_row("Key length", f"{config.key_length} bytes")
    table.add_row("Password/salt/IV", f"{config.material_size} bytes each")
    table.add_row("scrypt", f"n={config.scrypt_n} r={config.scrypt_r} p={config.scrypt_p}")
    memory = scrypt_memory(config.scrypt_n, config.scrypt_r, config.scrypt_p)
    table.add_row("scrypt memory", f"{memory / 1024 / 1024:.1f} MiB of {config.max_memory / 1024 / 1024:.1f} MiB")
    table.add_row("Encodings", f"{config.input_encoding} in, {config.output_encoding} out")

    console.print(Panel(table, title="[bold cyan]pbecrypt info[/bold cyan]", border_style="cyan", expand=False))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    app()


if __name__ == "__main__":
    main()
