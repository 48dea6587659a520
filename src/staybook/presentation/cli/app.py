"""Staybook CLI application using Typer.

This module provides command-line utilities for the Staybook backend:
signing key generation for deployment configuration and token issuing
for operators (for example admin tokens).
"""

import json
import os
from datetime import timedelta
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from staybook_auth import ADMIN_SCOPE, JWTService, RSAKeyPair, SigningKeyError
from staybook_auth.keys import DEFAULT_KEY_SIZE

app = typer.Typer(
    name="staybook",
    help="Staybook - lodging reservations backend CLI",
    no_args_is_help=True,
)
console = Console()

keys_app = typer.Typer(
    name="keys",
    help="RSA signing key utilities",
    no_args_is_help=True,
)
app.add_typer(keys_app)

tokens_app = typer.Typer(
    name="tokens",
    help="Bearer token utilities",
    no_args_is_help=True,
)
app.add_typer(tokens_app)


@keys_app.command("generate")
def generate_key(
    out: Path = typer.Option(
        Path("config/jwt_private_key.pem"),
        "--out",
        "-o",
        help="Where to write the PEM encoded private key",
    ),
    key_size: int = typer.Option(DEFAULT_KEY_SIZE, "--key-size", min=2048),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Generate an RSA private key for signing tokens.

    Point JWT_PRIVATE_KEY_PATH at the written file.
    """
    if out.exists() and not force:
        console.print(f"[red]{out} already exists (use --force to overwrite)[/red]")
        raise typer.Exit(code=1)

    key_pair = RSAKeyPair.generate(key_size=key_size)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(key_pair.private_pem())
    os.chmod(out, 0o600)

    console.print("\n[bold green]Staybook Signing Key[/bold green]")
    console.print("=" * 60)
    console.print(f"[cyan]JWT_PRIVATE_KEY_PATH[/cyan]={out}")
    console.print(f"[cyan]Key ID (kid)[/cyan]: {key_pair.key_id}")
    console.print("=" * 60)
    console.print(
        "[yellow]⚠  Keep the private key secure and never commit it "
        "to version control![/yellow]\n"
    )


@keys_app.command("public")
def show_public_key(
    path: Path = typer.Argument(..., help="PEM encoded private key"),
    jwk: bool = typer.Option(False, "--jwk", help="Print as a JSON Web Key"),
) -> None:
    """Print the public half of a signing key."""
    key_pair = _load_key(path)
    if jwk:
        typer.echo(json.dumps(key_pair.public_jwk(), indent=2))
    else:
        typer.echo(key_pair.public_pem().decode(), nl=False)


@tokens_app.command("issue")
def issue_token(
    subject: str = typer.Argument(..., help="Token subject (username)"),
    key: Path = typer.Option(
        ...,
        "--key",
        "-k",
        envvar="JWT_PRIVATE_KEY_PATH",
        help="PEM encoded private key",
    ),
    scope: Optional[list[str]] = typer.Option(
        None, "--scope", "-s", help=f"Repeatable, e.g. --scope {ADMIN_SCOPE}"
    ),
    customer_id: Optional[str] = typer.Option(None, "--customer-id"),
    expires_seconds: int = typer.Option(3600, "--expires-seconds", min=1),
    issuer: str = typer.Option(
        JWTService.DEFAULT_ISSUER, "--issuer", envvar="JWT_ISSUER"
    ),
) -> None:
    """Issue a signed bearer token, e.g. an admin token for operators."""
    service = JWTService(
        key_pair=_load_key(key),
        expire_seconds=expires_seconds,
        issuer=issuer,
    )
    claims = {"customer_id": customer_id}
    if scope:
        claims["scope"] = " ".join(scope)

    token = service.issue(
        subject, claims, expires_delta=timedelta(seconds=expires_seconds)
    )
    typer.echo(token)


def _load_key(path: Path) -> RSAKeyPair:
    try:
        return RSAKeyPair.from_file(path)
    except SigningKeyError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
