"""presigner CLI - Generate presigned request signatures."""

import json
import sys
from typing import NoReturn

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from presigner.common.errors import PresignerError
from presigner.common.logging import setup_logging
from presigner.common.settings import Settings, get_settings
from presigner.signer import canonical_string, presign

console = Console()


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {message}[/red]")
    sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (default: PRESIGNER_LOG_LEVEL or INFO)",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, json_logs: bool) -> None:
    """presigner CLI - Sign requests for presigned, expiring access."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
        _fail(f"Invalid configuration: {fields}")

    setup_logging(
        level=log_level or settings.log_level,
        json_output=json_logs or settings.log_json,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command("sign")
@click.option("--method", "-m", required=True, help="HTTP method, e.g. POST")
@click.option("--path", "-p", required=True, help="Request path including query string")
@click.option("--expires", "-e", type=int, help="Absolute expiry (unix seconds)")
@click.option("--ttl", type=int, help="Seconds from now until expiry")
@click.option("--secret", "-s", help="Shared secret (default: PRESIGNER_SECRET_KEY)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "headers", "url"]),
    default="text",
    show_default=True,
    help="Output format",
)
@click.pass_context
def sign_cmd(
    ctx: click.Context,
    method: str,
    path: str,
    expires: int | None,
    ttl: int | None,
    secret: str | None,
    output_format: str,
) -> None:
    """Sign METHOD, PATH and expiry with the shared secret."""
    settings: Settings = ctx.obj["settings"]

    if expires is not None and ttl is not None:
        _fail("--expires and --ttl are mutually exclusive")

    key = secret.encode("utf-8") if secret is not None else settings.secret_key_bytes
    if key is None:
        _fail("No secret given (use --secret or set PRESIGNER_SECRET_KEY)")

    try:
        signed = presign(
            key,
            method,
            path,
            expires_at=expires,
            ttl_seconds=ttl if ttl is not None else settings.default_ttl_seconds,
        )
    except PresignerError as exc:
        _fail(exc.message)

    if output_format == "json":
        result = {
            "method": signed.method,
            "path": signed.path,
            "expires": signed.expires_at,
            "signature": signed.signature,
        }
        console.print(
            json.dumps(result, indent=2), markup=False, highlight=False, soft_wrap=True
        )
    elif output_format == "headers":
        headers = signed.as_headers(settings.signature_header, settings.expires_header)
        for name, value in headers.items():
            console.print(f"{name}: {value}", markup=False, highlight=False, soft_wrap=True)
    elif output_format == "url":
        console.print(
            signed.as_query(settings.signature_param, settings.expires_param),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        console.print(
            f"{signed.signature} {signed.expires_at}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


@cli.command("canonical")
@click.option("--method", "-m", required=True, help="HTTP method, e.g. POST")
@click.option("--path", "-p", required=True, help="Request path including query string")
@click.option("--expires", "-e", type=int, required=True, help="Absolute expiry (unix seconds)")
def canonical_cmd(method: str, path: str, expires: int) -> None:
    """Show the canonical string a verifier must reproduce."""
    table = Table(title="Canonical Request")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("method", Text(method))
    table.add_row("path", Text(path))
    table.add_row("expires", str(expires))
    table.add_row("canonical", Text(repr(canonical_string(method, path, expires))))

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
