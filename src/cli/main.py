"""CLI de desarrollo (Typer).

Por qué una CLI si el sitio es estático:
- Revisar payloads del formulario, probar el sanitizador y volcar contenido
  del CMS sin levantar el build completo.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.directus import ContentClientError, DirectusClient
from adapters.json_exporter import dump_json, export_content_json
from cli import doctor
from cli.ui_components import build_routes_table, build_validation_table, print_banner
from core.config import AppSettings
from core.domain.locale import SUPPORTED_LOCALES, Locale
from core.sanitize import sanitize_input, sanitize_url
from core.validation import validate_contact_form

app = typer.Typer(no_args_is_help=True, help="Lares Cohousing site tooling.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    banner: bool = typer.Option(False, "--banner", help="Print the welcome banner."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    if banner:
        print_banner(_console)


@app.command(name="check-form")
def check_form(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with the form fields."),
) -> None:
    """Validate a contact-form payload against the whitelist rules."""

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise typer.BadParameter(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter("the JSON document must be an object")

    result = validate_contact_form(data)
    if result.valid:
        _console.print("[green]Valid submission[/green]")
        return

    _console.print(build_validation_table(result))
    raise typer.Exit(code=1)


@app.command()
def sanitize(
    text: str = typer.Argument(..., help="Untrusted text."),
    url: bool = typer.Option(False, "--url", help="Treat TEXT as an href/src value."),
) -> None:
    """Print the sanitized form of TEXT."""

    typer.echo(sanitize_url(text) if url else sanitize_input(text))


@app.command()
def routes(
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Only this locale."),
) -> None:
    """Show the localized path of every route."""

    locales = [Locale.normalize(locale)] if locale else None
    _console.print(build_routes_table(locales))


async def _fetch(collection: str, locale: str | None, slug: str | None, settings: AppSettings) -> Any:
    async with DirectusClient(settings) as client:
        if slug:
            return await client.get_item_by_slug(collection, slug, locale)
        return await client.get_collection(collection, locale)


@app.command()
def fetch(
    collection: str = typer.Argument(..., help="Directus collection, e.g. `pages`."),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help=f"One of {', '.join(SUPPORTED_LOCALES)}."),
    slug: Optional[str] = typer.Option(None, "--slug", help="Fetch a single item by slug."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """Fetch translated content from the CMS."""

    settings = AppSettings()
    try:
        payload = asyncio.run(_fetch(collection, locale, slug, settings))
    except ContentClientError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _console.print(f"[red]CMS unreachable at {settings.base_url}: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    if output is not None:
        export_content_json(payload=payload, output_path=output)
        _console.print(f"[green]Saved:[/green] {output}")
        return
    _console.print_json(dump_json(payload))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
