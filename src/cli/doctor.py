"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.directus import DirectusClient, SITE_SETTINGS_COLLECTION
from core.config import AppSettings, write_user_env_vars
from core.domain.locale import SUPPORTED_LOCALES

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_cms(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with DirectusClient(settings) as client:
            data = await client.get_site_settings()
        return True, f"{SITE_SETTINGS_COLLECTION}: {len(data)} fields"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the active configuration and check the CMS is reachable."""

    settings = AppSettings()

    table = Table(title="Lares Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Directus URL", "OK", settings.base_url)
    table.add_row("Contact endpoint", "OK", settings.contact_url)
    table.add_row("Default locale", "OK", f"{settings.default_locale.label()} ({settings.default_locale.value})")
    if settings.http_timeout_seconds is None:
        table.add_row("HTTP timeout", "WARN", "No timeout: a hanging CMS blocks the call")
    else:
        table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_cms, detail_cms = asyncio.run(_check_cms(settings))
    table.add_row("CMS connectivity", "OK" if ok_cms else "FAIL", detail_cms)

    _console.print(table)

    if not ok_cms:
        raise typer.Exit(code=1)


@app.command(name="setup-cms")
def setup_cms() -> None:
    """Interactive CMS setup (stores config in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("Directus URL", default=settings.base_url, show_default=True).strip()
    locale = typer.prompt(
        "Default locale",
        default=settings.default_locale.value,
        show_default=True,
    ).strip()

    if not base_url:
        raise typer.BadParameter("Directus URL is required")
    if locale not in SUPPORTED_LOCALES:
        raise typer.BadParameter("locale must be one of: " + ", ".join(SUPPORTED_LOCALES))

    env_path = write_user_env_vars(
        {
            "LARES_DIRECTUS_URL": base_url,
            "LARES_DEFAULT_LOCALE": locale,
        }
    )

    _console.print(f"[green]Saved CMS config to:[/green] {env_path}")
