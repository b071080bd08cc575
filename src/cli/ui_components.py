"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.locale import Locale
from core.domain.models import FormValidationResult
from core.i18n import ROUTE_SLUGS, localized_path


def print_banner(console: Console) -> None:
    title = Text("Lares Cohousing", style="bold cyan")
    subtitle = Text("Contenuti • Traduzioni • Modulo di contatto", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_validation_table(result: FormValidationResult) -> Table:
    """Tabla de errores por campo (vacía si el formulario es válido)."""

    table = Table(title="Contact form validation")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Error", style="red")
    for field, reason in sorted(result.errors.items()):
        table.add_row(field, reason)
    return table


def build_routes_table(locales: list[Locale] | None = None) -> Table:
    """Rutas lógicas -> path localizado, una columna por idioma."""

    locales = locales or list(Locale)
    table = Table(title="Localized routes")
    table.add_column("Route", style="cyan", no_wrap=True)
    for lang in locales:
        table.add_column(f"{lang.label()} ({lang.value})", style="magenta")
    for route in ROUTE_SLUGS[Locale.default()]:
        table.add_row(route, *(localized_path(lang, route) for lang in locales))
    return table
