"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from quran_content.adapters.dispatcher import RequestDispatcher
from quran_content.cli.ui_components import print_banner
from quran_content.core.config import ClientSettings, write_user_env_vars
from quran_content.core.endpoints import LIST_CHAPTERS
from quran_content.core.domain.queries import LanguageQuery
from quran_content.core.errors import PayloadError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: ClientSettings) -> tuple[bool, str]:
    """GET /chapters?language=en through the regular dispatcher."""

    path = LIST_CHAPTERS.build_path(LanguageQuery(language="en"))
    try:
        async with RequestDispatcher(settings) as dispatcher:
            payload = await dispatcher.get(path)
    except (httpx.HTTPError, PayloadError) as exc:
        return False, str(exc) or type(exc).__name__

    if isinstance(payload, dict) and isinstance(payload.get("chapters"), list):
        return True, f"{len(payload['chapters'])} chapters"
    if isinstance(payload, dict) and payload.get("error"):
        return False, f"Upstream error: {payload.get('error')}"
    return False, "Unexpected response shape"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ClientSettings()
    print_banner(_console)

    table = Table(title="quran-content Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base URL", "OK", settings.api_base_url)
    if settings.api_token:
        table.add_row("API token", "OK", "Bearer token attached to every request")
    else:
        table.add_row("API token", "OPTIONAL", "No token set -> anonymous requests")
    table.add_row("Client ID", "OK" if settings.client_id else "OPTIONAL", settings.client_id or "-")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:.0f}s")
    table.add_row(
        "Connection pool",
        "OK",
        f"{settings.max_connections} max / {settings.max_keepalive_connections} keep-alive",
    )
    if not settings.verify_tls:
        table.add_row("TLS verification", "WARN", "Certificate verification disabled")

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] Check QURAN_CONTENT_API_BASE_URL or run `quran-content doctor setup`."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = ClientSettings()

    base_url = typer.prompt("API base URL", default=current.api_base_url, show_default=True).strip()
    token = typer.prompt(
        "API token (leave empty for none)",
        default="",
        show_default=False,
        hide_input=True,
    ).strip()
    client_id = typer.prompt(
        "Client ID (leave empty for none)",
        default=current.client_id or "",
        show_default=bool(current.client_id),
    ).strip()

    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars(
        {
            "QURAN_CONTENT_API_BASE_URL": base_url,
            # Vacío = borrar el valor guardado.
            "QURAN_CONTENT_API_TOKEN": token,
            "QURAN_CONTENT_CLIENT_ID": client_id,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
