"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import KanbanHttpRequester
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import KanbanConfigError, ProjectOperationError
from core.services.project_client import ProjectClient

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_projects_endpoint(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with KanbanHttpRequester(settings) as requester:
            collection = await ProjectClient(requester).list_projects(page=1, per_page=1)
        return True, f"{len(collection.items)} project(s) on first page"
    except (KanbanConfigError, ProjectOperationError) as exc:
        return False, escape(str(exc))


def _auth_mode(settings: AppSettings) -> tuple[str, str]:
    if settings.api_token:
        return "OK", "API token"
    if settings.has_credentials:
        return "OK", f"Login as {settings.email_or_username}"
    return "MISSING", "Set KANBAN_API_TOKEN or KANBAN_EMAIL_OR_USERNAME/KANBAN_PASSWORD"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Kanban Projects Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.base_url:
        table.add_row("Base URL", "OK", settings.base_url)
    else:
        table.add_row("Base URL", "MISSING", "Set KANBAN_BASE_URL or run `doctor setup`")
    status, detail = _auth_mode(settings)
    table.add_row("Auth", status, detail)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    ok_api, detail_api = asyncio.run(_check_projects_endpoint(settings))
    table.add_row("Projects API", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("Kanban base URL", default=settings.base_url or "", show_default=True).strip()
    if not base_url:
        raise typer.BadParameter("base_url is required")

    token = typer.prompt(
        "API token (leave empty to use username/password)",
        default="",
        show_default=False,
        hide_input=True,
    ).strip()

    values: dict[str, str | None] = {"KANBAN_BASE_URL": base_url}
    if token:
        values["KANBAN_API_TOKEN"] = token
    else:
        values["KANBAN_EMAIL_OR_USERNAME"] = typer.prompt("Email or username").strip()
        values["KANBAN_PASSWORD"] = typer.prompt("Password", hide_input=True).strip()

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved Kanban config to:[/green] {env_path}")
