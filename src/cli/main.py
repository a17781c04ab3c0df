"""Command line entry point.

Every command builds a `ProjectClient` over the default HTTP requester, runs
one operation with `asyncio.run` and renders the result with Rich. Failures
surface as a red one-liner and exit code 1.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from adapters.http_client import KanbanHttpRequester
from adapters.json_exporter import export_projects_json
from cli import doctor
from cli.ui_components import build_project_panel, build_projects_table
from core.config import AppSettings
from core.domain.errors import KanbanConfigError, ProjectOperationError
from core.domain.models import DEFAULT_PER_PAGE, Project
from core.logging_setup import setup_logging
from core.services.project_client import ProjectClient

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Manage projects on a Kanban (Planka) server.")
projects_app = typer.Typer(no_args_is_help=True, help="Create, list, inspect, update and delete projects.")
app.add_typer(projects_app, name="projects")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def build_requester(settings: AppSettings) -> KanbanHttpRequester:
    return KanbanHttpRequester(settings)


def _run(operation: Callable[[ProjectClient], Awaitable[T]]) -> T:
    settings = AppSettings()

    async def _go() -> T:
        async with build_requester(settings) as requester:
            return await operation(ProjectClient(requester))

    try:
        return asyncio.run(_go())
    except (ProjectOperationError, KanbanConfigError) as exc:
        _console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _print_project(project: Project, *, as_json: bool, title: str) -> None:
    if as_json:
        _console.print_json(data=project.model_dump(mode="json"))
    else:
        _console.print(build_project_panel(project, title=title))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings)


@projects_app.command("list")
def list_command(
    page: int = typer.Option(1, "--page", min=1, help="Page number (1-based)."),
    per_page: int = typer.Option(DEFAULT_PER_PAGE, "--per-page", min=1, help="Results per page (max 100)."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the page to a JSON file."),
) -> None:
    """List one page of projects."""

    collection = _run(lambda client: client.list_projects(page, per_page))
    if output is not None:
        path = export_projects_json(collection=collection, output_path=output)
        _console.print(f"[green]Saved {len(collection.items)} project(s) to:[/green] {path}")
    if as_json:
        _console.print_json(data=collection.model_dump(mode="json"))
    else:
        _console.print(build_projects_table(collection, page=page))


@projects_app.command("get")
def get_command(
    project_id: str = typer.Argument(..., help="Project ID."),
    as_json: bool = typer.Option(False, "--json"),
) -> None:
    """Show a single project."""

    project = _run(lambda client: client.get_project(project_id))
    _print_project(project, as_json=as_json, title="Project")


@projects_app.command("create")
def create_command(
    name: str = typer.Argument(..., help="Name of the new project."),
    as_json: bool = typer.Option(False, "--json"),
) -> None:
    """Create a project."""

    project = _run(lambda client: client.create_project(name=name))
    _print_project(project, as_json=as_json, title="Created")


@projects_app.command("update")
def update_command(
    project_id: str = typer.Argument(..., help="Project ID."),
    name: Optional[str] = typer.Option(None, "--name", help="New project name."),
    as_json: bool = typer.Option(False, "--json"),
) -> None:
    """Update a project. Only the options given are sent."""

    changes: dict[str, Any] = {}
    if name is not None:
        changes["name"] = name
    project = _run(lambda client: client.update_project(project_id, **changes))
    _print_project(project, as_json=as_json, title="Updated")


@projects_app.command("delete")
def delete_command(
    project_id: str = typer.Argument(..., help="Project ID."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete a project."""

    if not yes:
        typer.confirm(f"Delete project {project_id}?", abort=True)
    _run(lambda client: client.delete_project(project_id))
    _console.print(f"[green]Deleted project {project_id}[/green]")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
