"""Componentes de UI para CLI (Rich).

Separan los detalles visuales de la lógica de los comandos.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Project, ProjectCollection


def build_projects_table(collection: ProjectCollection, *, page: int | None = None) -> Table:
    """Crea una tabla Rich con los proyectos de una página."""

    title = "Projects" if page is None else f"Projects (page {page})"
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    for project in collection.items:
        table.add_row(project.id, project.name)
    if not collection.items:
        table.caption = "No projects on this page."
    return table


def build_project_panel(project: Project, *, title: str = "Project") -> Panel:
    """Panel con el detalle de un proyecto, incluidos los campos extra."""

    body = Text()
    body.append("ID: ", style="bold")
    body.append(f"{project.id}\n")
    body.append("Name: ", style="bold")
    body.append(project.name)
    for key, value in sorted((project.model_extra or {}).items()):
        body.append(f"\n{key}: ", style="dim")
        body.append(str(value), style="dim")
    return Panel(body, title=Text(title, style="bold cyan"), border_style="cyan")
