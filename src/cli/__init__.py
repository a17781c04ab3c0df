"""Typer CLI for the Kanban projects client."""
