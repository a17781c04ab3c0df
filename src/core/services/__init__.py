"""Application services built on top of the domain models."""

from core.services.project_client import ProjectClient

__all__ = ["ProjectClient"]
