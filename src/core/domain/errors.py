"""Errores del dominio.

`ProjectOperationError` es el único error que ve quien usa `ProjectClient`:
no hay variantes para "no encontrado", validación o red.
"""

from __future__ import annotations

_ACTIONS: dict[str, str] = {
    "list": "get projects",
    "get": "get project",
    "create": "create project",
    "update": "update project",
    "delete": "delete project",
}


class ProjectOperationError(Exception):
    """Fallo de una operación sobre proyectos.

    El mensaje sigue el formato `Failed to <acción>: <causa>` y la excepción
    original queda en `cause` (y en `__cause__` al lanzarla con `from`).
    """

    def __init__(self, operation: str, cause: BaseException | str) -> None:
        self.operation = operation
        self.cause = cause if isinstance(cause, BaseException) else None
        action = _ACTIONS.get(operation, f"{operation} project")
        super().__init__(f"Failed to {action}: {cause}")


class KanbanRequestError(Exception):
    """Error de transporte o respuesta HTTP no exitosa del servidor Kanban."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        path: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code


class KanbanConfigError(Exception):
    """Configuración insuficiente para hablar con el servidor."""
