"""Contrato del transporte HTTP.

`ProjectClient` no sabe de httpx ni de autenticación: delega en cualquier
callable asíncrono con esta firma (el adaptador por defecto, un fake en tests).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KanbanRequester(Protocol):
    """Función de request contra el servidor Kanban.

    Reglas:
    - `path` es relativo a la URL base y puede incluir query string.
    - Devuelve el JSON ya decodificado (o `None` si no hay cuerpo).
    - Lanza una excepción ante fallos de transporte o HTTP no exitoso.
    """

    async def __call__(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any | None = None,
    ) -> Any:
        ...
