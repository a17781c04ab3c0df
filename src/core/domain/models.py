"""Modelos del dominio (Pydantic v2).

Describen la forma de los proyectos del servicio Kanban y de los parámetros
que acepta el cliente. La validación es estricta en el borde: una respuesta
que no cumple el esquema nunca se devuelve a medias.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

MAX_PER_PAGE = 100
DEFAULT_PER_PAGE = 30


def _reject_null(value: Any) -> Any:
    # `included` puede faltar, pero si viene presente debe ser un objeto.
    if value is None:
        raise ValueError("included must be an object when present")
    return value


class Project(BaseModel):
    """Proyecto del servicio Kanban.

    Solo `id` y `name` son obligatorios; el resto de campos que devuelva el
    servidor (fondos, fechas...) se conservan tal cual como extras.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(
        ...,
        description="Identificador del proyecto en el servidor.",
    )
    name: str = Field(
        ...,
        description="Nombre visible del proyecto.",
    )


class ProjectCollection(BaseModel):
    """Respuesta de listado: `{items: [...], included?: {...}}`."""

    items: list[Project] = Field(
        ...,
        description="Proyectos de la página solicitada, en orden del servidor.",
    )
    included: dict[str, Any] | None = Field(
        default=None,
        description="Entidades relacionadas agrupadas por tipo (opacas).",
    )

    @field_validator("included", mode="before")
    @classmethod
    def _reject_null_included(cls, value: Any) -> Any:
        return _reject_null(value)


class ProjectEnvelope(BaseModel):
    """Respuesta de un único recurso: `{item: {...}, included?: {...}}`."""

    item: Project
    included: dict[str, Any] | None = None

    @field_validator("included", mode="before")
    @classmethod
    def _reject_null_included(cls, value: Any) -> Any:
        return _reject_null(value)


class ProjectListParams(BaseModel):
    """Parámetros de paginación.

    `per_page` por encima de `MAX_PER_PAGE` se recorta en silencio.
    """

    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1)

    @field_validator("per_page")
    @classmethod
    def _clamp_per_page(cls, value: int) -> int:
        return min(value, MAX_PER_PAGE)

    def to_query(self) -> str:
        return urlencode({"page": self.page, "per_page": self.per_page})


class ProjectRef(BaseModel):
    id: str = Field(..., min_length=1)


class CreateProjectOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Nombre del proyecto.")

    def create_body(self) -> dict[str, Any]:
        return {"name": self.name}


class UpdateProjectOptions(BaseModel):
    """Actualización parcial.

    Solo viajan al servidor los campos que el llamador pasó explícitamente;
    un campo omitido (o `None`) nunca se envía como sobrescritura.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, description="Proyecto a actualizar.")
    name: str | None = Field(default=None, description="Nuevo nombre.")

    def update_body(self) -> dict[str, Any]:
        return self.model_dump(exclude={"id"}, exclude_unset=True, exclude_none=True)


class DeleteResult(BaseModel):
    success: bool = True
