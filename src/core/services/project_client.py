"""CRUD client for Kanban projects.

Each operation is a single request/response round trip against
`/api/projects`: parameters are validated (and `per_page` clamped) before the
call, the decoded JSON is validated against the domain models after it, and
any failure on the way is re-raised as `ProjectOperationError`.

The client keeps no state besides its collaborators, so operations can be
awaited concurrently (e.g. with `asyncio.gather`). Timeouts, retries and
authentication belong to the requester.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from core.domain.errors import ProjectOperationError
from core.domain.models import (
    DEFAULT_PER_PAGE,
    CreateProjectOptions,
    DeleteResult,
    Project,
    ProjectCollection,
    ProjectEnvelope,
    ProjectListParams,
    ProjectRef,
    UpdateProjectOptions,
)
from core.interfaces.requester import KanbanRequester
from core.logging_setup import get_logger

PROJECTS_PATH = "/api/projects"


def project_path(project_id: str) -> str:
    return f"{PROJECTS_PATH}/{quote(project_id, safe='')}"


class ProjectClient:
    """Create, list, fetch, update and delete projects."""

    def __init__(self, request: KanbanRequester, logger: logging.Logger | None = None) -> None:
        self._request = request
        self.logger = logger or get_logger()

    async def list_projects(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> ProjectCollection:
        """Return one page of projects (`per_page` is capped at 100)."""

        try:
            params = ProjectListParams(page=page, per_page=per_page)
            path = f"{PROJECTS_PATH}?{params.to_query()}"
            self.logger.debug("Listing projects: page=%s per_page=%s", params.page, params.per_page)
            response = await self._request(path, method="GET")
            return ProjectCollection.model_validate(response)
        except Exception as exc:
            raise self._failure("list", exc) from exc

    async def get_project(self, project_id: str) -> Project:
        """Return a single project; the `included` map is dropped."""

        try:
            ref = ProjectRef(id=project_id)
            self.logger.debug("Fetching project %s", ref.id)
            response = await self._request(project_path(ref.id), method="GET")
            return ProjectEnvelope.model_validate(response).item
        except Exception as exc:
            raise self._failure("get", exc) from exc

    async def create_project(
        self,
        options: CreateProjectOptions | None = None,
        *,
        name: str | None = None,
    ) -> Project:
        """Create a project from `options` or from `name=`.

        Not idempotent: repeated calls create duplicates.
        """

        try:
            if options is None:
                options = CreateProjectOptions(name=name)
            self.logger.debug("Creating project %r", options.name)
            response = await self._request(PROJECTS_PATH, method="POST", body=options.create_body())
            return ProjectEnvelope.model_validate(response).item
        except Exception as exc:
            raise self._failure("create", exc) from exc

    async def update_project(self, project: str | UpdateProjectOptions, **changes: Any) -> Project:
        """Partially update a project.

        `project` is either the project id or a full `UpdateProjectOptions`.
        Only the fields actually supplied end up in the PATCH body; with no
        changes an empty body is still sent.
        """

        try:
            if isinstance(project, UpdateProjectOptions):
                options = UpdateProjectOptions(**{**project.model_dump(exclude_unset=True), **changes})
            else:
                options = UpdateProjectOptions(id=project, **changes)
            body = options.update_body()
            self.logger.debug("Updating project %s with fields %s", options.id, sorted(body))
            response = await self._request(project_path(options.id), method="PATCH", body=body)
            return ProjectEnvelope.model_validate(response).item
        except Exception as exc:
            raise self._failure("update", exc) from exc

    async def delete_project(self, project_id: str) -> DeleteResult:
        """Delete a project. Whatever the server answers on success is ignored."""

        try:
            ref = ProjectRef(id=project_id)
            self.logger.debug("Deleting project %s", ref.id)
            await self._request(project_path(ref.id), method="DELETE")
            return DeleteResult(success=True)
        except Exception as exc:
            raise self._failure("delete", exc) from exc

    def _failure(self, operation: str, exc: Exception) -> ProjectOperationError:
        error = ProjectOperationError(operation, exc)
        self.logger.info("%s", error)
        return error
