"""Wrapper de httpx para el servidor Kanban.

- Estandariza timeouts, headers y autenticación en un único sitio.
- Implementa `core.interfaces.requester.KanbanRequester`, así que
  `ProjectClient` puede usarlo directamente o sustituirse por un fake en tests.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import KanbanConfigError, KanbanRequestError
from core.logging_setup import get_logger

ACCESS_TOKENS_PATH = "/api/access-tokens"

_ERROR_EXCERPT_CHARS = 200


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a `settings.base_url`.

    Lanza `KanbanConfigError` si no hay URL base configurada.
    """

    settings = settings or AppSettings()
    if not settings.base_url:
        raise KanbanConfigError("No Kanban base URL configured (set KANBAN_BASE_URL).")

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _excerpt(response: httpx.Response) -> str:
    text = response.text.strip()
    if len(text) <= _ERROR_EXCERPT_CHARS:
        return text
    return text[: _ERROR_EXCERPT_CHARS - 1].rstrip() + "…"


class KanbanHttpRequester:
    """Función de request autenticada contra el servidor Kanban.

    Autenticación:
    - `api_token` si está configurado.
    - Si no, usuario/contraseña: se intercambian una sola vez por un token
      (`POST /api/access-tokens`) en la primera petición.
    - Sin ninguno de los dos, las peticiones salen sin cabecera Authorization.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_async_client(self._settings)
        self._owns_client = client is None
        self._token = self._settings.api_token
        self.logger = logger or get_logger()

    async def __aenter__(self) -> "KanbanHttpRequester":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __call__(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any | None = None,
    ) -> Any:
        headers = await self._auth_headers()
        return await self._send(method, path, body=body, headers=headers)

    async def _auth_headers(self) -> dict[str, str]:
        if not self._token and self._settings.has_credentials:
            self._token = await self._login()
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    async def _login(self) -> str:
        self.logger.info("Requesting access token for %s", self._settings.email_or_username)
        payload = await self._send(
            "POST",
            ACCESS_TOKENS_PATH,
            body={
                "emailOrUsername": self._settings.email_or_username,
                "password": self._settings.password,
            },
        )
        token = payload.get("item") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token:
            raise KanbanRequestError(
                "Login response did not contain an access token.",
                method="POST",
                path=ACCESS_TOKENS_PATH,
            )
        return token

    async def _send(
        self,
        method: str,
        path: str,
        *,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        self.logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, path, json=body, headers=headers)
        except httpx.HTTPError as exc:
            raise KanbanRequestError(
                f"{method} {path} failed: {exc}",
                method=method,
                path=path,
            ) from exc

        self.logger.debug("%s %s -> HTTP %s", method, path, response.status_code)
        if response.is_error:
            detail = _excerpt(response)
            message = f"HTTP {response.status_code} for {method} {path}"
            if detail:
                message = f"{message}: {detail}"
            raise KanbanRequestError(
                message,
                method=method,
                path=path,
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise KanbanRequestError(
                f"{method} {path} returned a non-JSON body",
                method=method,
                path=path,
                status_code=response.status_code,
            ) from exc
