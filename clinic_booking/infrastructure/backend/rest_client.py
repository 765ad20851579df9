from __future__ import annotations

import logging
from typing import Any

import httpx

from clinic_booking.core.config import settings


class BackendRestClient:
    """Thin client for the hosted backend's table API (PostgREST conventions)."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BACKEND_URL or "").rstrip("/")
        self._api_key = api_key or settings.BACKEND_API_KEY
        if not self._base_url:
            raise ValueError("BACKEND_URL is required for the REST backend")
        if not self._api_key:
            raise ValueError("BACKEND_API_KEY is required for the REST backend")

        self._client = httpx.Client(
            base_url=f"{self._base_url}/rest/v1",
            timeout=timeout or settings.BACKEND_TIMEOUT_SECONDS,
            headers={
                "apikey": self._api_key,
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

    def select(self, table: str, filters: dict[str, str] | None = None) -> list[dict[str, Any]]:
        params = {"select": "*"}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        response = self._client.get(f"/{table}", params=params)
        self._raise_for_status(response, table, "select")
        return response.json()

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        response = self._client.post(
            f"/{table}", json=[row], headers={"Prefer": "return=representation"}
        )
        self._raise_for_status(response, table, "insert")
        rows = response.json()
        if not rows:
            raise ValueError(f"Insert into {table} returned no rows")
        return rows[0]

    def update(self, table: str, row_id: str, values: dict[str, Any]) -> list[dict[str, Any]]:
        response = self._client.patch(
            f"/{table}",
            params={"id": f"eq.{row_id}"},
            json=values,
            headers={"Prefer": "return=representation"},
        )
        self._raise_for_status(response, table, "update")
        return response.json()

    def _raise_for_status(self, response: httpx.Response, table: str, operation: str) -> None:
        if response.status_code < 400:
            return
        try:
            message = response.json().get("message")
        except Exception:
            message = response.text
        self._logger.error(
            "Backend request failed",
            extra={"table": table, "operation": operation, "status": response.status_code, "error": message},
        )
        response.raise_for_status()
