"""Shared HTTP plumbing for remote inference clients."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from .types import MalformedResponseError, RemoteInferenceError


class BaseInferenceClient:
    """POST JSON to a remote model endpoint and hand back the decoded body."""

    def __init__(
        self,
        name: str,
        *,
        base_url: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _post(
        self,
        url: str,
        payload: Mapping[str, Any],
        *,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.post(url, headers=self._headers(), json=payload, params=params)
            except httpx.HTTPError as exc:
                raise RemoteInferenceError(f"{self.name} network error: {exc}") from exc
            if not response.is_success:
                raise RemoteInferenceError(
                    f"{self.name} {response.status_code} on {url}: {_error_detail(response)}"
                )
            try:
                return response.json()
            except ValueError as exc:
                raise MalformedResponseError(
                    f"{self.name} returned non-JSON on {url}. Body: {response.text[:400]}"
                ) from exc


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:400] or response.reason_phrase
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            error = error.get("message")
        if error:
            return str(error)
    return response.reason_phrase


__all__ = ["BaseInferenceClient"]
