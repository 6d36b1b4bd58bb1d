"""Async HTTP client for the FastAPI log endpoints."""
from typing import Any, Optional

import httpx

from streamlit_ui.utils.config import get_api_url, get_api_timeout

FETCH_FAILED = "Failed to fetch logs"
CREATE_FAILED = "Failed to create log"
UPDATE_FAILED = "Failed to update log"
DELETE_FAILED = "Failed to delete log"
HEALTH_FAILED = "Failed to reach API"


class LogsApiError(Exception):
    """A transport failure mapped to a fixed, user-facing message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def get_client(base_url: Optional[str] = None) -> httpx.AsyncClient:
    """Return an async httpx client with base URL. Timeout from config (default: none)."""
    url = (base_url or get_api_url()).rstrip("/")
    return httpx.AsyncClient(base_url=url, timeout=get_api_timeout())


async def _send(
    client: Optional[httpx.AsyncClient],
    failure_message: str,
    method: str,
    path: str,
    **kwargs: Any,
) -> httpx.Response:
    """Send one request; non-2xx and network errors raise LogsApiError."""
    c = client or get_client()
    try:
        r = await c.request(method, path, **kwargs)
    except httpx.HTTPError as e:
        raise LogsApiError(failure_message) from e
    finally:
        if not client:
            await c.aclose()
    if not r.is_success:
        raise LogsApiError(failure_message, status_code=r.status_code)
    return r


async def get_all_logs(client: Optional[httpx.AsyncClient] = None) -> list[dict[str, Any]]:
    """GET /api/logs."""
    r = await _send(client, FETCH_FAILED, "GET", "/api/logs")
    return r.json()


async def create_log(
    owner: str,
    log_text: str,
    client: Optional[httpx.AsyncClient] = None,
) -> dict[str, Any]:
    """POST /api/logs. Returns the created entry with server id and timestamps."""
    body = {"owner": owner, "logText": log_text}
    r = await _send(client, CREATE_FAILED, "POST", "/api/logs", json=body)
    return r.json()


async def update_log(
    log_id: str,
    client: Optional[httpx.AsyncClient] = None,
    owner: Optional[str] = None,
    log_text: Optional[str] = None,
) -> dict[str, Any]:
    """PUT /api/logs/{log_id}. Only include fields to update."""
    body: dict[str, Any] = {}
    if owner is not None:
        body["owner"] = owner
    if log_text is not None:
        body["logText"] = log_text
    r = await _send(client, UPDATE_FAILED, "PUT", f"/api/logs/{log_id}", json=body)
    return r.json()


async def delete_log(log_id: str, client: Optional[httpx.AsyncClient] = None) -> None:
    """DELETE /api/logs/{log_id}."""
    await _send(client, DELETE_FAILED, "DELETE", f"/api/logs/{log_id}")


async def get_health(client: Optional[httpx.AsyncClient] = None) -> dict[str, Any]:
    """GET /health."""
    r = await _send(client, HEALTH_FAILED, "GET", "/health")
    return r.json()
