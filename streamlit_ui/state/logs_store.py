"""Client-side copy of the log list, kept in step with server responses.

Mutations are applied locally only after the server confirms them, using
the entry the server returns. There is no request fencing: when two calls
overlap, whichever response lands last wins.
"""
from types import ModuleType
from typing import Any, Optional

import httpx
import structlog

from streamlit_ui.components import api_client
from streamlit_ui.components.api_client import LogsApiError
from streamlit_ui.state.notifications import NotificationCenter

logger = structlog.get_logger(__name__)

LogDict = dict[str, Any]


def _error_message(exc: Exception, fallback: str) -> str:
    if isinstance(exc, LogsApiError):
        return exc.message
    return fallback


class LogsStore:
    """Authoritative in-memory entry list for one UI session."""

    def __init__(
        self,
        notifications: NotificationCenter,
        api: ModuleType = api_client,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.notifications = notifications
        self.logs: list[LogDict] = []
        # True until the first fetch settles so the UI can show a spinner
        self.loading = True
        self.error: Optional[str] = None
        self._api = api
        self._client = client

    async def fetch_all(self) -> list[LogDict]:
        """Replace the list with the server's. Keeps the old list on failure."""
        self.loading = True
        self.error = None
        try:
            data = await self._api.get_all_logs(client=self._client)
        except Exception as e:
            self.error = _error_message(e, api_client.FETCH_FAILED)
            self.notifications.show(self.error, "error")
            logger.warning("logs_fetch_failed", error=self.error)
            raise
        finally:
            self.loading = False
        self.logs = list(data)
        logger.info("logs_fetched", count=len(self.logs))
        return self.logs

    async def create(self, owner: str, log_text: str) -> LogDict:
        """Create on the server, then append the returned entry."""
        try:
            entry = await self._api.create_log(owner, log_text, client=self._client)
        except Exception as e:
            self.notifications.show(_error_message(e, api_client.CREATE_FAILED), "error")
            logger.warning("log_create_failed", owner=owner)
            raise
        self.logs = [*self.logs, entry]
        self.notifications.show("Log created successfully", "success")
        logger.info("log_created", id=entry.get("id"))
        return entry

    async def update(
        self,
        log_id: str,
        owner: Optional[str] = None,
        log_text: Optional[str] = None,
    ) -> LogDict:
        """Patch on the server, then swap in the returned entry by id."""
        try:
            entry = await self._api.update_log(
                log_id, client=self._client, owner=owner, log_text=log_text
            )
        except Exception as e:
            self.notifications.show(_error_message(e, api_client.UPDATE_FAILED), "error")
            logger.warning("log_update_failed", id=log_id)
            raise
        # Full replace: the server's updatedAt is authoritative.
        self.logs = [entry if log.get("id") == log_id else log for log in self.logs]
        self.notifications.show("Log updated successfully", "success")
        logger.info("log_updated", id=log_id)
        return entry

    async def delete(self, log_id: str) -> None:
        """Delete on the server, then drop the entry locally."""
        try:
            await self._api.delete_log(log_id, client=self._client)
        except Exception as e:
            self.notifications.show(_error_message(e, api_client.DELETE_FAILED), "error")
            logger.warning("log_delete_failed", id=log_id)
            raise
        self.logs = [log for log in self.logs if log.get("id") != log_id]
        self.notifications.show("Log deleted successfully", "success")
        logger.info("log_deleted", id=log_id)
