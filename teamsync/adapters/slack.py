"""Slack user groups adapter implementing :class:`~teamsync.adapters.base.GroupSource`.

Only the four Web API methods needed for reconciliation are supported. They
are called through :mod:`httpx` so the adapter stays fully asynchronous and
can be exercised with :class:`httpx.MockTransport` in tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import httpx

from ..core.models import RemoteGroup
from .base import GroupSource


class SlackAPIError(Exception):
    """Slack answered a Web API call with ``ok: false``."""

    def __init__(self, method: str, error: str) -> None:
        super().__init__(f"{method}: {error}")
        self.method = method
        self.error = error


class SlackGroupSource(GroupSource):
    """Manage Slack user groups through the Web API."""

    api_base = "https://slack.com/api"

    def __init__(self, token: str, client: httpx.AsyncClient | None = None) -> None:
        """Store the bot ``token`` and optional HTTP ``client``."""
        self.token = token
        self.client = client or httpx.AsyncClient()

    # ------------------------------------------------------------------
    async def _call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.api_base}/{method}"
        headers = {"Authorization": f"Bearer {self.token}"}
        response = await self.client.post(url, data=payload, headers=headers)
        response.raise_for_status()
        data: dict[str, Any] = response.json()
        if not data.get("ok"):
            raise SlackAPIError(method, str(data.get("error", "unknown_error")))
        return data

    async def list_groups(self) -> list[RemoteGroup]:
        """List every user group, disabled ones included, with their users."""
        data = await self._call(
            "usergroups.list", {"include_users": "true", "include_disabled": "true"}
        )
        return [RemoteGroup.model_validate(g) for g in data.get("usergroups", [])]

    async def create_group(self, handle: str, display_name: str) -> RemoteGroup:
        """Create a user group and return it with the id Slack assigned."""
        data = await self._call("usergroups.create", {"handle": handle, "name": display_name})
        return RemoteGroup.model_validate(data["usergroup"])

    async def rename_group(self, group_id: str, display_name: str) -> None:
        await self._call("usergroups.update", {"usergroup": group_id, "name": display_name})

    async def set_members(self, group_id: str, member_ids: Iterable[str]) -> None:
        """Replace the users of ``group_id``.

        Slack rejects an empty user list, in which case :class:`SlackAPIError`
        is raised.
        """
        await self._call(
            "usergroups.users.update",
            {"usergroup": group_id, "users": ",".join(member_ids)},
        )

    async def close(self) -> None:
        """Close the underlying :class:`httpx.AsyncClient`."""
        await self.client.aclose()
