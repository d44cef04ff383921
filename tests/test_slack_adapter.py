"""Tests for the :mod:`teamsync.adapters.slack` module."""

import asyncio
from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest

from teamsync.adapters.slack import SlackAPIError, SlackGroupSource


def run(coro: Any) -> Any:
    """Run an async coroutine synchronously for tests."""
    return asyncio.run(coro)


def form(request: httpx.Request) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def make_source(handler) -> SlackGroupSource:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SlackGroupSource("xoxb-TOKEN", client=client)


def test_list_groups_parses_usergroups() -> None:
    """``list_groups`` asks for users and disabled groups."""
    captured: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(
            200,
            json={
                "ok": True,
                "usergroups": [
                    {"id": "S1", "handle": "infra", "name": "Infra", "users": ["U1"]},
                    {"id": "S2", "handle": "ext", "name": "Ext", "is_external": True},
                ],
            },
        )

    groups = run(make_source(handler).list_groups())

    request = captured["request"]
    assert request.headers["Authorization"] == "Bearer xoxb-TOKEN"
    assert request.url.path.endswith("/usergroups.list")
    assert form(request) == {"include_users": "true", "include_disabled": "true"}
    assert [g.handle for g in groups] == ["infra", "ext"]
    assert groups[0].member_ids == {"U1"}
    assert groups[1].is_external is True


def test_create_group_returns_assigned_id() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/usergroups.create")
        assert form(request) == {"handle": "infra", "name": "Infrastructure"}
        return httpx.Response(
            200,
            json={"ok": True, "usergroup": {"id": "S9", "handle": "infra", "name": "Infrastructure"}},
        )

    group = run(make_source(handler).create_group("infra", "Infrastructure"))
    assert group.id == "S9"
    assert group.member_ids == set()


def test_rename_and_set_members_payloads() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True})

    source = make_source(handler)
    run(source.rename_group("S1", "New Name"))
    run(source.set_members("S1", ["U1", "U2"]))

    assert requests[0].url.path.endswith("/usergroups.update")
    assert form(requests[0]) == {"usergroup": "S1", "name": "New Name"}
    assert requests[1].url.path.endswith("/usergroups.users.update")
    assert form(requests[1]) == {"usergroup": "S1", "users": "U1,U2"}

    run(source.close())


def test_not_ok_response_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": False, "error": "name_already_exists"})

    with pytest.raises(SlackAPIError, match="name_already_exists") as info:
        run(make_source(handler).create_group("infra", "Infra"))
    assert info.value.method == "usergroups.create"


def test_http_error_status_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    with pytest.raises(httpx.HTTPStatusError):
        run(make_source(handler).list_groups())
