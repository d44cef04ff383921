"""Selection of the enabled reconciliation targets."""

from __future__ import annotations

import httpx

from ..adapters.base import DirectorySource
from ..adapters.people import FilePeopleSource, GitHubPeopleSource
from ..adapters.slack import SlackGroupSource
from ..config import Settings
from .base import GroupSyncPlugin, SyncPlugin

KNOWN_PLUGINS = ("slack",)


def directory_source(settings: Settings, client: httpx.AsyncClient) -> DirectorySource:
    """Pick the local people file when configured, GitHub otherwise."""
    if settings.people_path:
        return FilePeopleSource(settings.people_path)
    return GitHubPeopleSource(
        settings.permissions_org,
        settings.permissions_repo,
        ref=settings.permissions_ref,
        token=settings.github_token,
        client=client,
    )


def build_plugins(settings: Settings, client: httpx.AsyncClient) -> list[SyncPlugin]:
    """Instantiate every plugin named in ``settings.plugins``.

    Raises :class:`ValueError` for an unknown plugin name.
    """
    plugins: list[SyncPlugin] = []
    for name in settings.plugins:
        if name == "slack":
            plugins.append(
                GroupSyncPlugin(
                    "slack",
                    SlackGroupSource(settings.slack_token, client=client),
                    directory_source(settings, client),
                    dry_run=settings.dry_run,
                )
            )
        else:
            raise ValueError(
                f"Unknown plugin {name!r}; expected one of {', '.join(KNOWN_PLUGINS)}"
            )
    return plugins


__all__ = ["GroupSyncPlugin", "SyncPlugin", "build_plugins", "directory_source"]
