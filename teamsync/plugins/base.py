"""Target plugins reconciling teams against one external system each."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..adapters.base import DirectorySource, GroupSource
from ..core.cache import DirectoryCache, GroupCache
from ..core.events import ChangeSink
from ..core.models import Team
from ..core.reconciler import Reconciler, TeamResult


class SyncPlugin(ABC):
    """A reconciliation target."""

    name: str

    @abstractmethod
    async def handle_team(self, team: Team, sink: ChangeSink) -> TeamResult:
        """Reconcile ``team`` and report changes to ``sink``."""


class GroupSyncPlugin(SyncPlugin):
    """Keep one user group per team in sync through a :class:`GroupSource`.

    Each instance owns its caches, so two plugins never share state. Build a
    fresh instance for every run.
    """

    def __init__(
        self,
        name: str,
        groups_api: GroupSource,
        directory_source: DirectorySource,
        *,
        dry_run: bool = False,
    ) -> None:
        self.name = name
        self.groups_api = groups_api
        self.directory_source = directory_source
        self.reconciler = Reconciler(
            groups_api,
            DirectoryCache(directory_source),
            GroupCache(groups_api),
            dry_run=dry_run,
            target=name,
        )

    async def handle_team(self, team: Team, sink: ChangeSink) -> TeamResult:
        return await self.reconciler.reconcile(team, sink)
