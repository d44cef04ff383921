"""Reconcile one team's declared membership against its remote group."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from ..adapters.base import GroupSource
from .cache import DirectoryCache, GroupCache
from .errors import GroupMutationError, SyncError
from .events import (
    ChangeEvent,
    ChangeSink,
    GroupCreated,
    GroupRenamed,
    MembersAdded,
    MembersRemoved,
)
from .models import RemoteGroup, Team

log = logging.getLogger(__name__)

# Stands in for the id of a group that would have been created in dry-run mode.
DRY_RUN_GROUP_ID = "DRY_RUN_GROUP_ID"


class ReconcileState(enum.Enum):
    SKIPPED = "skipped"
    CONVERGED = "converged"
    MUTATED = "mutated"
    FAILED = "failed"


@dataclass
class TeamResult:
    """Outcome of reconciling a single team against a single target."""

    team: str
    target: str
    state: ReconcileState
    events: list[ChangeEvent] = field(default_factory=list)
    error: SyncError | None = None


class _Recorder:
    """Forward events to ``sink`` while keeping a copy for the result."""

    def __init__(self, sink: ChangeSink) -> None:
        self.sink = sink
        self.events: list[ChangeEvent] = []

    def emit(self, event: ChangeEvent) -> None:
        self.events.append(event)
        self.sink.emit(event)


class Reconciler:
    """Converge remote groups towards the declared team membership.

    Parameters
    ----------
    groups_api:
        Adapter used for every mutating call.
    directory:
        Cache resolving usernames to directory ids and back.
    groups:
        Cache of the existing remote groups.
    dry_run:
        When true no mutating call is issued, but every change event is still
        emitted as if it had been applied.
    target:
        Name reported on each :class:`TeamResult`.

    """

    def __init__(
        self,
        groups_api: GroupSource,
        directory: DirectoryCache,
        groups: GroupCache,
        *,
        dry_run: bool = False,
        target: str = "groups",
    ) -> None:
        self.groups_api = groups_api
        self.directory = directory
        self.groups = groups
        self.dry_run = dry_run
        self.target = target

    async def reconcile(self, team: Team, sink: ChangeSink) -> TeamResult:
        """Run the reconciliation of ``team``, emitting changes to ``sink``.

        Raises :class:`~teamsync.core.errors.SyncError` when the directory or
        the group listing cannot be loaded or a mutation fails.
        """
        handle = team.handle()
        if handle is None:
            return TeamResult(team.name, self.target, ReconcileState.SKIPPED)

        recorder = _Recorder(sink)
        mutated = False
        desired_name = team.desired_display_name()

        group = await self.groups.find(handle)
        if group is None:
            group = await self._create(team, handle, desired_name, recorder)
            mutated = True

        if group.display_name != desired_name:
            recorder.emit(GroupRenamed(handle=handle, old=group.display_name, new=desired_name))
            log.info("Renaming group %s from %r to %r", handle, group.display_name, desired_name)
            if not self.dry_run:
                await self._mutate(
                    team, handle, "rename", self.groups_api.rename_group(group.id, desired_name)
                )
                group.display_name = desired_name
            mutated = True

        desired: set[str] = set()
        for username in team.usernames():
            person = await self.directory.resolve_by_username(username)
            if person is None:
                log.debug("No directory entry for %s, skipping", username)
                continue
            desired.add(person.directory_id)

        current = sorted(group.member_ids)
        expected = sorted(desired)
        if current == expected:
            state = ReconcileState.MUTATED if mutated else ReconcileState.CONVERGED
            return TeamResult(team.name, self.target, state, recorder.events)

        to_add = [i for i in expected if i not in group.member_ids]
        to_remove = [i for i in current if i not in desired]

        if to_add:
            added = []
            for directory_id in to_add:
                person = await self.directory.resolve_by_id(directory_id)
                added.append(person.external_username if person else directory_id)
            recorder.emit(MembersAdded(handle=handle, identities=tuple(added)))
        if to_remove:
            removed = []
            for directory_id in to_remove:
                person = await self.directory.resolve_by_id(directory_id)
                removed.append(person.external_username if person else directory_id)
            recorder.emit(MembersRemoved(handle=handle, identities=tuple(removed)))

        if not self.dry_run:
            await self._mutate(
                team, handle, "set members", self.groups_api.set_members(group.id, expected)
            )
            group.member_ids = set(expected)
        return TeamResult(team.name, self.target, ReconcileState.MUTATED, recorder.events)

    async def _create(
        self, team: Team, handle: str, display_name: str, recorder: _Recorder
    ) -> RemoteGroup:
        recorder.emit(GroupCreated(handle=handle, display_name=display_name))
        log.info("Creating group %s as it did not exist", handle)
        if self.dry_run:
            return RemoteGroup(id=DRY_RUN_GROUP_ID, handle=handle, display_name=display_name)

        created = await self._mutate(
            team, handle, "create", self.groups_api.create_group(handle, display_name)
        )
        self.groups.invalidate()
        refreshed = await self.groups.find(handle)
        return refreshed if refreshed is not None else created

    @staticmethod
    async def _mutate(team: Team, handle: str, operation: str, call):
        try:
            return await call
        except Exception as exc:
            raise GroupMutationError(team.name, handle, operation, exc) from exc
