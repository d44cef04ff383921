"""Per-run memoizing caches over the directory and the remote groups.

Both caches are created for a single reconciliation pass and handed to the
:class:`~teamsync.core.reconciler.Reconciler` explicitly. They are not safe to
share between concurrent runs.
"""

from __future__ import annotations

import logging

from ..adapters.base import DirectorySource, GroupSource
from .errors import DirectoryLoadError, GroupListError
from .models import DirectoryPerson, RemoteGroup, normalize_username

log = logging.getLogger(__name__)


class DirectoryCache:
    """Lookup people by directory id or by external username.

    The directory is loaded lazily on the first lookup and kept for the rest
    of the run. A failed load is remembered and raised again to every caller.
    """

    def __init__(self, source: DirectorySource) -> None:
        self.source = source
        self._by_id: dict[str, DirectoryPerson] | None = None
        self._by_username: dict[str, DirectoryPerson] = {}
        self._error: DirectoryLoadError | None = None

    async def _ensure_loaded(self) -> None:
        if self._error is not None:
            raise self._error
        if self._by_id is not None:
            return
        try:
            persons = await self.source.load_all_persons()
        except Exception as exc:
            self._error = DirectoryLoadError(f"could not load the person directory: {exc}")
            raise self._error from exc

        by_id: dict[str, DirectoryPerson] = {}
        by_username: dict[str, DirectoryPerson] = {}
        for person in persons:
            if not person.directory_id:
                continue
            by_id[person.directory_id] = person
            by_username[normalize_username(person.external_username)] = person
        self._by_id = by_id
        self._by_username = by_username
        log.debug("Loaded %d people from the directory", len(by_id))

    async def resolve_by_username(self, username: str) -> DirectoryPerson | None:
        await self._ensure_loaded()
        return self._by_username.get(normalize_username(username))

    async def resolve_by_id(self, directory_id: str) -> DirectoryPerson | None:
        await self._ensure_loaded()
        assert self._by_id is not None
        return self._by_id.get(directory_id)


class GroupCache:
    """Memoized listing of the groups this process may manage.

    External (federated) groups are dropped at load time; they are never
    matched by handle and never mutated.
    """

    def __init__(self, source: GroupSource) -> None:
        self.source = source
        self._groups: list[RemoteGroup] | None = None
        self._error: GroupListError | None = None

    async def list_groups(self) -> list[RemoteGroup]:
        if self._error is not None:
            raise self._error
        if self._groups is None:
            try:
                groups = await self.source.list_groups()
            except Exception as exc:
                self._error = GroupListError(f"could not list remote groups: {exc}")
                raise self._error from exc
            self._groups = [g for g in groups if not g.is_external]
            log.debug("Loaded %d remote groups", len(self._groups))
        return self._groups

    async def find(self, handle: str) -> RemoteGroup | None:
        """Return the group whose handle is exactly ``handle``."""
        return next((g for g in await self.list_groups() if g.handle == handle), None)

    def invalidate(self) -> None:
        """Forget the memoized listing so the next call fetches again."""
        self._groups = None
        self._error = None
