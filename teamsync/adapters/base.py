"""Base interfaces for the external systems teamsync talks to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..core.models import DirectoryPerson, RemoteGroup


class DirectorySource(ABC):
    """Source of the person directory."""

    @abstractmethod
    async def load_all_persons(self) -> list[DirectoryPerson]:
        """Fetch every person in the directory in one go."""


class GroupSource(ABC):
    """Abstract adapter for a group-management platform."""

    @abstractmethod
    async def list_groups(self) -> list[RemoteGroup]:
        """Return all groups, including their members."""

    @abstractmethod
    async def create_group(self, handle: str, display_name: str) -> RemoteGroup:
        """Create a group and return it with its assigned identifier."""

    @abstractmethod
    async def rename_group(self, group_id: str, display_name: str) -> None:
        """Change the display name of the group ``group_id``."""

    @abstractmethod
    async def set_members(self, group_id: str, member_ids: Iterable[str]) -> None:
        """Replace the whole membership of ``group_id`` with ``member_ids``."""
