"""Exceptions raised while reconciling teams against a remote group system."""

from __future__ import annotations


class SyncError(Exception):
    """Base class for failures that abort the reconciliation of a team."""


class DirectoryLoadError(SyncError):
    """The one-shot load of the person directory failed."""


class GroupListError(SyncError):
    """Listing the remote groups failed."""


class GroupMutationError(SyncError):
    """Creating, renaming or updating the members of a group failed.

    Carries the ``team`` name, the group ``handle`` and the attempted
    ``operation`` so the failure can be reported without the traceback.
    """

    def __init__(self, team: str, handle: str, operation: str, cause: Exception) -> None:
        super().__init__(f"{operation} failed for group {handle!r} of team {team!r}: {cause}")
        self.team = team
        self.handle = handle
        self.operation = operation
        self.cause = cause
