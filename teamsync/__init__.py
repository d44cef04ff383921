"""Core package for teamsync.

teamsync keeps one remote user group per declared team in line with the
team's maintainers and members. The reconciliation algorithm and its caches
live in :mod:`teamsync.core`; transports for the external systems live in
:mod:`teamsync.adapters`.
"""

from .core.cache import DirectoryCache, GroupCache
from .core.models import DirectoryPerson, RemoteGroup, Team
from .core.reconciler import Reconciler, ReconcileState, TeamResult

__all__ = [
    "DirectoryCache",
    "DirectoryPerson",
    "GroupCache",
    "Reconciler",
    "ReconcileState",
    "RemoteGroup",
    "Team",
    "TeamResult",
]
