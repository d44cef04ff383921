"""A single reconciliation pass over every team and every enabled target."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .core.errors import SyncError
from .core.models import Team
from .core.reconciler import ReconcileState, TeamResult
from .plugins.base import SyncPlugin
from .report import ChangeReporter

log = logging.getLogger(__name__)


@dataclass
class RunSummary:
    results: list[TeamResult] = field(default_factory=list)

    @property
    def failures(self) -> list[TeamResult]:
        return [r for r in self.results if r.state is ReconcileState.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failures


async def run_pass(
    teams: Sequence[Team], plugins: Iterable[SyncPlugin], reporter: ChangeReporter
) -> RunSummary:
    """Reconcile ``teams`` against each plugin in turn.

    Teams are handled one after another so that a group created for one team
    is visible to the next. A :class:`SyncError` aborts only the team it was
    raised for; it is recorded on ``reporter`` and the pass carries on.
    """
    summary = RunSummary()
    for plugin in plugins:
        log.info("Reconciling %d teams against %s", len(teams), plugin.name)
        for team in teams:
            try:
                result = await plugin.handle_team(team, reporter)
            except SyncError as exc:
                reporter.add_failure(plugin.name, team.name, exc)
                result = TeamResult(team.name, plugin.name, ReconcileState.FAILED, error=exc)
            summary.results.append(result)
    return summary
