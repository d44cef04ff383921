"""Human readable reporting of change events and failures."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .core.events import ChangeEvent, GroupCreated, GroupRenamed, MembersAdded, MembersRemoved

log = logging.getLogger(__name__)


def english_comma_join(items: Sequence[str]) -> str:
    """Join ``items`` as ``"a"``, ``"a and b"`` or ``"a, b and c"``."""
    if len(items) <= 1:
        return "".join(items)
    return f"{', '.join(items[:-1])} and {items[-1]}"


def describe(event: ChangeEvent) -> str:
    """Render a single event as one markdown line."""
    if isinstance(event, GroupCreated):
        return f"Creating user group with handle `{event.handle}` as it did not exist"
    if isinstance(event, GroupRenamed):
        return (
            f"Updating user group name for `{event.handle}` "
            f"from `{event.old}` to `{event.new}`"
        )
    if isinstance(event, MembersAdded):
        return f"Adding `{english_comma_join(event.identities)}` to user group `{event.handle}`"
    if isinstance(event, MembersRemoved):
        return (
            f"Evicting `{english_comma_join(event.identities)}` "
            f"out of user group `{event.handle}`"
        )
    raise TypeError(f"Unknown change event: {event!r}")


class ListSink:
    """Sink that only records the events it receives."""

    def __init__(self) -> None:
        self.events: list[ChangeEvent] = []

    def emit(self, event: ChangeEvent) -> None:
        self.events.append(event)


@dataclass(frozen=True)
class Failure:
    target: str
    team: str
    cause: str


class ChangeReporter(ListSink):
    """Collect events and failures and log them as they arrive."""

    def __init__(self, dry_run: bool = False) -> None:
        super().__init__()
        self.dry_run = dry_run
        self.failures: list[Failure] = []

    def emit(self, event: ChangeEvent) -> None:
        super().emit(event)
        log.info("%s%s", "[dry run] " if self.dry_run else "", describe(event))

    def add_failure(self, target: str, team: str, error: Exception) -> None:
        self.failures.append(Failure(target=target, team=team, cause=str(error)))
        log.error("[%s] failed to reconcile team %s: %s", target, team, error)

    def render(self) -> str:
        """Return the full report, one change or failure per line."""
        lines = [f"- {describe(e)}" for e in self.events]
        lines += [f"- :x: `{f.team}` ({f.target}): {f.cause}" for f in self.failures]
        if not lines:
            return "No changes."
        header = "Changes that would be applied:" if self.dry_run else "Applied changes:"
        return "\n".join([header, *lines])
