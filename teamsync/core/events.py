"""Change events emitted by the reconciler.

Events are plain data. Rendering them for humans is the job of
:mod:`teamsync.report`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple, Union


@dataclass(frozen=True)
class GroupCreated:
    handle: str
    display_name: str


@dataclass(frozen=True)
class GroupRenamed:
    handle: str
    old: str
    new: str


@dataclass(frozen=True)
class MembersAdded:
    handle: str
    identities: Tuple[str, ...]


@dataclass(frozen=True)
class MembersRemoved:
    handle: str
    identities: Tuple[str, ...]


ChangeEvent = Union[GroupCreated, GroupRenamed, MembersAdded, MembersRemoved]


class ChangeSink(Protocol):
    """Anything that accepts change events."""

    def emit(self, event: ChangeEvent) -> None:
        ...
