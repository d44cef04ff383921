"""Loading of the team configuration and people records from JSON."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .models import DirectoryPerson, Team

log = logging.getLogger(__name__)


def load_teams(path: Path | str) -> list[Team]:
    """Read and validate the teams declared in the JSON file at ``path``.

    The file holds either a list of teams or an object with a ``teams`` list.
    Team names must be unique.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("teams", [])

    teams: list[Team] = []
    seen: set[str] = set()
    for item in data:
        team = Team.model_validate(item)
        if team.name in seen:
            raise ValueError(f"Duplicate team name: {team.name!r}")
        seen.add(team.name)
        teams.append(team)
    return teams


def parse_people(records: Iterable[dict[str, Any]]) -> list[DirectoryPerson]:
    """Turn raw people records into :class:`DirectoryPerson` models.

    Records without a directory id cannot be matched to a remote user and are
    left out.
    """
    people: list[DirectoryPerson] = []
    for record in records:
        if not record.get("slack_id", record.get("directory_id")):
            continue
        people.append(DirectoryPerson.model_validate(record))
    log.debug("Parsed %d people records", len(people))
    return people
