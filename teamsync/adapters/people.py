"""Directory sources reading the ``people.json`` records.

:class:`GitHubPeopleSource` fetches the file through the GitHub contents API
and :class:`FilePeopleSource` reads a local copy, which is handy for dry runs.
"""

from __future__ import annotations

import base64
import json
from pathlib import Path
from typing import Any

import httpx

from ..core.models import DirectoryPerson
from ..core.storage import parse_people
from .base import DirectorySource


class GitHubPeopleSource(DirectorySource):
    """Load people from a JSON file stored in a GitHub repository."""

    api_base = "https://api.github.com"

    def __init__(
        self,
        owner: str,
        repo: str,
        path: str = "people.json",
        ref: str = "main",
        token: str = "",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.path = path
        self.ref = ref
        self.token = token
        self.client = client or httpx.AsyncClient()

    async def load_all_persons(self) -> list[DirectoryPerson]:
        """Fetch and decode the people file.

        Raises :class:`httpx.HTTPStatusError` on a non-2xx answer and
        :class:`ValueError` when the content is not valid JSON.
        """
        url = f"{self.api_base}/repos/{self.owner}/{self.repo}/contents/{self.path}"
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = await self.client.get(url, params={"ref": self.ref}, headers=headers)
        response.raise_for_status()
        data: dict[str, Any] = response.json()
        content = base64.b64decode(data["content"]).decode("utf-8")
        return parse_people(json.loads(content))


class FilePeopleSource(DirectorySource):
    """Load people from a JSON file on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    async def load_all_persons(self) -> list[DirectoryPerson]:
        return parse_people(json.loads(self.path.read_text(encoding="utf-8")))
