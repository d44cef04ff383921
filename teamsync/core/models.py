"""Data models for teamsync's core entities.

The models are implemented using :mod:`pydantic` so that raw records coming
from the team configuration, the people directory and the remote group API
are validated once at ingestion. Usernames are normalised at the same point so
that lookups never need to care about casing or profile URLs.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

_PROFILE_PREFIXES = ("https://github.com/", "http://github.com/", "github.com/")


def normalize_username(value: str) -> str:
    """Return the canonical form of an external ``value`` username.

    Surrounding whitespace, a profile URL prefix and trailing slashes are
    removed and the result is lower-cased.
    """
    username = value.strip()
    for prefix in _PROFILE_PREFIXES:
        if username.lower().startswith(prefix):
            username = username[len(prefix):]
            break
    return username.rstrip("/").lower()


class Team(BaseModel):
    """A team as declared in the configuration.

    Attributes
    ----------
    name:
        Unique key of the team.
    display_name:
        Optional human label. Falls back to ``name``.
    group_handle:
        ``True`` uses ``name`` as the remote group handle, a string overrides
        it and ``None``/``False`` means the team has no remote group.
    maintainers, members:
        Usernames in the external identity system. Their union is the desired
        membership.

    """

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str | None = Field(
        default=None, validation_alias=AliasChoices("display_name", "displayName")
    )
    group_handle: bool | str | None = Field(
        default=None,
        validation_alias=AliasChoices("group_handle", "groupHandle", "slack"),
    )
    maintainers: frozenset[str] = frozenset()
    members: frozenset[str] = frozenset()

    def handle(self) -> str | None:
        """Resolve the remote group handle, or ``None`` if the team opts out."""
        if self.group_handle is True:
            return self.name
        if isinstance(self.group_handle, str) and self.group_handle:
            return self.group_handle
        return None

    def desired_display_name(self) -> str:
        return self.display_name or self.name

    def usernames(self) -> set[str]:
        """Normalised union of maintainers and members."""
        return {normalize_username(u) for u in self.maintainers | self.members}


class DirectoryPerson(BaseModel):
    """A person from the external directory mapping identities to user ids."""

    model_config = ConfigDict(frozen=True)

    directory_id: str = Field(
        validation_alias=AliasChoices("directory_id", "slack_id")
    )
    external_username: str = Field(
        validation_alias=AliasChoices("external_username", "github")
    )
    name: str | None = None
    email: str | None = None
    category: str | None = None

    @field_validator("external_username")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_username(value)


class RemoteGroup(BaseModel):
    """A user group in the remote group-management system.

    ``display_name`` and ``member_ids`` are updated in place after this
    process mutates the group so that the rest of the run sees its own writes.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    handle: str
    display_name: str = Field(alias="name")
    member_ids: set[str] = Field(default_factory=set, alias="users")
    is_external: bool = False
    date_delete: int = 0
