"""Test configuration: package imports and in-memory fakes of the sources."""

import itertools
import os
import sys

import pytest

# Make ``teamsync`` importable when the tests run from a plain checkout.
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from teamsync.adapters.base import DirectorySource, GroupSource  # noqa: E402
from teamsync.core.models import DirectoryPerson, RemoteGroup  # noqa: E402


class FakeDirectory(DirectorySource):
    """Directory backed by a ``{username: directory_id}`` mapping."""

    def __init__(self, people=None, error=None):
        self.people = dict(people or {})
        self.error = error
        self.loads = 0

    async def load_all_persons(self):
        self.loads += 1
        if self.error is not None:
            raise self.error
        return [
            DirectoryPerson(directory_id=i, external_username=u) for u, i in self.people.items()
        ]


class FakeGroups(GroupSource):
    """Group system kept in memory, recording every call made to it."""

    def __init__(self, groups=(), list_error=None, fail_on=()):
        self.groups = {g.id: g.model_copy(deep=True) for g in groups}
        self.list_error = list_error
        self.fail_on = set(fail_on)
        self.calls = []
        self._ids = itertools.count(100)

    def _check(self, operation):
        if operation in self.fail_on:
            raise RuntimeError(f"{operation} exploded")

    async def list_groups(self):
        self.calls.append(("list",))
        if self.list_error is not None:
            raise self.list_error
        return [g.model_copy(deep=True) for g in self.groups.values()]

    async def create_group(self, handle, display_name):
        self.calls.append(("create", handle, display_name))
        self._check("create")
        group = RemoteGroup(id=f"G{next(self._ids)}", handle=handle, display_name=display_name)
        self.groups[group.id] = group
        return group.model_copy(deep=True)

    async def rename_group(self, group_id, display_name):
        self.calls.append(("rename", group_id, display_name))
        self._check("rename")
        self.groups[group_id].display_name = display_name

    async def set_members(self, group_id, member_ids):
        member_ids = list(member_ids)
        self.calls.append(("set_members", group_id, member_ids))
        self._check("set_members")
        self.groups[group_id].member_ids = set(member_ids)

    @property
    def mutations(self):
        return [c for c in self.calls if c[0] != "list"]


@pytest.fixture
def fake_directory():
    return FakeDirectory


@pytest.fixture
def fake_groups():
    return FakeGroups
