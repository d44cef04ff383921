import logging

import pytest

from teamsync.core.events import GroupCreated, GroupRenamed, MembersAdded, MembersRemoved
from teamsync.report import ChangeReporter, describe, english_comma_join


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        ([], ""),
        (["alice"], "alice"),
        (["alice", "bob"], "alice and bob"),
        (["alice", "bob", "carol"], "alice, bob and carol"),
        (["a", "b", "c", "d"], "a, b, c and d"),
    ],
)
def test_english_comma_join(items, expected):
    assert english_comma_join(items) == expected


def test_describe_events():
    assert describe(GroupCreated("infra", "Infra")) == (
        "Creating user group with handle `infra` as it did not exist"
    )
    assert describe(GroupRenamed("infra", "old", "new")) == (
        "Updating user group name for `infra` from `old` to `new`"
    )
    assert describe(MembersAdded("infra", ("alice", "bob"))) == (
        "Adding `alice and bob` to user group `infra`"
    )
    assert describe(MembersRemoved("infra", ("U404",))) == (
        "Evicting `U404` out of user group `infra`"
    )


def test_reporter_logs_and_renders(caplog):
    reporter = ChangeReporter(dry_run=True)
    with caplog.at_level(logging.INFO, logger="teamsync"):
        reporter.emit(MembersAdded("infra", ("bob",)))
        reporter.add_failure("slack", "docs", RuntimeError("rate limited"))

    assert "[dry run] Adding `bob` to user group `infra`" in caplog.text
    assert "failed to reconcile team docs: rate limited" in caplog.text
    assert reporter.render().splitlines() == [
        "Changes that would be applied:",
        "- Adding `bob` to user group `infra`",
        "- :x: `docs` (slack): rate limited",
    ]


def test_reporter_without_changes():
    assert ChangeReporter().render() == "No changes."
