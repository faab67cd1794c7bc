"""Tests for ChangelogService."""

import copy

import pytest

from conftest import FakeComparisonRepository
from deisrel.changelog.domain.entities import Changelog, Commit
from deisrel.changelog.domain.value_objects import ComparisonRange
from deisrel.changelog.services.changelog_service import ChangelogService
from deisrel.errors import TransportError


def test_generate_buckets_commits_by_kind(fake_repository):
    got = Changelog(old_release="b", new_release="h")

    result = ChangelogService(fake_repository).generate("deis", "controller", got)

    want = Changelog(
        old_release="b",
        new_release="h",
        features=["abc1234 deisrel: new feature!"],
        fixes=["abc2345 deisrel: bugfix!"],
        documentation=["abc3456 deisrel: new docs!"],
        maintenance=["abc4567 deisrel: boring chore"],
    )
    assert result is got
    assert got == want
    assert fake_repository.requests == [
        ComparisonRange(owner="deis", repo="controller", old_ref="b", new_ref="h")
    ]


def test_generate_with_no_relevant_commits():
    repository = FakeComparisonRepository(commits=(Commit(hash="s", message=""),))
    got = Changelog(old_release="b", new_release="h")

    ChangelogService(repository).generate("deis", "r", got)

    assert got == Changelog(old_release="b", new_release="h")
    assert got.is_empty()


def test_generate_propagates_fetch_failure_and_leaves_changelog_untouched(failing_repository):
    got = Changelog(old_release="b", new_release="h", fixes=["0000000 existing: entry"])
    before = copy.deepcopy(got)

    with pytest.raises(TransportError, match="connection refused"):
        ChangelogService(failing_repository).generate("deis", "controller", got)

    assert got == before


def test_generate_rejects_empty_release(fake_repository):
    with pytest.raises(ValueError, match="old_ref"):
        ChangelogService(fake_repository).generate("deis", "controller", Changelog("", "h"))
    assert fake_repository.requests == []


def test_assemble_preserves_commit_order_within_category():
    commits = (
        Commit(hash="1111111aaaa", message="fix(a): first"),
        Commit(hash="2222222bbbb", message="feat(b): feature"),
        Commit(hash="3333333cccc", message="fix(c): second"),
        Commit(hash="4444444dddd", message="WIP"),
        Commit(hash="5555555eeee", message="fix(d): third"),
    )
    changelog = Changelog(old_release="v1", new_release="v2")

    ChangelogService.assemble(commits, changelog)

    assert changelog.fixes == ["1111111 a: first", "3333333 c: second", "5555555 d: third"]
    assert changelog.features == ["2222222 b: feature"]
    assert changelog.documentation == []
    assert changelog.maintenance == []


def test_assemble_is_idempotent_across_fresh_changelogs(scenario_commits):
    first = Changelog(old_release="b", new_release="h")
    second = Changelog(old_release="b", new_release="h")

    ChangelogService.assemble(scenario_commits, first)
    ChangelogService.assemble(scenario_commits, second)

    assert first == second


def test_assemble_empty_sequence_leaves_changelog_empty():
    changelog = Changelog(old_release="b", new_release="h")

    ChangelogService.assemble((), changelog)

    assert changelog.is_empty()
    assert (changelog.old_release, changelog.new_release) == ("b", "h")
