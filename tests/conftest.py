"""Shared pytest fixtures for deisrel tests."""

from collections.abc import Callable

import httpx
import pytest

from deisrel.changelog.domain.entities import Commit
from deisrel.changelog.domain.value_objects import ComparisonRange
from deisrel.changelog.repositories.implementations import GitHubComparisonRepositoryImpl
from deisrel.changelog.repositories.interfaces import ComparisonRepository
from deisrel.errors import TransportError

TEST_BASE_URL = "https://github.test"


def _commit_payload(sha: str, message: str | None) -> dict:
    commit: dict = {"author": {"name": "n"}}
    if message is not None:
        commit["message"] = message
    return {
        "sha": sha,
        "commit": commit,
        "author": {"login": "l"},
        "committer": {"login": "l"},
        "parents": [{"sha": "s"}],
    }


def compare_payload(commits: list[tuple[str, str | None]]) -> dict:
    """Build a compare response body holding the given (sha, message) commits."""
    return {
        "base_commit": {
            "sha": "s",
            "commit": {
                "author": {"name": "n"},
                "committer": {"name": "n"},
                "message": "m",
                "tree": {"sha": "t"},
            },
            "author": {"login": "n"},
            "committer": {"login": "l"},
            "parents": [{"sha": "s"}],
        },
        "status": "s",
        "ahead_by": 1,
        "behind_by": 2,
        "total_commits": len(commits),
        "commits": [_commit_payload(sha, message) for sha, message in commits],
        "files": [{"filename": "f"}],
    }


SCENARIO_COMMITS = [
    ("abc1234567890", "feat(deisrel): new feature!"),
    ("abc2345678901", "fix(deisrel): bugfix!"),
    ("abc3456789012", "docs(deisrel): new docs!"),
    ("abc4567890123", "chore(deisrel): boring chore"),
]


class FakeComparisonRepository(ComparisonRepository):
    """In-memory comparison repository recording the ranges it was asked for."""

    def __init__(self, commits: tuple[Commit, ...] = (), error: Exception | None = None) -> None:
        self.commits = commits
        self.error = error
        self.requests: list[ComparisonRange] = []

    def fetch_comparison(
        self, owner: str, repo: str, old_ref: str, new_ref: str
    ) -> tuple[Commit, ...]:
        self.requests.append(
            ComparisonRange(owner=owner, repo=repo, old_ref=old_ref, new_ref=new_ref)
        )
        if self.error is not None:
            raise self.error
        return self.commits


@pytest.fixture
def scenario_commits() -> tuple[Commit, ...]:
    """The four conventional commits used across changelog tests."""
    return tuple(Commit(hash=sha, message=message) for sha, message in SCENARIO_COMMITS)


@pytest.fixture
def fake_repository(scenario_commits) -> FakeComparisonRepository:
    return FakeComparisonRepository(commits=scenario_commits)


@pytest.fixture
def failing_repository() -> FakeComparisonRepository:
    return FakeComparisonRepository(error=TransportError("connection refused"))


@pytest.fixture
def make_github_repository():
    """Build a GitHub repository whose HTTP traffic is served by a handler."""
    clients: list[httpx.Client] = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response], token: str | None = None
    ) -> GitHubComparisonRepositoryImpl:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return GitHubComparisonRepositoryImpl(token=token, base_url=TEST_BASE_URL, client=client)

    yield _make

    for client in clients:
        client.close()
