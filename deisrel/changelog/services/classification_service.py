"""Conventional commit classification."""

from deisrel.changelog.domain.entities import Commit
from deisrel.changelog.domain.value_objects import (
    SHORT_HASH_LENGTH,
    ChangelogEntry,
    CommitKind,
)


def first_line(message: str) -> str:
    """Return the subject line of a commit message."""
    return message.split("\n", 1)[0].rstrip("\r")


def classify_message(subject: str) -> CommitKind:
    """
    Classify a commit subject by its conventional commit keyword.

    The subject must start with the exact keyword immediately followed by "(",
    e.g. "feat(api): ...". Anything else is UNCLASSIFIED.

    Args:
        subject: First line of a commit message

    Returns:
        The matching CommitKind
    """
    for kind in CommitKind.recognized():
        if subject.startswith(f"{kind.value}("):
            return kind
    return CommitKind.UNCLASSIFIED


def format_entry(commit: Commit) -> ChangelogEntry | None:
    """
    Build the changelog entry for a commit.

    "feat(deisrel): new feature!" becomes "deisrel: new feature!": the keyword,
    its opening parenthesis and the first closing parenthesis are dropped while
    the scope is kept.

    Args:
        commit: Commit to format

    Returns:
        The entry, or None if the commit is not classified
    """
    subject = first_line(commit.message)
    kind = classify_message(subject)
    if kind is CommitKind.UNCLASSIFIED:
        return None

    text = subject[len(kind.value) + 1 :].replace(")", "", 1)
    return ChangelogEntry(kind=kind, short_hash=commit.hash[:SHORT_HASH_LENGTH], text=text)
