"""Value objects for Changelog domain."""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

SHORT_HASH_LENGTH = 7


class CommitKind(str, Enum):
    """Kind of a commit, derived from its conventional commit prefix."""

    FEATURE = "feat"
    FIX = "fix"
    DOCS = "docs"
    CHORE = "chore"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def recognized(cls) -> tuple["CommitKind", ...]:
        """Kinds that map to a changelog category."""
        return (cls.FEATURE, cls.FIX, cls.DOCS, cls.CHORE)


@dataclass(frozen=True)
class ComparisonRange:
    """Range of commits between two references of a hosted repository."""

    owner: str
    repo: str
    old_ref: str
    new_ref: str

    def __post_init__(self) -> None:
        """Validate the range."""
        for name in ("owner", "repo", "old_ref", "new_ref"):
            if not getattr(self, name):
                raise ValueError(f"Comparison {name} cannot be empty")

    @property
    def basehead(self) -> str:
        """Three-dot notation used by the compare endpoint."""
        return f"{self.old_ref}...{self.new_ref}"

    @property
    def compare_path(self) -> str:
        """Path of the compare endpoint, each segment percent-encoded."""
        owner = quote(self.owner, safe="")
        repo = quote(self.repo, safe="")
        # keep "/" in refs such as release/v2, escape "#", "?" and the rest
        old_ref = quote(self.old_ref, safe="/")
        new_ref = quote(self.new_ref, safe="/")
        return f"/repos/{owner}/{repo}/compare/{old_ref}...{new_ref}"


@dataclass(frozen=True)
class ChangelogEntry:
    """A classified commit, ready to be appended to a changelog category."""

    kind: CommitKind
    short_hash: str
    text: str

    def __str__(self) -> str:
        return f"{self.short_hash} {self.text}"
