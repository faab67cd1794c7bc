"""Changelog domain entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Commit:
    """Commit entity."""

    hash: str
    message: str


@dataclass
class Changelog:
    """Changelog between two releases, populated in place by ChangelogService."""

    old_release: str
    new_release: str
    features: list[str] = field(default_factory=list)
    fixes: list[str] = field(default_factory=list)
    documentation: list[str] = field(default_factory=list)
    maintenance: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True if no category holds an entry."""
        return not (self.features or self.fixes or self.documentation or self.maintenance)
