"""Repository interfaces for commit comparison operations."""

from abc import ABC, abstractmethod

from deisrel.changelog.domain.entities import Commit


class ComparisonRepository(ABC):
    """Interface for retrieving the commits between two references."""

    @abstractmethod
    def fetch_comparison(
        self, owner: str, repo: str, old_ref: str, new_ref: str
    ) -> tuple[Commit, ...]:
        """
        List commits between two references.

        Args:
            owner: Owner of the hosted repository
            repo: Name of the hosted repository
            old_ref: Older reference (tag, branch or commit)
            new_ref: Newer reference (tag, branch or commit)

        Returns:
            Tuple of commits ordered from oldest to newest

        Raises:
            ValueError: If any argument is empty
            TransportError: If the remote call cannot complete
        """
        ...
