"""Changelog service for assembling categorized release notes."""

import logging
from collections.abc import Iterable

from deisrel.changelog.domain.entities import Changelog, Commit
from deisrel.changelog.domain.value_objects import CommitKind
from deisrel.changelog.repositories.interfaces import ComparisonRepository
from deisrel.changelog.services.classification_service import format_entry

logger = logging.getLogger(__name__)


class ChangelogService:
    """Service for building changelogs from commit comparisons."""

    def __init__(self, comparison_repository: ComparisonRepository) -> None:
        """
        Initialize ChangelogService.

        Args:
            comparison_repository: Repository used to fetch commit comparisons
        """
        self._comparison_repository = comparison_repository

    def generate(self, owner: str, repo: str, changelog: Changelog) -> Changelog:
        """
        Fetch the commits between the changelog's releases and assemble them.

        Args:
            owner: Owner of the hosted repository
            repo: Name of the hosted repository
            changelog: Changelog with old_release and new_release set

        Returns:
            The same changelog, populated in place

        Raises:
            ValueError: If owner, repo or a release is empty
            TransportError: If the comparison cannot be fetched. The changelog
                is left untouched.
        """
        commits = self._comparison_repository.fetch_comparison(
            owner, repo, changelog.old_release, changelog.new_release
        )
        self.assemble(commits, changelog)
        return changelog

    @staticmethod
    def assemble(commits: Iterable[Commit], changelog: Changelog) -> None:
        """
        Classify commits and append their entries to the changelog.

        Unclassified commits are skipped. Entries keep the order of the commits.

        Args:
            commits: Commits ordered from oldest to newest
            changelog: Changelog to populate in place
        """
        categories = {
            CommitKind.FEATURE: changelog.features,
            CommitKind.FIX: changelog.fixes,
            CommitKind.DOCS: changelog.documentation,
            CommitKind.CHORE: changelog.maintenance,
        }
        for commit in commits:
            entry = format_entry(commit)
            if entry is None:
                logger.debug("Skipping unclassified commit %s", commit.hash[:7])
                continue
            categories[entry.kind].append(str(entry))
