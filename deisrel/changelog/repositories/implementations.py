"""Concrete implementation of commit comparison using the GitHub REST API."""

import logging
from typing import Any

import httpx

from deisrel.changelog.domain.entities import Commit
from deisrel.changelog.domain.value_objects import ComparisonRange
from deisrel.changelog.repositories.interfaces import ComparisonRepository
from deisrel.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


class GitHubComparisonRepositoryImpl(ComparisonRepository):
    """Comparison repository backed by the GitHub "compare two commits" endpoint."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the repository.

        Args:
            token: Optional GitHub token sent as a bearer token
            base_url: Base URL of the GitHub API
            timeout: Request timeout in seconds
            client: Optional pre-configured httpx client. When given, the caller
                    owns it and close() leaves it open.
        """
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout, connect=10.0))

    def __enter__(self) -> "GitHubComparisonRepositoryImpl":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this repository created it."""
        if self._owns_client:
            self._client.close()

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with authentication."""
        headers = {"Accept": "application/vnd.github.v3+json", "User-Agent": "deisrel"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

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
            TransportError: On network failure, non-2xx status or malformed body
        """
        comparison_range = ComparisonRange(
            owner=owner, repo=repo, old_ref=old_ref, new_ref=new_ref
        )
        url = f"{self._base_url}{comparison_range.compare_path}"
        logger.debug("GET %s", url)

        try:
            response = self._client.get(url, headers=self._get_headers())
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to reach GitHub API at {url}: {e}") from e

        if response.status_code >= 400:
            raise TransportError(
                f"GitHub API error ({response.status_code}) comparing "
                f"{comparison_range.basehead} in {comparison_range.owner}/{comparison_range.repo}: "
                f"{self._error_message(response)}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(f"Malformed response body from {url}") from e

        commits = self._parse_commits(payload)
        logger.debug("Fetched %d commits for %s", len(commits), comparison_range.basehead)
        return commits

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract the API error message, falling back to the reason phrase."""
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase or "unknown error"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.reason_phrase or "unknown error"

    @staticmethod
    def _parse_commits(payload: Any) -> tuple[Commit, ...]:
        """Convert the compare payload into Commit entities."""
        if not isinstance(payload, dict) or not isinstance(payload.get("commits"), list):
            raise TransportError("Malformed response body: missing 'commits' array")

        commits: list[Commit] = []
        for item in payload["commits"]:
            if not isinstance(item, dict) or not isinstance(item.get("sha"), str):
                raise TransportError("Malformed response body: commit without 'sha'")
            details = item.get("commit") or {}
            message = details.get("message") if isinstance(details, dict) else None
            commits.append(Commit(hash=item["sha"], message=message or ""))

        return tuple(commits)
