"""Factory for creating comparison repository instances."""

import os

from deisrel.changelog.repositories.implementations import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    GitHubComparisonRepositoryImpl,
)
from deisrel.config import load_env_file


def create_comparison_repository() -> GitHubComparisonRepositoryImpl:
    """
    Create a GitHub comparison repository based on configuration.

    Reads GITHUB_TOKEN, GITHUB_API_URL and GITHUB_TIMEOUT from the environment.

    Returns:
        Configured GitHub comparison repository

    Raises:
        ValueError: If GITHUB_TIMEOUT is not a positive number
    """
    load_env_file()

    raw_timeout = os.getenv("GITHUB_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError as e:
        raise ValueError(f"Invalid GITHUB_TIMEOUT: {raw_timeout}") from e
    if timeout <= 0:
        raise ValueError(f"Invalid GITHUB_TIMEOUT: {raw_timeout}. Must be positive")

    return GitHubComparisonRepositoryImpl(
        token=os.getenv("GITHUB_TOKEN") or None,
        base_url=os.getenv("GITHUB_API_URL", DEFAULT_BASE_URL),
        timeout=timeout,
    )


def default_owner() -> str:
    """Return the default repository owner from DEISREL_GITHUB_OWNER."""
    load_env_file()
    return os.getenv("DEISREL_GITHUB_OWNER", "deis")
