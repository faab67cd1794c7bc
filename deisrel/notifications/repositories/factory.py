"""Factory for creating notification repository instances."""

import os

from deisrel.config import load_env_file
from deisrel.notifications.repositories.implementations import (
    SlackNotificationRepositoryImpl,
)


def create_slack_repository() -> SlackNotificationRepositoryImpl:
    """
    Create a Slack repository from the SLACK_TOKEN environment variable.

    Raises:
        ValueError: If SLACK_TOKEN is not set
    """
    load_env_file()

    slack_token = os.getenv("SLACK_TOKEN")
    if not slack_token:
        raise ValueError(
            "SLACK_TOKEN environment variable is required. "
            "Please set it in a .env file or as an environment variable. "
            "Get your token from https://api.slack.com/apps"
        )
    return SlackNotificationRepositoryImpl(token=slack_token)
