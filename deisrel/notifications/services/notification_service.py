"""Service for orchestrating notification sending."""

from deisrel.notifications.domain.value_objects import SlackChannel, SlackMessage
from deisrel.notifications.repositories.implementations import (
    SlackNotificationRepositoryImpl,
)


class NotificationService:
    """Service for orchestrating notification operations."""

    def __init__(self, slack_repository: SlackNotificationRepositoryImpl) -> None:
        """Initialize the notification service.

        Args:
            slack_repository: Repository for sending Slack notifications
        """
        self._slack_repository = slack_repository

    def send_changelog_to_slack(
        self, changelog_text: str, channel_name: str, title: str | None = None
    ) -> SlackChannel:
        """Post a rendered changelog to a Slack channel.

        Args:
            changelog_text: The markdown changelog to send
            channel_name: The name of the Slack channel (without # prefix)
            title: Optional header shown above the changelog

        Returns:
            The channel the changelog was posted to

        Raises:
            ValueError: If the channel name or changelog text is invalid
            RuntimeError: If there's an error sending the message to Slack
        """
        channel = SlackChannel(name=channel_name)
        message = SlackMessage(text=changelog_text, title=title)

        success = self._slack_repository.send_message(channel, message)

        if not success:
            raise RuntimeError("Failed to send message to Slack (API returned failure)")

        return channel
