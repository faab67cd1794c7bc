"""Concrete implementations of notification repositories."""

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from deisrel.notifications.domain.value_objects import SlackChannel, SlackMessage

# Slack rejects section blocks above 3000 characters
MAX_BLOCK_SIZE = 2900


class SlackNotificationRepositoryImpl:
    """Implementation of Slack notification repository using Slack SDK."""

    def __init__(self, token: str, client: WebClient | None = None) -> None:
        """Initialize the Slack client with token.

        Args:
            token: The Slack Bot User OAuth Token
            client: Optional pre-built WebClient

        Raises:
            ValueError: If token is empty or None
        """
        if not token:
            raise ValueError(
                "Slack token is required. "
                "Get your token from https://api.slack.com/apps"
            )

        self._client = client or WebClient(token=token)

    def send_message(self, channel: SlackChannel, message: SlackMessage) -> bool:
        """Post a message to a Slack channel.

        Args:
            channel: The Slack channel to post to
            message: The message to post

        Returns:
            True if Slack accepted the message, False otherwise

        Raises:
            RuntimeError: If there's an error communicating with Slack
        """
        blocks: list[dict] = []
        if message.title:
            blocks.append(
                {
                    "type": "header",
                    "text": {"type": "plain_text", "text": message.title, "emoji": True},
                }
            )
        for chunk in split_text(to_mrkdwn(message.text), MAX_BLOCK_SIZE):
            blocks.append({"type": "section", "text": {"type": "mrkdwn", "text": chunk}})

        try:
            response = self._client.chat_postMessage(
                channel=channel.name,
                blocks=blocks,
                text=message.title or "deisrel changelog",
            )
        except SlackApiError as e:
            error_msg = e.response.get("error", "unknown error")
            if error_msg == "channel_not_found":
                raise RuntimeError(
                    f"Channel '{channel.name}' not found. "
                    "Make sure the bot is invited to the channel."
                ) from e
            elif error_msg == "not_in_channel":
                raise RuntimeError(
                    f"Bot is not a member of channel '{channel.name}'. "
                    "Please invite the bot to the channel first."
                ) from e
            elif error_msg == "invalid_auth":
                raise RuntimeError(
                    "Invalid Slack token. Please check your token configuration."
                ) from e
            raise RuntimeError(f"Slack API error: {error_msg}") from e

        return bool(response.get("ok", False))


def to_mrkdwn(markdown: str) -> str:
    """Turn changelog Markdown headings into Slack bold lines."""
    converted = []
    for line in markdown.split("\n"):
        stripped = line.lstrip("#")
        if stripped != line and stripped.startswith(" "):
            converted.append(f"*{stripped.strip()}*")
        else:
            converted.append(line)
    return "\n".join(converted)


def split_text(text: str, max_size: int) -> list[str]:
    """Split text on line boundaries into chunks of at most max_size characters.

    Lines longer than max_size are hard-wrapped. Empty lines are kept, so
    joining the chunks with newlines restores any text without long lines.
    """
    chunks: list[str] = []
    current: list[str] = []
    size = 0
    for line in text.split("\n"):
        pieces = [line[i : i + max_size] for i in range(0, len(line), max_size)] or [""]
        for piece in pieces:
            added = len(piece) + (1 if current else 0)
            if current and size + added > max_size:
                chunks.append("\n".join(current))
                current, size, added = [], 0, len(piece)
            current.append(piece)
            size += added
    if current:
        chunks.append("\n".join(current))
    return chunks
