"""Value objects for the notifications domain."""

import re
from dataclasses import dataclass

CHANNEL_NAME_PATTERN = re.compile(r"[a-z0-9_-]+")
MAX_CHANNEL_NAME_LENGTH = 80


@dataclass(frozen=True)
class SlackChannel:
    """Release announcement channel, named without its leading "#"."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Slack channel name cannot be empty")
        if self.name.startswith("#"):
            raise ValueError(
                f"Pass the channel as '{self.name.lstrip('#')}', without the leading '#'"
            )
        if len(self.name) > MAX_CHANNEL_NAME_LENGTH:
            raise ValueError(
                f"Slack channel name '{self.name}' is longer than "
                f"{MAX_CHANNEL_NAME_LENGTH} characters"
            )
        if not CHANNEL_NAME_PATTERN.fullmatch(self.name):
            raise ValueError(
                f"Invalid Slack channel name '{self.name}': use lowercase letters, "
                "digits, '-' and '_' only"
            )

    @property
    def mention(self) -> str:
        return f"#{self.name}"


@dataclass(frozen=True)
class SlackMessage:
    """A changelog message to post to Slack."""

    text: str
    title: str | None = None

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("Message text cannot be empty")
