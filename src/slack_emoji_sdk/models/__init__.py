"""SDK response models."""

from slack_emoji_sdk.models.base import SlackModel, SlackResponse
from slack_emoji_sdk.models.enums import SortBy, SortDirection
from slack_emoji_sdk.models.emoji import (
    Emoji,
    EmojiInfoResponse,
    EmojiListResponse,
    Paging,
)

__all__ = [
    "Emoji",
    "EmojiInfoResponse",
    "EmojiListResponse",
    "Paging",
    "SlackModel",
    "SlackResponse",
    "SortBy",
    "SortDirection",
]
