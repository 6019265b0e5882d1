"""Slack emoji SDK — async client for Slack's web emoji routes."""

from slack_emoji_sdk.client import Client
from slack_emoji_sdk.config import ClientConfig
from slack_emoji_sdk.api.emoji import EmojiAPI, EmojiListQuery
from slack_emoji_sdk.errors import SlackAPIError, SlackError, SlackTransportError
from slack_emoji_sdk.models.enums import SortBy, SortDirection

__all__ = [
    "Client",
    "ClientConfig",
    "EmojiAPI",
    "EmojiListQuery",
    "SlackAPIError",
    "SlackError",
    "SlackTransportError",
    "SortBy",
    "SortDirection",
]
