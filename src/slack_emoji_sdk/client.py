"""High-level Slack emoji client composing configuration, HTTP, and API groups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from slack_emoji_sdk.api.emoji import EmojiAPI
from slack_emoji_sdk.config import ClientConfig
from slack_emoji_sdk.http import HTTPClient


class Client:
    """Top-level SDK client.

    Usage::

        async with Client("myteam", "xoxc-...", "xoxd-...") as client:
            page = await client.emoji.get_emoji_list(sort_by=SortBy.name)
            await client.emoji.add_emoji("party_parrot", "parrot.gif")
    """

    def __init__(
        self,
        workspace: str | None = None,
        token: str | None = None,
        cookie: str | None = None,
        *,
        config: ClientConfig | None = None,
    ) -> None:
        if config is None:
            config = ClientConfig(workspace=workspace, token=token, cookie=cookie)
        elif workspace is not None or token is not None or cookie is not None:
            raise TypeError("pass either config or workspace/token/cookie, not both")
        self.config = config
        self.http = HTTPClient(config)
        self._emoji: EmojiAPI | None = None

    @classmethod
    def from_config(cls, config: ClientConfig) -> Client:
        return cls(config=config)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Client:
        """Build from ``SLACK_WORKSPACE``, ``SLACK_XOXC_TOKEN`` and ``SLACK_D_COOKIE``."""
        return cls.from_config(ClientConfig.from_env(environ))

    @property
    def emoji(self) -> EmojiAPI:
        if self._emoji is None:
            self._emoji = EmojiAPI(self.http)
        return self._emoji

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
