from pydantic import Field

from slack_emoji_sdk.models.base import SlackModel, SlackResponse


class Emoji(SlackModel):
    name: str
    is_alias: bool = False
    alias_for: str | None = None
    url: str | None = None
    created: int | None = None
    team_id: str | None = None
    user_id: str | None = None
    user_display_name: str | None = None
    avatar_hash: str | None = None
    can_delete: bool = False
    is_bad: bool = False
    synonyms: list[str] = []


class EmojiInfoResponse(SlackResponse):
    name: str | None = None
    is_alias: bool = False
    alias_for: str | None = None
    url: str | None = None
    team_id: str | None = None
    user_id: str | None = None
    user_display_name: str | None = None
    can_delete: bool = False


class Paging(SlackModel):
    count: int = 0
    total: int = 0
    page: int = 1
    pages: int = 0


class EmojiListResponse(SlackResponse):
    emoji: list[Emoji] = []
    paging: Paging = Field(default_factory=Paging)
