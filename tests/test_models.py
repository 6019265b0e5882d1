"""Tests for SDK response models."""

from slack_emoji_sdk.models.base import SlackResponse
from slack_emoji_sdk.models.emoji import Emoji, EmojiInfoResponse, EmojiListResponse, Paging
from slack_emoji_sdk.models.enums import SortBy, SortDirection


class TestEnvelope:
    def test_defaults(self):
        r = SlackResponse.model_validate({})
        assert r.ok is False
        assert r.error is None

    def test_keeps_unknown_fields(self):
        r = SlackResponse.model_validate({"ok": True, "warning": "superfluous_charset"})
        assert r.model_extra == {"warning": "superfluous_charset"}


class TestEmojiModels:
    def test_emoji_minimal(self):
        e = Emoji.model_validate({"name": "parrot"})
        assert e.is_alias is False
        assert e.synonyms == []

    def test_emoji_alias_flag_from_int(self):
        e = Emoji.model_validate({"name": "pp", "is_alias": 1, "alias_for": "parrot"})
        assert e.is_alias is True
        assert e.alias_for == "parrot"

    def test_info_extends_envelope(self):
        r = EmojiInfoResponse.model_validate({"ok": True, "name": "parrot", "can_delete": True})
        assert isinstance(r, SlackResponse)
        assert r.ok is True
        assert r.can_delete is True

    def test_list_defaults_are_independent(self):
        a = EmojiListResponse.model_validate({"ok": True})
        b = EmojiListResponse.model_validate({"ok": True})
        assert a.emoji == []
        assert a.paging == Paging()
        assert a.paging is not b.paging

    def test_emoji_null_fields(self):
        e = Emoji.model_validate({
            "name": "p",
            "alias_for": None,
            "avatar_hash": None,
            "user_display_name": None,
            "created": None,
        })
        assert e.name == "p"
        assert e.alias_for is None
        assert e.avatar_hash is None
        assert e.user_display_name is None
        assert e.created is None

    def test_info_partial_payload(self):
        r = EmojiInfoResponse.model_validate({"ok": True, "url": "u"})
        assert r.name is None
        assert r.url == "u"
        assert r.team_id is None


class TestEnums:
    def test_wire_codes(self):
        assert SortBy.name.value == "name"
        assert SortBy.created.value == "created"
        assert SortDirection.ascending.value == "asc"
        assert SortDirection.descending.value == "desc"
