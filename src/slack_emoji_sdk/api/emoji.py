"""Emoji API methods."""

from __future__ import annotations

import asyncio
import json
import mimetypes
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Union

from slack_emoji_sdk.models.emoji import EmojiInfoResponse, EmojiListResponse
from slack_emoji_sdk.models.enums import SortBy, SortDirection

if TYPE_CHECKING:
    from slack_emoji_sdk.http import FilePart, HTTPClient

ImageSource = Union[bytes, IO[bytes], str, os.PathLike]

DEFAULT_SORT_BY = SortBy.created
DEFAULT_SORT_DIRECTION = SortDirection.descending
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 100

_DEFAULT_IMAGE_NAME = "image"
_DEFAULT_MIME = "application/octet-stream"


@dataclass(frozen=True)
class EmojiListQuery:
    """Filter, sort and page parameters for ``emoji.adminList``."""

    queries: tuple[str, ...] = ()
    sort_by: SortBy = DEFAULT_SORT_BY
    sort_direction: SortDirection = DEFAULT_SORT_DIRECTION
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        # Accept any iterable of strings (a bare string is one query)
        queries = (self.queries,) if isinstance(self.queries, str) else tuple(self.queries)
        object.__setattr__(self, "queries", queries)
        object.__setattr__(self, "sort_by", SortBy(self.sort_by))
        object.__setattr__(self, "sort_direction", SortDirection(self.sort_direction))
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")

    def to_form(self) -> dict[str, Any]:
        return {
            "queries": json.dumps(list(self.queries)),
            "sort_by": self.sort_by.value,
            "sort_dir": self.sort_direction.value,
            "page": self.page,
            "count": self.limit,
        }


async def _read_image(image: ImageSource) -> FilePart:
    if isinstance(image, (bytes, bytearray)):
        return _DEFAULT_IMAGE_NAME, bytes(image), _DEFAULT_MIME

    if isinstance(image, (str, os.PathLike)):
        p = Path(image)
        data = await asyncio.to_thread(p.read_bytes)
        filename = p.name
    else:
        data = await asyncio.to_thread(image.read)
        filename = Path(getattr(image, "name", None) or _DEFAULT_IMAGE_NAME).name

    mime = mimetypes.guess_type(filename)[0] or _DEFAULT_MIME
    return filename, data, mime


class EmojiAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def remove_emoji(self, name: str) -> None:
        await self._http.call("emoji.remove", {"name": name})

    async def add_emoji(self, name: str, image: ImageSource) -> None:
        """Upload a custom emoji.

        ``image`` is raw bytes, a binary file object, or a path to the file.
        """
        part = await _read_image(image)
        await self._http.call(
            "emoji.add",
            {"name": name, "mode": "data"},
            files={"image": part},
        )

    async def get_emoji_info(self, name: str) -> EmojiInfoResponse:
        data = await self._http.call("emoji.getInfo", {"name": name})
        return EmojiInfoResponse.model_validate(data)

    async def get_emoji_list(
        self, query: EmojiListQuery | None = None, **overrides: Any
    ) -> EmojiListResponse:
        """Fetch a single page of the workspace's custom emoji.

        Keyword overrides (``queries``, ``sort_by``, ``sort_direction``,
        ``page``, ``limit``) are applied on top of ``query``.
        """
        if query is None:
            query = EmojiListQuery()
        if overrides:
            query = replace(query, **overrides)
        data = await self._http.call("emoji.adminList", query.to_form())
        return EmojiListResponse.model_validate(data)
