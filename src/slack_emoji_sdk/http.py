"""HTTP client wrapping httpx with cookie auth, token injection, and envelope unwrapping."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from slack_emoji_sdk.config import ClientConfig
from slack_emoji_sdk.errors import SlackAPIError, SlackTransportError
from slack_emoji_sdk.models.base import SlackResponse

log = logging.getLogger(__name__)

# (filename, content, content type) as accepted by httpx's ``files=``
FilePart = tuple[str, bytes, str]


def build_form(
    fields: Mapping[str, Any],
    *,
    token: str,
    files: Mapping[str, FilePart] | None = None,
) -> list[tuple[str, Any]]:
    """Lay out a multipart body: plain fields, then file parts, then ``token``.

    Plain fields are sent as parts without a filename so the body is
    multipart even when no file is attached.
    """
    parts: list[tuple[str, Any]] = [(name, (None, str(value))) for name, value in fields.items()]
    if files:
        parts.extend(files.items())
    parts.append(("token", (None, token)))
    return parts


class HTTPClient:
    """Async HTTP client for Slack's web API routes."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self.base_url = config.base_url
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"cookie": config.cookie_header},
        )

    async def call(
        self,
        route: str,
        fields: Mapping[str, Any] | None = None,
        *,
        files: Mapping[str, FilePart] | None = None,
    ) -> dict[str, Any]:
        """POST a multipart form to ``route`` and return the decoded envelope.

        Raises :class:`SlackAPIError` when the envelope reports failure and
        :class:`SlackTransportError` when a failed response still names a
        Slack error. Other httpx errors propagate as-is.
        """
        form = build_form(fields or {}, token=self.config.token, files=files)
        log.debug("POST %s", route)

        try:
            response = await self._client.post(f"/{route}", files=form)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            wrapped = SlackTransportError.from_http_error(exc, route=route)
            if wrapped is None:
                log.debug("%s failed: %s", route, exc)
                raise
            log.debug("%s failed with %r: %s", route, wrapped.error, exc)
            raise wrapped from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise SlackAPIError(f"Request failed, got {response.text}", route=route) from exc

        try:
            envelope = SlackResponse.model_validate(data)
        except ValidationError as exc:
            raise SlackAPIError(
                f"Request failed, got {json.dumps(data)}",
                route=route,
                envelope=data if isinstance(data, dict) else None,
            ) from exc
        if envelope.error:
            log.debug("%s returned error %r", route, envelope.error)
            raise SlackAPIError(envelope.error, route=route, envelope=data)
        if not envelope.ok:
            raise SlackAPIError(
                f"Request failed, got {json.dumps(data)}", route=route, envelope=data
            )

        return data

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
