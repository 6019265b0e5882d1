"""Shared test fixtures for SDK tests."""

from __future__ import annotations

import re
from typing import Any

import httpx
import pytest

from slack_emoji_sdk.config import ClientConfig
from slack_emoji_sdk.http import HTTPClient

TOKEN = "xoxc-test-token"
COOKIE = "xoxd-test-cookie"

_NAME_RE = re.compile(rb'name="([^"]*)"')
_FILENAME_RE = re.compile(rb'filename="([^"]*)"')


def parse_multipart(request: httpx.Request) -> dict[str, dict[str, Any]]:
    """Split a multipart request body into ``{name: {"value", "filename", "content_type"}}``."""
    content_type = request.headers["content-type"]
    assert content_type.startswith("multipart/form-data"), content_type
    boundary = content_type.split("boundary=", 1)[1].encode()
    fields: dict[str, dict[str, Any]] = {}
    for chunk in request.content.split(b"--" + boundary):
        chunk = chunk.strip(b"\r\n")
        if not chunk or chunk == b"--":
            continue
        head, _, body = chunk.partition(b"\r\n\r\n")
        name = _NAME_RE.search(head).group(1).decode()
        filename = _FILENAME_RE.search(head)
        ctype = None
        for line in head.split(b"\r\n"):
            if line.lower().startswith(b"content-type:"):
                ctype = line.split(b":", 1)[1].strip().decode()
        fields[name] = {
            "value": body,
            "filename": filename.group(1).decode() if filename else None,
            "content_type": ctype,
        }
    return fields


def form_values(call: dict[str, Any]) -> dict[str, str]:
    """Plain (non-file) form fields of a recorded call, decoded to text."""
    return {
        name: part["value"].decode()
        for name, part in call["form"].items()
        if part["filename"] is None
    }


@pytest.fixture
def config():
    return ClientConfig(workspace="testteam", token=TOKEN, cookie=COOKIE)


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={"ok": True})

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            await request.aread()
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "headers": dict(request.headers),
                "form": parse_multipart(request),
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(config, mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient(config)
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.AsyncClient(
        base_url=config.base_url,
        headers={"cookie": config.cookie_header},
        transport=transport,
    )
    return client, transport, calls
