"""SDK exception hierarchy."""

from __future__ import annotations

from typing import Any

import httpx


class SlackError(Exception):
    """Base class for every error raised by the SDK itself."""


class SlackAPIError(SlackError):
    """Raised when a Slack envelope reports failure.

    ``str(exc)`` is the envelope's ``error`` string when one is present.
    Envelopes with a falsy ``ok`` flag and no ``error`` fall back to a
    message embedding the whole serialized body.
    """

    def __init__(
        self,
        message: str,
        *,
        route: str | None = None,
        envelope: dict[str, Any] | None = None,
    ) -> None:
        self.route = route
        self.envelope = envelope if envelope is not None else {}
        super().__init__(message)

    @property
    def error(self) -> str | None:
        error = self.envelope.get("error")
        return error if isinstance(error, str) and error else None


class SlackTransportError(SlackError):
    """Raised when a failed HTTP exchange still carried a Slack error string.

    Wraps the original httpx exception, which is also chained as
    ``__cause__``.
    """

    def __init__(
        self,
        error: str,
        transport_error: httpx.HTTPError,
        *,
        route: str | None = None,
    ) -> None:
        self.error = error
        self.transport_error = transport_error
        self.route = route
        super().__init__(error)

    @property
    def status(self) -> int | None:
        if isinstance(self.transport_error, httpx.HTTPStatusError):
            return self.transport_error.response.status_code
        return None

    @classmethod
    def from_http_error(
        cls, exc: httpx.HTTPError, *, route: str | None = None
    ) -> SlackTransportError | None:
        """Build from an httpx error whose response body names a Slack error.

        Returns None when there is no response or no usable ``error`` field.
        """
        if not isinstance(exc, httpx.HTTPStatusError):
            return None
        try:
            body = exc.response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        error = body.get("error")
        if not error or not isinstance(error, str):
            return None
        return cls(error, exc, route=route)
