"""Workspace and credential configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)

TOKEN_PREFIX = "xoxc-"
COOKIE_PREFIX = "xoxd-"

ENV_WORKSPACE = "SLACK_WORKSPACE"
ENV_TOKEN = "SLACK_XOXC_TOKEN"
ENV_COOKIE = "SLACK_D_COOKIE"

_ENV_HINTS = {
    ENV_WORKSPACE: "the subdomain of <workspace>.slack.com",
    ENV_TOKEN: "run `boot_data.api_token` in the browser dev console on an authenticated page",
    ENV_COOKIE: "copy the `d` cookie from the browser cookie store",
}


class ClientConfig(BaseModel):
    """Credentials for one workspace, fixed once a client is built.

    ``token`` is the web client's API token (``xoxc-...``) and ``cookie``
    the value of the ``d`` session cookie (``xoxd-...``).
    """

    model_config = ConfigDict(frozen=True)

    workspace: str = Field(min_length=1)
    token: str = Field(min_length=1, repr=False)
    cookie: str = Field(min_length=1, repr=False)

    @field_validator("workspace")
    @classmethod
    def _strip_workspace(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("workspace must not be blank")
        return value

    @field_validator("token")
    @classmethod
    def _check_token(cls, value: str) -> str:
        if not value.startswith(TOKEN_PREFIX):
            log.warning("API token does not start with %r, requests will likely fail", TOKEN_PREFIX)
        return value

    @field_validator("cookie")
    @classmethod
    def _check_cookie(cls, value: str) -> str:
        if not value.startswith(COOKIE_PREFIX):
            log.warning("Cookie token does not start with %r, requests will likely fail", COOKIE_PREFIX)
        return value

    @property
    def base_url(self) -> str:
        return f"https://{self.workspace}.slack.com/api"

    @property
    def cookie_header(self) -> str:
        return f"d={self.cookie};"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build from ``SLACK_WORKSPACE``, ``SLACK_XOXC_TOKEN`` and ``SLACK_D_COOKIE``."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for name in (ENV_WORKSPACE, ENV_TOKEN, ENV_COOKIE):
            value = env.get(name, "")
            if not value:
                raise ValueError(
                    f"{name} environment variable is required ({_ENV_HINTS[name]})."
                )
            values[name] = value
        return cls(
            workspace=values[ENV_WORKSPACE],
            token=values[ENV_TOKEN],
            cookie=values[ENV_COOKIE],
        )
