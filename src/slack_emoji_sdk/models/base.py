from pydantic import BaseModel, ConfigDict


class SlackModel(BaseModel):
    """Base for every payload returned by the Slack web API.

    Unknown fields are kept since the API is undocumented and its
    responses change without notice.
    """

    model_config = ConfigDict(extra="allow")


class SlackResponse(SlackModel):
    """The ``{ok, error}`` envelope every route's response extends."""

    ok: bool = False
    error: str | None = None
