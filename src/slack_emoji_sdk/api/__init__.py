"""API groups, one per family of Slack web API routes."""
