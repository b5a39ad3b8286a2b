"""Webhook event schemas for GitHub payloads.

Processed events:

Pull requests:
- opened
- synchronize (new commits pushed to the head branch)
"""

from changeset_bot.webhook.events.pull_request import (
    HANDLED_ACTIONS,
    MalformedEventError,
    PullRequestEvent,
)

__all__ = ["HANDLED_ACTIONS", "MalformedEventError", "PullRequestEvent"]
