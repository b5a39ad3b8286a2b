"""Changeset detection, status messages and comment reconciling."""

from changeset_bot.services.detector import has_changeset_been_added, is_changeset_file
from changeset_bot.services.messages import get_absent_message, get_approve_message
from changeset_bot.services.reconciler import DEFAULT_BOT_LOGINS, find_bot_comment_id, reconcile

__all__ = [
    "DEFAULT_BOT_LOGINS",
    "find_bot_comment_id",
    "get_absent_message",
    "get_approve_message",
    "has_changeset_been_added",
    "is_changeset_file",
    "reconcile",
]
