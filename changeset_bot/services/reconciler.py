"""
Reconcile the changeset status comment on a pull request.

For each opened/synchronize event the bot lists the PR's changed files and,
on synchronize only, looks up its own earlier status comment. Both reads run
concurrently. The rendered message then updates the found comment in place
or is posted as a new comment: exactly one write per event.

An opened PR is assumed to have no bot comment yet, so the lookup is skipped
there to save a request. Two synchronize deliveries racing each other can
still both create a comment; nothing serializes them.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import AbstractSet, Iterable

from changeset_bot.adapters.base import GitPlatformAdapter
from changeset_bot.models import Comment, CommentWrite
from changeset_bot.services.detector import has_changeset_been_added
from changeset_bot.services.messages import get_absent_message, get_approve_message
from changeset_bot.webhook.events import PullRequestEvent

DEFAULT_BOT_LOGINS: frozenset[str] = frozenset({"changeset-bot[bot]", "changesets-test-bot[bot]"})
DEFAULT_RELEASE_PREFIX = "release"


def find_bot_comment_id(comments: Iterable[Comment], known_logins: AbstractSet[str]) -> int | None:
    """Return id of the first comment written by one of the bot logins."""
    for comment in comments:
        if comment.author in known_logins:
            return comment.id
    return None


def _lookup_comment_id(
    adapter: GitPlatformAdapter,
    event: PullRequestEvent,
    known_logins: AbstractSet[str],
) -> int | None:
    comments = adapter.get_issue_comments(event.full_name, event.number)
    return find_bot_comment_id(comments, known_logins)


def _detect_changeset(adapter: GitPlatformAdapter, event: PullRequestEvent) -> bool:
    files = adapter.list_pr_files(event.full_name, event.number)
    return has_changeset_been_added(files)


def reconcile(
    adapter: GitPlatformAdapter,
    event: PullRequestEvent,
    known_logins: AbstractSet[str] = DEFAULT_BOT_LOGINS,
    release_prefix: str = DEFAULT_RELEASE_PREFIX,
    log: logging.Logger | None = None,
) -> CommentWrite | None:
    """
    Post or update the changeset status comment for one PR event.

    Returns the write performed, or None when the head branch is a release
    branch (no reads, no writes). Any adapter error is logged and re-raised.
    """
    logger = log or logging.getLogger("changeset_bot.services.reconciler")

    if event.head_ref.startswith(release_prefix):
        logger.info("PR #%s: head branch %s is a release branch, skipping", event.number, event.head_ref)
        return None

    try:
        with ThreadPoolExecutor(max_workers=2) as pool:
            comment_future = (
                pool.submit(_lookup_comment_id, adapter, event, known_logins)
                if event.action == "synchronize"
                else None
            )
            changeset_future = pool.submit(_detect_changeset, adapter, event)
            has_changeset = changeset_future.result()
            comment_id = comment_future.result() if comment_future is not None else None

        body = get_approve_message(event.head_sha) if has_changeset else get_absent_message(event.head_sha)

        if comment_id is not None:
            adapter.update_comment(event.full_name, comment_id, body)
            logger.info(
                "PR #%s: updated status comment %s (changeset=%s)",
                event.number,
                comment_id,
                has_changeset,
            )
            return CommentWrite(action="updated", comment_id=comment_id, body=body, has_changeset=has_changeset)

        comment = adapter.create_comment(event.full_name, event.number, body)
        logger.info(
            "PR #%s: created status comment %s (changeset=%s)",
            event.number,
            comment.id,
            has_changeset,
        )
        return CommentWrite(action="created", comment_id=comment.id, body=body, has_changeset=has_changeset)
    except Exception:
        logger.exception("PR #%s: failed to reconcile changeset status comment", event.number)
        raise
