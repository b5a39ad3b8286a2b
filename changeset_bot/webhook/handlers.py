"""Handle GitHub webhook events (pull request opened and synchronize).

Parses payload and delegates to the changeset status comment reconciler.
"""

import logging
from typing import Any, Dict

from changeset_bot.adapters.base import GitPlatformAdapter
from changeset_bot.adapters.github import GitHubAdapter
from changeset_bot.models import CommentWrite
from changeset_bot.services.reconciler import reconcile
from changeset_bot.webhook.events import HANDLED_ACTIONS, PullRequestEvent


def _adapter_from_config(config: Any, log: logging.Logger) -> GitPlatformAdapter | None:
    token = getattr(config, "github_token_resolved", None)
    if not token:
        log.warning("No GitHub token; cannot post changeset status")
        return None
    return GitHubAdapter(
        token=token,
        api_url=getattr(config.github, "api_url", "https://api.github.com"),
    )


def handle_github_event(
    config: Any,
    event: str,
    payload: Dict[str, Any],
    adapter: GitPlatformAdapter | None = None,
    log: logging.Logger | None = None,
) -> CommentWrite | None:
    """Handle a GitHub webhook event.

    Supported events:
    - pull_request (action=opened|synchronize): post or update the changeset status comment.

    Anything else is ignored. Errors from the reconciler propagate so the
    delivery is reported as failed.
    """
    logger = log or logging.getLogger("changeset_bot.webhook.handlers")

    if event != "pull_request":
        logger.debug("Ignoring %s event", event)
        return None
    action = payload.get("action")
    if action not in HANDLED_ACTIONS:
        logger.debug("Ignoring pull_request action %s", action)
        return None

    pr_event = PullRequestEvent.from_payload(payload)
    if adapter is None:
        adapter = _adapter_from_config(config, logger)
        if adapter is None:
            return None

    return reconcile(
        adapter,
        pr_event,
        known_logins=config.bot.known_logins_set,
        release_prefix=config.bot.release_branch_prefix,
        log=logger,
    )
