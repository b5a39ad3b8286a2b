"""Webhook server and handlers for GitHub pull_request events.

Entry points: changeset_bot.webhook.handlers.handle_github_event and
changeset_bot.webhook.server.run_webhook_server.
"""
