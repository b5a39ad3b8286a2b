"""Minimal webhook HTTP server for GitHub events.

Serves health check and the webhook path. Deliveries are verified with
X-Hub-Signature-256 when a webhook secret is configured.
"""

import hashlib
import hmac
import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import parse_qs

from changeset_bot.config import AppConfig
from changeset_bot.webhook.handlers import handle_github_event

LOG = logging.getLogger("changeset_bot.webhook")


def verify_signature(secret: str, body: bytes, signature_header: str) -> bool:
    """Check X-Hub-Signature-256 (sha256=<hex hmac of body>)."""
    if not signature_header.startswith("sha256="):
        return False
    expected = "sha256=" + hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature_header)


class WebhookHandler(BaseHTTPRequestHandler):
    """Handle GET /health and POST /webhook/github."""

    config: AppConfig

    def do_GET(self) -> None:
        if self.path == "/health" or self.path == "/":
            self._send_json(200, {"status": "ok", "service": "changeset-bot"})
            return
        self.send_response(404)
        self.end_headers()

    def do_POST(self) -> None:
        if self.path == self.config.github.webhook_path:
            self._handle_github_webhook()
            return
        self.send_response(404)
        self.end_headers()

    def _send_json(self, status: int, data: dict) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def _parse_webhook_body(self, body: bytes) -> dict:
        """Parse webhook body as JSON.

        Supports raw JSON and application/x-www-form-urlencoded (payload=...).
        """
        if not body:
            return {}
        content_type = self.headers.get("Content-Type", "")
        if "application/x-www-form-urlencoded" in content_type:
            parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
            raw = (parsed.get("payload") or [None])[0]
            if raw is None:
                return {}
            return json.loads(raw)
        return json.loads(body)

    def _handle_github_webhook(self) -> None:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length) if length else b""

        secret = self.config.webhook_secret_resolved
        if secret and not verify_signature(secret, body, self.headers.get("X-Hub-Signature-256", "")):
            LOG.warning("Rejected webhook delivery %s: bad signature", self.headers.get("X-GitHub-Delivery", ""))
            self._send_json(401, {"error": "invalid signature"})
            return

        try:
            payload = self._parse_webhook_body(body)
        except ValueError:
            LOG.warning("Invalid webhook JSON")
            self._send_json(400, {"error": "invalid json"})
            return
        if not isinstance(payload, dict):
            LOG.warning("Webhook payload is not a JSON object: %s", type(payload).__name__)
            self._send_json(400, {"error": "payload must be a json object"})
            return

        event = self.headers.get("X-GitHub-Event", "")
        LOG.info("Webhook event: %s (action: %s)", event, payload.get("action"))
        try:
            handle_github_event(self.config, event, payload)
        except Exception as e:
            # 5xx marks the delivery failed on GitHub so it can be redelivered
            LOG.error("Webhook event %s failed: %s", event, e)
            self._send_json(500, {"received": True, "processed": False})
            return
        self._send_json(200, {"received": True})

    def log_message(self, format: str, *args: Any) -> None:
        LOG.debug(format, *args)


def run_webhook_server(config: AppConfig) -> None:
    """Run HTTP server for webhooks and health check."""
    host = config.webhook.host
    port = config.webhook.port
    WebhookHandler.config = config
    server = ThreadingHTTPServer((host, port), WebhookHandler)
    LOG.info("Webhook server listening on %s:%s", host, port)
    server.serve_forever()
