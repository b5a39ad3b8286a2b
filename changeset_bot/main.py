"""
Changeset bot entry point.

Runs the webhook server that answers pull_request opened/synchronize events
with a changeset status comment. Usage: changeset-bot [--config PATH] [--check].
"""

import argparse
import logging
import sys
from pathlib import Path

from changeset_bot.config import AppConfig, load_config
from changeset_bot.logging import setup_logging
from changeset_bot.webhook.server import run_webhook_server


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="changeset-bot",
        description="Changeset bot - comments on PRs whether a changeset was added",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def run_bot(config: AppConfig) -> None:
    """Set up logging and serve webhooks until interrupted."""
    setup_logging(config.logging)
    log = logging.getLogger("changeset_bot.main")
    if not config.github_token_resolved:
        log.warning("No GitHub token configured; events will be received but not answered")
    log.info(
        "Changeset bot started | bot logins=%s | release prefix=%s",
        ", ".join(config.bot.known_logins),
        config.bot.release_branch_prefix,
    )
    run_webhook_server(config)


def main(argv: list[str] | None = None) -> int:
    """Entry point for changeset-bot."""
    args = parse_args(argv)
    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")
            logging.basicConfig(level=logging.INFO)
            logging.getLogger("changeset_bot.main").warning("config.yaml not found, using config.example.yaml")

    config = load_config(config_path)

    if args.check:
        print("Config OK:", config.github.api_url, config.github.webhook_path)
        return 0

    try:
        run_bot(config)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logging.getLogger("changeset_bot.main").exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
