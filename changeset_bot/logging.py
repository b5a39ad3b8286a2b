"""Logging setup for the webhook server.

Every delivery logs under ``changeset_bot.*``: the reconciler reports each
created or updated status comment (INFO) and every failed reconcile with its
traceback (ERROR). Level and format come from config.yaml (logging.level,
logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).

urllib3 logs one line per GitHub request at DEBUG; it is held at WARNING
unless the bot itself runs at DEBUG.
"""

import logging

from changeset_bot.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HTTP_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant, INFO if unknown."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def setup_logging(config: LoggingConfig) -> int:
    """Configure the root logger for the bot; returns the applied level."""
    level = _resolve_level(config.level)
    logging.basicConfig(level=level, format=config.format or DEFAULT_FORMAT, force=True)
    http_level = logging.DEBUG if level == logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
    return level
