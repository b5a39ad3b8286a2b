"""Changeset bot: reports changeset presence on pull requests."""

__version__ = "0.1.0"
