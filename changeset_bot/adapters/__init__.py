"""Git platform adapters (base and implementations)."""

from changeset_bot.adapters.base import GitPlatformAdapter, GitPlatformError
from changeset_bot.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
