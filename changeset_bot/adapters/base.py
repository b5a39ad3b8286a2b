"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from changeset_bot.models import ChangedFile, Comment


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Remote calls the bot needs from a Git hosting platform."""

    @abstractmethod
    def list_pr_files(self, repo: str, pr_number: int) -> List[ChangedFile]:
        """List every file changed by the pull request."""
        ...

    @abstractmethod
    def get_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        """Fetch comments on an issue (or the conversation of a PR)."""
        ...

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue."""
        ...

    @abstractmethod
    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        """Replace the body of an existing comment."""
        ...
