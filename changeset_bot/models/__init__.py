"""Data models for changed files, comments and comment writes (Pydantic)."""

from changeset_bot.models.changed_file import ChangedFile
from changeset_bot.models.comment import Comment
from changeset_bot.models.comment_write import CommentWrite

__all__ = ["ChangedFile", "Comment", "CommentWrite"]
