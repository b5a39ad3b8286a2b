"""Outcome of a status comment reconcile."""

from typing import Literal

from pydantic import BaseModel


class CommentWrite(BaseModel):
    """The single write performed for one pull request event."""

    action: Literal["created", "updated"]
    comment_id: int
    body: str
    has_changeset: bool
