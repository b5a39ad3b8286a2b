"""File changed by a pull request."""

from pydantic import BaseModel


class ChangedFile(BaseModel):
    """One entry of a pull request's file listing.

    status is the platform value as-is (added, modified, removed, renamed,
    ...).
    """

    filename: str
    status: str
