"""Detect a changeset added by a pull request."""

import re
from typing import Iterable

from changeset_bot.models import ChangedFile

CHANGESET_RE = re.compile(r"\.changeset/.+\.md")
CHANGESET_README = ".changeset/README.md"


def is_changeset_file(file: ChangedFile) -> bool:
    """True if the file is a newly added changeset (README excluded)."""
    return (
        file.status == "added"
        and CHANGESET_RE.fullmatch(file.filename) is not None
        and file.filename != CHANGESET_README
    )


def has_changeset_been_added(files: Iterable[ChangedFile]) -> bool:
    """True if any file in the PR's full listing is an added changeset.

    Modified, renamed and removed changesets are ignored.
    """
    return any(is_changeset_file(f) for f in files)
