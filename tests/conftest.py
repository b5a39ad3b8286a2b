"""Shared fixtures: in-memory adapter and pull_request payloads."""

import threading
from datetime import datetime, timezone
from typing import Any, Dict, List

import pytest

from changeset_bot.adapters.base import GitPlatformAdapter
from changeset_bot.models import ChangedFile, Comment


class FakeAdapter(GitPlatformAdapter):
    """Records every call; comments live in memory per repo/PR."""

    def __init__(self, files: List[ChangedFile] | None = None, comments: List[Comment] | None = None) -> None:
        self.files = list(files or [])
        self.comments: List[Comment] = list(comments or [])
        self.calls: List[tuple] = []
        self._next_id = 1000
        self._lock = threading.Lock()

    def _record(self, *call: Any) -> None:
        with self._lock:
            self.calls.append(call)

    def calls_named(self, name: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == name]

    def list_pr_files(self, repo: str, pr_number: int) -> List[ChangedFile]:
        self._record("list_pr_files", repo, pr_number)
        return list(self.files)

    def get_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        self._record("get_issue_comments", repo, issue_number)
        return list(self.comments)

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        self._record("create_comment", repo, issue_number, body)
        self._next_id += 1
        comment = Comment(
            id=self._next_id,
            body=body,
            author="changeset-bot[bot]",
            created_at=datetime.now(timezone.utc),
        )
        self.comments.append(comment)
        return comment

    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        self._record("update_comment", repo, comment_id, body)
        for i, comment in enumerate(self.comments):
            if comment.id == comment_id:
                self.comments[i] = comment.model_copy(update={"body": body})
                return self.comments[i]
        raise AssertionError(f"unknown comment {comment_id}")


def make_comment(comment_id: int, author: str, body: str = "hi") -> Comment:
    return Comment(id=comment_id, body=body, author=author, created_at=datetime(2024, 1, 15, tzinfo=timezone.utc))


def make_payload(
    action: str = "opened",
    number: int = 7,
    ref: str = "feature/foo",
    sha: str = "abc123def",
) -> Dict[str, Any]:
    return {
        "action": action,
        "number": number,
        "repository": {"name": "repo", "owner": {"login": "owner"}, "full_name": "owner/repo"},
        "pull_request": {"number": number, "head": {"ref": ref, "sha": sha}},
    }


@pytest.fixture
def fake_adapter() -> FakeAdapter:
    return FakeAdapter()
