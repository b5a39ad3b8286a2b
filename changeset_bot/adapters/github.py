"""GitHub API adapter."""

from datetime import datetime
from typing import Any, Dict, List

import requests

from changeset_bot.adapters.base import GitPlatformAdapter, GitPlatformError
from changeset_bot.models import ChangedFile, Comment

PER_PAGE = 100


def _parse_iso(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    user = data.get("user") or {}
    created = _parse_iso(data["created_at"])
    updated = _parse_iso(data.get("updated_at") or data["created_at"])
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
        created_at=created,
        updated_at=updated,
    )


def _changed_file_from_api(data: Dict[str, Any]) -> ChangedFile:
    return ChangedFile(filename=data["filename"], status=data.get("status", ""))


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = path if path.startswith("http") else f"{self._api_url}/{path.lstrip('/')}"
        resp = self._session.request(method, url, params=params, json=json, timeout=30)
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except (ValueError, AttributeError):
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def _get_all(self, path: str) -> List[Dict[str, Any]]:
        """GET a list endpoint and follow rel="next" links until exhausted."""
        items: List[Dict[str, Any]] = []
        url: str | None = path
        params: Dict[str, Any] | None = {"per_page": PER_PAGE}
        while url:
            resp = self._request("GET", url, params=params)
            items.extend(resp.json() or [])
            url = (resp.links or {}).get("next", {}).get("url")
            # next link already carries the query string
            params = None
        return items

    def list_pr_files(self, repo: str, pr_number: int) -> List[ChangedFile]:
        data = self._get_all(f"/repos/{repo}/pulls/{pr_number}/files")
        return [_changed_file_from_api(d) for d in data]

    def get_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        data = self._get_all(f"/repos/{repo}/issues/{issue_number}/comments")
        return [_comment_from_api(d) for d in data]

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        resp = self._request(
            "POST",
            f"/repos/{repo}/issues/{issue_number}/comments",
            json={"body": body},
        )
        return _comment_from_api(resp.json())

    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        resp = self._request(
            "PATCH",
            f"/repos/{repo}/issues/comments/{comment_id}",
            json={"body": body},
        )
        return _comment_from_api(resp.json())
