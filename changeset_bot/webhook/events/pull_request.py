"""Event schema for GitHub pull_request webhooks (opened, synchronize)."""

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict

HANDLED_ACTIONS = ("opened", "synchronize")


class MalformedEventError(ValueError):
    """Raised when a pull_request payload lacks a field the bot reads."""

    pass


class PullRequestEvent(BaseModel):
    """PR opened or updated with new commits (pull_request webhook)."""

    model_config = ConfigDict(frozen=True)

    action: Literal["opened", "synchronize"]
    number: int
    owner: str
    repo: str
    head_ref: str
    head_sha: str

    @property
    def full_name(self) -> str:
        """Repository as owner/name, the form adapters take."""
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "PullRequestEvent":
        """Build event from a pull_request webhook payload."""
        try:
            repository = payload["repository"]
            head = payload["pull_request"]["head"]
            return cls(
                action=payload["action"],
                number=payload["number"],
                owner=repository["owner"]["login"],
                repo=repository["name"],
                head_ref=head["ref"],
                head_sha=head["sha"],
            )
        except (KeyError, TypeError) as e:
            raise MalformedEventError(f"pull_request payload missing field: {e}") from e
