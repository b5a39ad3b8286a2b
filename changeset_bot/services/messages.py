"""Status comment bodies."""


def get_absent_message(commit_sha: str) -> str:
    return f"""###  ⚠️  No Changeset found

Latest commit: {commit_sha}

Merging this PR will not cause a version bump for any packages. If these changes should not result in a new version, you're good to go. **If these changes should result in a version bump, you need to add a changeset.**"""


def get_approve_message(commit_sha: str) -> str:
    return f"""###  ✅  Changeset detected

Latest commit: {commit_sha}

**The changes in this PR will be included in the next version bump.**"""
