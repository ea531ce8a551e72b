"""GitLab webhook event models and identifiers."""

from __future__ import annotations

from .constants import NOTE_EVENT_TYPES, GitLabEventType, NoteableType
from .models import (
    Commit,
    CommitAuthor,
    IssueAttributes,
    IssueCommentEvent,
    IssueEvent,
    Label,
    MergeCommentEvent,
    MergeEvent,
    MergeRequestAttributes,
    NoteAttributes,
    Project,
    PushEvent,
    Repository,
    User,
)
from .paths import (
    issue_comment_author,
    merge_comment_author,
    namespace_root,
    split_org_repo,
)

__all__ = [
    "NOTE_EVENT_TYPES",
    "Commit",
    "CommitAuthor",
    "GitLabEventType",
    "IssueAttributes",
    "IssueCommentEvent",
    "IssueEvent",
    "Label",
    "MergeCommentEvent",
    "MergeEvent",
    "MergeRequestAttributes",
    "NoteAttributes",
    "NoteableType",
    "Project",
    "PushEvent",
    "Repository",
    "User",
    "issue_comment_author",
    "merge_comment_author",
    "namespace_root",
    "split_org_repo",
]
