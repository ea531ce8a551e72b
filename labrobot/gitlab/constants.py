"""GitLab webhook identifiers used to route deliveries."""

from __future__ import annotations

import enum


class GitLabEventType(enum.StrEnum):
    """Values GitLab sends in the ``X-Gitlab-Event`` header."""

    ISSUE = "Issue Hook"
    CONFIDENTIAL_ISSUE = "Confidential Issue Hook"
    MERGE_REQUEST = "Merge Request Hook"
    PUSH = "Push Hook"
    NOTE = "Note Hook"
    CONFIDENTIAL_NOTE = "Confidential Note Hook"


class NoteableType(enum.StrEnum):
    """``noteable_type`` values carried by comment (note) payloads."""

    ISSUE = "Issue"
    MERGE_REQUEST = "MergeRequest"
    COMMIT = "Commit"
    SNIPPET = "Snippet"


NOTE_EVENT_TYPES = frozenset({GitLabEventType.NOTE, GitLabEventType.CONFIDENTIAL_NOTE})
