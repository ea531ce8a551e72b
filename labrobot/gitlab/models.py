"""Typed GitLab webhook payloads.

Each event Struct mirrors the JSON GitLab posts for one webhook kind. Keys
not modelled here are ignored when decoding. Every field defaults to
``None`` and accepts JSON ``null``, so a payload with missing or null
sections still decodes; readers treat ``None`` as the empty value.
"""

from __future__ import annotations

import msgspec


class _Payload(msgspec.Struct, kw_only=True, frozen=True):
    """Base for webhook payload fragments."""


class User(_Payload):
    """User who triggered the event.

    Attributes
    ----------
    id : int | None
        GitLab user identifier.
    name : str | None
        Display name.
    username : str | None
        Login name, used as the actor identity in log records.

    """

    id: int | None = None
    name: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    email: str | None = None


class Project(_Payload):
    """Project the event belongs to."""

    id: int | None = None
    name: str | None = None
    description: str | None = None
    web_url: str | None = None
    namespace: str | None = None
    path_with_namespace: str | None = None
    default_branch: str | None = None
    homepage: str | None = None
    visibility_level: int | None = None


class Repository(_Payload):
    """Repository section of a webhook payload."""

    name: str | None = None
    url: str | None = None
    description: str | None = None
    homepage: str | None = None


class Label(_Payload):
    """Label attached to an issue or merge request."""

    id: int | None = None
    title: str | None = None
    color: str | None = None
    description: str | None = None


class CommitAuthor(_Payload):
    """Commit author as embedded in push and merge request payloads."""

    name: str | None = None
    email: str | None = None


class Commit(_Payload):
    """Commit summary embedded in push and merge request payloads."""

    id: str | None = None
    message: str | None = None
    title: str | None = None
    timestamp: str | None = None
    url: str | None = None
    author: CommitAuthor | None = None
    added: list[str] | None = None
    modified: list[str] | None = None
    removed: list[str] | None = None


class IssueAttributes(_Payload):
    """``object_attributes`` of an issue event, or ``issue`` of a note."""

    id: int | None = None
    iid: int | None = None
    project_id: int | None = None
    title: str | None = None
    description: str | None = None
    state: str | None = None
    action: str | None = None
    url: str | None = None
    author_id: int | None = None
    confidential: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


class MergeRequestAttributes(_Payload):
    """Merge request ``object_attributes``, or ``merge_request`` of a note."""

    id: int | None = None
    iid: int | None = None
    target_project_id: int | None = None
    source_project_id: int | None = None
    title: str | None = None
    description: str | None = None
    state: str | None = None
    action: str | None = None
    url: str | None = None
    source_branch: str | None = None
    target_branch: str | None = None
    merge_status: str | None = None
    author_id: int | None = None
    draft: bool | None = None
    work_in_progress: bool | None = None
    last_commit: Commit | None = None
    created_at: str | None = None
    updated_at: str | None = None


class NoteAttributes(_Payload):
    """``object_attributes`` of a note (comment) event."""

    id: int | None = None
    note: str | None = None
    noteable_type: str | None = None
    noteable_id: int | None = None
    author_id: int | None = None
    project_id: int | None = None
    system: bool | None = None
    url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class IssueEvent(_Payload):
    """Payload of an ``Issue Hook`` delivery."""

    object_kind: str | None = None
    event_type: str | None = None
    user: User | None = None
    project: Project | None = None
    repository: Repository | None = None
    object_attributes: IssueAttributes | None = None
    assignees: list[User] | None = None
    labels: list[Label] | None = None


class MergeEvent(_Payload):
    """Payload of a ``Merge Request Hook`` delivery."""

    object_kind: str | None = None
    event_type: str | None = None
    user: User | None = None
    project: Project | None = None
    repository: Repository | None = None
    object_attributes: MergeRequestAttributes | None = None
    assignees: list[User] | None = None
    reviewers: list[User] | None = None
    labels: list[Label] | None = None


class PushEvent(_Payload):
    """Payload of a ``Push Hook`` delivery.

    Attributes
    ----------
    ref : str | None
        Fully qualified ref that was updated, e.g. ``refs/heads/main``.
    before : str | None
        Commit SHA the ref pointed at before the push.
    after : str | None
        Commit SHA the ref points at after the push.

    """

    object_kind: str | None = None
    event_name: str | None = None
    before: str | None = None
    after: str | None = None
    ref: str | None = None
    checkout_sha: str | None = None
    user_id: int | None = None
    user_name: str | None = None
    user_username: str | None = None
    user_email: str | None = None
    project_id: int | None = None
    project: Project | None = None
    repository: Repository | None = None
    commits: list[Commit] | None = None
    total_commits_count: int | None = None


class IssueCommentEvent(_Payload):
    """Payload of a ``Note Hook`` delivery whose noteable is an issue."""

    object_kind: str | None = None
    event_type: str | None = None
    user: User | None = None
    project_id: int | None = None
    project: Project | None = None
    repository: Repository | None = None
    object_attributes: NoteAttributes | None = None
    issue: IssueAttributes | None = None


class MergeCommentEvent(_Payload):
    """Payload of a ``Note Hook`` delivery whose noteable is a merge request."""

    object_kind: str | None = None
    event_type: str | None = None
    user: User | None = None
    project_id: int | None = None
    project: Project | None = None
    repository: Repository | None = None
    object_attributes: NoteAttributes | None = None
    merge_request: MergeRequestAttributes | None = None


class NoteTarget(_Payload):
    """Minimal view of a note payload used to pick the comment route."""

    object_attributes: NoteAttributes | None = None
