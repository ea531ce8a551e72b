"""Helpers for GitLab namespaced paths and comment authors.

GitLab identifies a project by ``path_with_namespace`` such as
``acme/widgets`` or, with subgroups, ``acme/platform/widgets``. These paths
are not filesystem paths and are split on ``/`` directly.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .models import IssueCommentEvent, MergeCommentEvent, User


def namespace_root(path_with_namespace: str) -> str:
    """Return the top-level namespace of a project path.

    Examples
    --------
    >>> namespace_root("acme/platform/widgets")
    'acme'
    >>> namespace_root("")
    ''

    """
    return path_with_namespace.split("/", 1)[0]


def split_org_repo(path_with_namespace: str) -> tuple[str, str]:
    """Split a project path into ``(org, repo)``.

    The repository is the last path segment; the org is everything before
    it, so subgroup paths keep their full namespace.

    Examples
    --------
    >>> split_org_repo("acme/widgets")
    ('acme', 'widgets')
    >>> split_org_repo("acme/platform/widgets")
    ('acme/platform', 'widgets')
    >>> split_org_repo("widgets")
    ('', 'widgets')

    """
    org, _, repo = path_with_namespace.rpartition("/")
    return org, repo


def issue_comment_author(event: IssueCommentEvent) -> str:
    """Return the username of whoever wrote an issue comment."""
    return _username(event.user)


def merge_comment_author(event: MergeCommentEvent) -> str:
    """Return the username of whoever wrote a merge request comment."""
    return _username(event.user)


def _username(user: User | None) -> str:
    if user is None:
        return ""
    return user.username or ""
