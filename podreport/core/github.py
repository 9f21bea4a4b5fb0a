"""GitHub project detection and release-page URLs."""

from __future__ import annotations

import posixpath
from typing import Optional, Union

import httpx

from podreport.exceptions import InvalidGitHubURLError
from podreport.constants import (
    GITHUB_BASE_URL,
    GITHUB_HOST,
    GITHUB_RELEASES_SUFFIX,
)

__all__ = ["extract_github_project", "build_releases_url", "is_github_url"]


def is_github_url(url: httpx.URL) -> bool:
    """Return True if *url* points at ``github.com``."""
    return url.host.lower() == GITHUB_HOST


def _strip_path_extension(path: str) -> str:
    """Drop the extension of the last path component (``repo.git`` -> ``repo``)."""
    trimmed = path.rstrip("/")
    root, _ext = posixpath.splitext(trimmed)
    return root


def extract_github_project(url: Union[httpx.URL, str]) -> Optional[str]:
    """Derive the ``org/repo`` project path from a source URL.

    Returns ``None`` for hosts other than GitHub; that is the common case
    for pods hosted elsewhere and is not an error.

    Raises:
        InvalidGitHubURLError: The URL is on GitHub but has no project path.

    Example::

        >>> extract_github_project("https://github.com/AFNetworking/AFNetworking.git")
        'AFNetworking/AFNetworking'
        >>> extract_github_project("https://bitbucket.org/team/repo.git") is None
        True
    """
    if not isinstance(url, httpx.URL):
        url = httpx.URL(url)

    if not is_github_url(url):
        return None

    path = _strip_path_extension(url.path)
    project = path[1:] if path.startswith("/") else path

    if not project:
        raise InvalidGitHubURLError(
            "GitHub URL does not name a project",
            url=str(url),
        )

    return project


def build_releases_url(project: str) -> str:
    """Return the GitHub releases page for an ``org/repo`` project path."""
    return f"{GITHUB_BASE_URL}{project}{GITHUB_RELEASES_SUFFIX}"
