"""
Data models for outdated pods.

:class:`OutdatedPod` is what the ``pod outdated`` parser extracts from a
single line; :class:`PodUpdate` is the finished report entry, built once
the pod's release link has been resolved (or given up on).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional

from podreport.constants import NOT_ON_GITHUB_LABEL


class OutdatedPod(NamedTuple):
    """A pod with a newer version available, as reported by ``pod outdated``."""

    name: str
    current_version: str
    available_version: str


@dataclass(frozen=True)
class PodUpdate:
    """
    One entry of the outdated-pods report.

    Version strings are opaque: they are displayed exactly as the upstream
    tool printed them and never compared.

    Attributes:
        name: Pod name, unique within a report.
        current_version: Version currently locked in the project.
        available_version: Latest version published upstream.
        releases_url: GitHub releases page, or ``None`` when the pod's
            source is not on GitHub or could not be resolved.
    """

    name: str
    current_version: str
    available_version: str
    releases_url: Optional[str] = None

    @classmethod
    def from_outdated(
        cls,
        pod: OutdatedPod,
        releases_url: Optional[str] = None,
    ) -> "PodUpdate":
        """Build a report entry from a parsed line and its resolved link."""
        return cls(
            name=pod.name,
            current_version=pod.current_version,
            available_version=pod.available_version,
            releases_url=releases_url,
        )

    @property
    def has_releases_url(self) -> bool:
        """True if a GitHub releases page was found for this pod."""
        return self.releases_url is not None

    @property
    def releases_label(self) -> str:
        """The releases URL, or the "Not on GitHub" placeholder."""
        return self.releases_url or NOT_ON_GITHUB_LABEL

    def to_display_line(self) -> str:
        """Render as ``NAME [CUR -> AVAIL] <releases URL or placeholder>``."""
        return (
            f"{self.name} [{self.current_version} -> {self.available_version}] "
            f"{self.releases_label}"
        )

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "name": self.name,
            "current_version": self.current_version,
            "available_version": self.available_version,
            "releases_url": self.releases_url,
        }

    def __str__(self) -> str:
        return self.to_display_line()
