"""
Core pipeline exports for podreport.

    from podreport.core import UpdateReporter, SourceResolver
"""

from __future__ import annotations

from podreport.core.parser import parse_outdated_line, parse_outdated_output
from podreport.core.source_resolver import SourceLookupResult, SourceResolver
from podreport.core.github import build_releases_url, extract_github_project
from podreport.core.pod_command import run_pod_outdated
from podreport.core.reporter import UpdateReporter

__all__ = [
    "parse_outdated_line",
    "parse_outdated_output",
    "SourceResolver",
    "SourceLookupResult",
    "extract_github_project",
    "build_releases_url",
    "run_pod_outdated",
    "UpdateReporter",
]
