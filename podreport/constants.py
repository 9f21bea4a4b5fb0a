"""
Centralized constants for podreport.

This module defines immutable values used across podreport: the CocoaPods
search endpoint, the GitHub URL shapes recognized for release links, the
token layout of ``pod outdated`` output, network defaults, and logging
formats. All values are intended to be treated as read-only.
"""

from typing import Final

# ---------------------------------------------------------------------------
# Project metadata
# ---------------------------------------------------------------------------

#: HTTP User-Agent template used for outbound requests.
USER_AGENT_TEMPLATE: Final[str] = "podreport/{version}"

# ---------------------------------------------------------------------------
# CocoaPods
# ---------------------------------------------------------------------------

#: Default executable used to list outdated pods.
DEFAULT_POD_COMMAND: Final[str] = "pod"

#: Subcommand of ``pod`` that lists outdated dependencies.
POD_OUTDATED_SUBCOMMAND: Final[str] = "outdated"

#: Flag template pointing ``pod outdated`` at a project directory.
POD_PROJECT_DIRECTORY_FLAG: Final[str] = "--project-directory={path}"

#: CocoaPods search endpoint (flat hash JSON, one object per pod).
COCOAPODS_SEARCH_URL: Final[str] = (
    "https://search.cocoapods.org/api/v1/pods.flat.hash.json"
)

#: Number of search results requested per lookup.
SEARCH_RESULT_LIMIT: Final[int] = 1

# ---------------------------------------------------------------------------
# `pod outdated` line layout
#
#   - NAME CURRENT -> CURRENT (latest version AVAILABLE)
#   0 1    2       3  4       5 6      7       8
# ---------------------------------------------------------------------------

#: Prefix marking a line that describes an outdated pod.
OUTDATED_LINE_MARKER: Final[str] = "-"

#: Characters that separate tokens within an outdated-pod line.
OUTDATED_LINE_SEPARATORS: Final[str] = " ()"

#: Token positions within a tokenized outdated-pod line.
NAME_TOKEN_INDEX: Final[int] = 1
CURRENT_VERSION_TOKEN_INDEX: Final[int] = 2
AVAILABLE_VERSION_TOKEN_INDEX: Final[int] = 8

#: Minimum token count for a well-formed line.
MIN_OUTDATED_LINE_TOKENS: Final[int] = AVAILABLE_VERSION_TOKEN_INDEX + 1

# ---------------------------------------------------------------------------
# GitHub
# ---------------------------------------------------------------------------

#: Host recognized as GitHub when deriving project paths.
GITHUB_HOST: Final[str] = "github.com"

#: Base URL for GitHub project pages.
GITHUB_BASE_URL: Final[str] = "https://github.com/"

#: Suffix appended to a project URL to reach its releases page.
GITHUB_RELEASES_SUFFIX: Final[str] = "/releases/"

#: Label shown when a pod has no GitHub releases page.
NOT_ON_GITHUB_LABEL: Final[str] = "Not on GitHub"

# ---------------------------------------------------------------------------
# Network / process configuration
# ---------------------------------------------------------------------------

#: Default network timeout in seconds.
DEFAULT_TIMEOUT: Final[float] = 30.0

#: Default number of search lookups allowed in flight at once.
DEFAULT_MAX_CONCURRENCY: Final[int] = 10

#: Exit status reported when an executable cannot be resolved.
COMMAND_NOT_FOUND_STATUS: Final[int] = 127

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
