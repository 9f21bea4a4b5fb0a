"""
Exception hierarchy for podreport.

Every podreport error derives from :class:`PodReportError` and carries an
optional ``details`` mapping that is rendered after the message. Errors
fall into two tiers:

- run-aborting: :class:`ParseError`, :class:`CommandError`,
  :class:`ConfigError`
- absorbed per pod: :class:`NetworkError`, :class:`SourceLookupError`,
  :class:`InvalidGitHubURLError`
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Sequence


class PodReportError(Exception):
    """Base exception for all podreport errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ParseError(PodReportError):
    """Raised when ``pod outdated`` output does not have the expected shape.

    A single malformed line aborts the whole parse: it means the tool's
    output format changed, and no partial report is produced.

    Args:
        message: Error description.
        line_number: 1-based line number of the offending line.
        line_content: Raw content of the offending line.
    """

    __slots__ = ("line_number", "line_content")

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        line_content: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "line", line_number)
        if line_content is not None:
            details["content"] = _truncate(line_content)

        super().__init__(message, details)

        self.line_number = line_number
        self.line_content = line_content


class CommandError(PodReportError):
    """Raised when an external command fails to run or exits non-zero.

    Args:
        message: Error description.
        command: The command line that was executed.
        exit_status: Exit status of the process, if it ran.
        stderr: Captured standard error, truncated in ``details``.
    """

    __slots__ = ("command", "exit_status", "stderr")

    def __init__(
        self,
        message: str,
        *,
        command: Optional[Sequence[str]] = None,
        exit_status: Optional[int] = None,
        stderr: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "command", " ".join(command) if command else None)
        _add_if(details, "exit_status", exit_status)
        if stderr:
            details["stderr"] = _truncate(stderr.strip())

        super().__init__(message, details)

        self.command = list(command) if command else []
        self.exit_status = exit_status
        self.stderr = stderr


class ConfigError(PodReportError):
    """Raised when a configuration file is unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class NetworkError(PodReportError):
    """Raised when HTTP or network operations fail.

    Args:
        message: Error description.
        url: URL being accessed.
        status_code: HTTP status code, if available.
        response_body: Raw response body, truncated for safety.
    """

    __slots__ = ("url", "status_code", "response_body")

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "url", url)
        _add_if(details, "status_code", status_code)

        if response_body is not None:
            details["response"] = _truncate(response_body)

        super().__init__(message, details)

        self.url = url
        self.status_code = status_code
        self.response_body = response_body


class SourceLookupError(PodReportError):
    """Raised when no source-control URL can be found for a pod.

    Covers every reason a lookup comes back empty-handed: transport
    failure, no search results, missing ``source.git`` field, or an
    unparsable URL. Callers treat them all as "no link".

    Args:
        message: Error description.
        pod_name: Name of the pod that was looked up.
    """

    __slots__ = ("pod_name",)

    def __init__(self, message: str, *, pod_name: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "pod", pod_name)

        super().__init__(message, details)

        self.pod_name = pod_name


class InvalidGitHubURLError(PodReportError):
    """Raised when a GitHub URL has no path that names a project.

    Args:
        message: Error description.
        url: The offending URL.
    """

    __slots__ = ("url",)

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "url", url)

        super().__init__(message, details)

        self.url = url
