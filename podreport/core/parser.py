"""Parser for ``pod outdated`` output.

``pod outdated`` prints a header followed by one line per outdated pod::

    Updating spec repo `master`
    Analyzing dependencies
    The following pod updates are available:
    - AFNetworking 2.6.3 -> 2.6.3 (latest version 3.0.4)
    - AMPopTip 0.10.1 -> 0.10.2 (latest version 0.10.2)

Only lines starting with ``-`` describe pods; everything else is ignored.
The fields are picked out by position, so every assumption about the line
layout is kept in :func:`parse_outdated_line` and the token constants.

Parsing is fail-fast: one malformed pod line means the tool's output format
changed, so :class:`~podreport.exceptions.ParseError` is raised and nothing
is returned.
"""

from __future__ import annotations

import re
from typing import List, Set

from podreport.exceptions import ParseError
from podreport.models.update import OutdatedPod
from podreport.utils.logger import get_logger
from podreport.constants import (
    AVAILABLE_VERSION_TOKEN_INDEX,
    CURRENT_VERSION_TOKEN_INDEX,
    MIN_OUTDATED_LINE_TOKENS,
    NAME_TOKEN_INDEX,
    OUTDATED_LINE_MARKER,
    OUTDATED_LINE_SEPARATORS,
)

logger = get_logger("parser")

_SEPARATOR_RE = re.compile(f"[{re.escape(OUTDATED_LINE_SEPARATORS)}]")

__all__ = ["parse_outdated_output", "parse_outdated_line", "tokenize_line"]


def tokenize_line(line: str) -> List[str]:
    """Split *line* on every separator character.

    Adjacent separators produce empty tokens, so ``"2.6.3 (latest"`` yields
    ``["2.6.3", "", "latest"]``. Token positions depend on this.
    """
    return _SEPARATOR_RE.split(line)


def is_outdated_line(line: str) -> bool:
    """Return True if *line* describes an outdated pod."""
    return line.startswith(OUTDATED_LINE_MARKER)


def parse_outdated_line(line: str, *, line_number: int = 0) -> OutdatedPod:
    """Extract name, current and available version from one pod line.

    Args:
        line: A line starting with the outdated marker.
        line_number: 1-based position of *line* in the output, for errors.

    Returns:
        The parsed :class:`OutdatedPod`.

    Raises:
        ParseError: The line has too few tokens or an empty field.

    Example::

        >>> parse_outdated_line("- AFNetworking 2.6.3 -> 2.6.3 (latest version 3.0.4)")
        OutdatedPod(name='AFNetworking', current_version='2.6.3', available_version='3.0.4')
    """
    tokens = tokenize_line(line)

    if len(tokens) < MIN_OUTDATED_LINE_TOKENS:
        raise ParseError(
            f"Unexpected pod outdated line: expected at least "
            f"{MIN_OUTDATED_LINE_TOKENS} tokens, got {len(tokens)}",
            line_number=line_number or None,
            line_content=line,
        )

    pod = OutdatedPod(
        name=tokens[NAME_TOKEN_INDEX],
        current_version=tokens[CURRENT_VERSION_TOKEN_INDEX],
        available_version=tokens[AVAILABLE_VERSION_TOKEN_INDEX],
    )

    if not all(pod):
        raise ParseError(
            "Unexpected pod outdated line: empty name or version field",
            line_number=line_number or None,
            line_content=line,
        )

    return pod


def parse_outdated_output(raw_text: str) -> List[OutdatedPod]:
    """Parse the full output of ``pod outdated``.

    Args:
        raw_text: Captured standard output of the command.

    Returns:
        Outdated pods in the order they appear. A pod listed twice is
        reported once, at its first position.

    Raises:
        ParseError: Any pod line is malformed.
    """
    pods: List[OutdatedPod] = []
    seen: Set[str] = set()

    for line_number, line in enumerate(raw_text.splitlines(), start=1):
        if not is_outdated_line(line):
            continue

        pod = parse_outdated_line(line, line_number=line_number)

        if pod.name in seen:
            logger.warning(
                "Pod '%s' listed more than once (line %d); keeping first entry",
                pod.name,
                line_number,
            )
            continue

        seen.add(pod.name)
        pods.append(pod)

    logger.debug("Parsed %d outdated pod(s)", len(pods))
    return pods
