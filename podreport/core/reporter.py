"""Outdated-pod report assembly.

:class:`UpdateReporter` drives the pipeline for a whole project:

1. **run_pod_outdated**: captures ``pod outdated`` output.
2. **parse_outdated_output**: turns it into :class:`OutdatedPod` tuples.
   A malformed line aborts the run.
3. **SourceResolver** → **extract_github_project** → **build_releases_url**
   finds a GitHub releases page for each pod. This step is best effort:
   any failure leaves that pod without a link and never stops the report.

Lookups for different pods run concurrently (bounded by the HTTP client's
concurrency limit); the report keeps the order of the ``pod outdated``
output.

Typical usage::

    async with HTTPClient(timeout=10) as http:
        reporter = UpdateReporter(SourceResolver(http))
        for update in await reporter.report_project("."):
            print(update.to_display_line())
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from podreport.models.update import OutdatedPod, PodUpdate
from podreport.core.parser import parse_outdated_output
from podreport.core.source_resolver import SourceResolver
from podreport.core.github import build_releases_url, extract_github_project
from podreport.core.pod_command import Runner, run_pod_outdated
from podreport.exceptions import InvalidGitHubURLError, SourceLookupError
from podreport.utils.logger import get_logger
from podreport.utils.process import run
from podreport.constants import DEFAULT_POD_COMMAND

logger = get_logger("reporter")


class UpdateReporter:
    """Build outdated-pod reports with GitHub release links.

    Holds no per-run state, so the same reporter can produce any number of
    reports; identical input and lookups give identical output.

    Args:
        resolver: Source repository lookup used for every pod.
        pod_command: Executable used to run ``pod outdated``.
        runner: Process runner passed to :func:`run_pod_outdated`.
    """

    def __init__(
        self,
        resolver: SourceResolver,
        *,
        pod_command: str = DEFAULT_POD_COMMAND,
        runner: Runner = run,
    ) -> None:
        self.resolver = resolver
        self.pod_command = pod_command
        self.runner = runner

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def report_project(self, project_dir: Union[str, Path]) -> List[PodUpdate]:
        """Run ``pod outdated`` in *project_dir* and build the report.

        Raises:
            CommandError: ``pod outdated`` could not be run.
            ParseError: Its output has an unexpected shape.
        """
        raw_text = await asyncio.to_thread(
            run_pod_outdated,
            project_dir,
            pod_command=self.pod_command,
            runner=self.runner,
        )
        return await self.build_report(raw_text)

    async def build_report(self, raw_text: str) -> List[PodUpdate]:
        """Build the report for already captured ``pod outdated`` output.

        Raises:
            ParseError: A pod line is malformed. No partial report is built.
        """
        pods = parse_outdated_output(raw_text)
        if not pods:
            return []

        logger.info("Resolving release pages for %d pod(s)", len(pods))
        results = await asyncio.gather(
            *(self.resolve_releases_url(pod.name) for pod in pods),
            return_exceptions=True,
        )
        return self._assemble(pods, results)

    async def resolve_releases_url(self, pod_name: str) -> Optional[str]:
        """Return the GitHub releases page for *pod_name*, or ``None``.

        Never raises for lookup problems: a pod without a usable GitHub
        source simply has no link.
        """
        try:
            source_url = await self.resolver.resolve_source_url(pod_name)
        except SourceLookupError as exc:
            logger.debug("No source URL for %s: %s", pod_name, exc)
            return None

        try:
            project = extract_github_project(source_url)
        except InvalidGitHubURLError as exc:
            logger.warning("Ignoring malformed GitHub URL for %s: %s", pod_name, exc)
            return None

        if project is None:
            logger.debug("%s is not hosted on GitHub (%s)", pod_name, source_url)
            return None

        return build_releases_url(project)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _assemble(
        self,
        pods: Sequence[OutdatedPod],
        results: Sequence[Any],
    ) -> List[PodUpdate]:
        """Pair each pod with its lookup outcome, preserving input order."""
        updates: List[PodUpdate] = []

        for pod, result in zip(pods, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error("Failed to resolve release page for %s: %s", pod.name, result)
                result = None
            updates.append(PodUpdate.from_outdated(pod, result))

        return updates
