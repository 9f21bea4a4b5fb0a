"""Report command implementation for podreport.

Runs ``pod outdated`` for a project, resolves GitHub release pages, and
renders the result in one of three formats:

- ``simple``: one line per pod: ``NAME [CUR -> AVAIL] <releases URL>``
- ``table`` : a Rich table
- ``json``  : a JSON array for scripts
"""

from __future__ import annotations

import json
import asyncio
from pathlib import Path
from typing import Any, Dict, List

from podreport.models import PodUpdate
from podreport.context import PodReportContext
from podreport.core import SourceResolver, UpdateReporter
from podreport.utils import (
    HTTPClient,
    get_logger,
    get_raw_console,
    print_success,
    print_table,
)

logger = get_logger("commands.report")

OUTPUT_FORMATS = ("simple", "table", "json")


def run_report(
    ctx: PodReportContext,
    project_dir: Path,
    output_format: str = "simple",
) -> List[PodUpdate]:
    """Build the report for *project_dir* and print it.

    Returns:
        The rendered updates, in ``pod outdated`` order.

    Raises:
        PodReportError: ``pod outdated`` failed or printed malformed output.
    """
    updates = asyncio.run(_report_async(ctx, project_dir))
    render_updates(updates, output_format)
    return updates


async def _report_async(ctx: PodReportContext, project_dir: Path) -> List[PodUpdate]:
    config = ctx.config
    logger.info("Checking pods in %s", project_dir)

    async with HTTPClient(
        timeout=config.timeout,
        max_concurrency=config.max_concurrency,
    ) as http:
        reporter = UpdateReporter(
            SourceResolver(http, search_url=config.search_url),
            pod_command=config.pod_command,
        )
        updates = await reporter.report_project(project_dir)

    linked = sum(1 for update in updates if update.has_releases_url)
    logger.info("%d outdated pod(s), %d with release links", len(updates), linked)
    return updates


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


def render_updates(updates: List[PodUpdate], output_format: str) -> None:
    """Print *updates* in the requested format."""
    if output_format == "json":
        _display_json(updates)
    elif not updates:
        print_success("All pods are up to date!")
    elif output_format == "table":
        _display_table(updates)
    else:
        _display_simple(updates)


def _display_simple(updates: List[PodUpdate]) -> None:
    console = get_raw_console()
    for update in updates:
        console.print(update.to_display_line(), markup=False, highlight=False)


def _display_table(updates: List[PodUpdate]) -> None:
    data = [
        {
            "Pod": update.name,
            "Current": update.current_version,
            "Available": update.available_version,
            "Releases": update.releases_url or f"[dim]{update.releases_label}[/dim]",
        }
        for update in updates
    ]

    column_styles: Dict[str, Dict[str, Any]] = {
        "Pod": {"style": "bold cyan", "no_wrap": True},
        "Current": {"justify": "center", "style": "dim"},
        "Available": {"justify": "center", "style": "bold green"},
        "Releases": {"style": "link"},
    }

    print_table(data, title="Outdated Pods", column_styles=column_styles)


def _display_json(updates: List[PodUpdate]) -> None:
    print(json.dumps([update.to_json() for update in updates], indent=2))
