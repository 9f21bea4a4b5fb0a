"""Run ``pod outdated`` for a project directory."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, Union

from podreport.exceptions import CommandError
from podreport.utils.logger import get_logger
from podreport.utils.process import CommandResult, run
from podreport.constants import (
    DEFAULT_POD_COMMAND,
    POD_OUTDATED_SUBCOMMAND,
    POD_PROJECT_DIRECTORY_FLAG,
)

logger = get_logger("pod_command")

Runner = Callable[[str, Sequence[str], Optional[Mapping[str, str]]], CommandResult]


def pod_outdated_args(project_dir: Union[str, Path]) -> list:
    """Arguments for ``pod outdated`` targeting *project_dir*."""
    return [
        POD_OUTDATED_SUBCOMMAND,
        POD_PROJECT_DIRECTORY_FLAG.format(path=project_dir),
    ]


def run_pod_outdated(
    project_dir: Union[str, Path],
    *,
    pod_command: str = DEFAULT_POD_COMMAND,
    runner: Runner = run,
) -> str:
    """Run ``pod outdated`` and return its standard output.

    Args:
        project_dir: Directory containing the ``Podfile``.
        pod_command: Executable used for CocoaPods.
        runner: Process runner, replaceable in tests.

    Raises:
        CommandError: ``pod`` is missing or exited with a non-zero status.
    """
    args = pod_outdated_args(project_dir)
    logger.info("Running %s %s", pod_command, " ".join(args))

    result = runner(pod_command, args, None)

    if result.exit_status != 0:
        raise CommandError(
            f"'{pod_command} {POD_OUTDATED_SUBCOMMAND}' failed",
            command=[pod_command, *args],
            exit_status=result.exit_status,
            stderr=result.stderr or result.stdout,
        )

    if result.stderr.strip():
        logger.debug("%s stderr: %s", pod_command, result.stderr.strip())

    return result.stdout
