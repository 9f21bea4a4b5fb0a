"""
External process execution for podreport.

:func:`run` is the single capability the rest of podreport needs from the
operating system: run a command and hand back its exit status and
captured output. Bare command names are resolved on ``PATH`` first.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from typing import Mapping, NamedTuple, Optional, Sequence

from podreport.exceptions import CommandError
from podreport.utils.logger import get_logger
from podreport.constants import COMMAND_NOT_FOUND_STATUS

logger = get_logger("process")


class CommandResult(NamedTuple):
    """Outcome of a finished process."""

    exit_status: int
    stdout: str
    stderr: str


def resolve_executable(command: str) -> Optional[str]:
    """Resolve *command* to an executable path, or ``None`` if not found.

    Names containing a path separator are checked as-is.
    """
    return shutil.which(command)


def run(
    command: str,
    args: Sequence[str] = (),
    env: Optional[Mapping[str, str]] = None,
    *,
    timeout: Optional[float] = None,
) -> CommandResult:
    """Run *command* with *args* and capture its output.

    Args:
        command: Executable name (looked up on ``PATH``) or path.
        args: Arguments passed to the command.
        env: Variables layered over the current environment.
        timeout: Seconds to wait before giving up, or ``None`` to wait.

    Returns:
        A :class:`CommandResult`. An unresolvable command is reported as
        exit status 127 with a "command not found" message on stderr.

    Raises:
        CommandError: The process could not be started or timed out.
    """
    path = resolve_executable(command)
    if path is None:
        logger.debug("Could not resolve %r on PATH", command)
        return CommandResult(
            COMMAND_NOT_FOUND_STATUS,
            "",
            f"{command}: command not found\n",
        )

    full_env = dict(os.environ)
    if env:
        full_env.update(env)

    argv = [path, *args]
    logger.debug("Running: %s", " ".join(argv))

    try:
        completed = subprocess.run(
            argv,
            capture_output=True,
            env=full_env,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandError(
            f"Command timed out after {timeout}s",
            command=argv,
        ) from exc
    except OSError as exc:
        raise CommandError(f"Failed to start command: {exc}", command=argv) from exc

    return CommandResult(
        completed.returncode,
        completed.stdout.decode("utf-8", errors="replace"),
        completed.stderr.decode("utf-8", errors="replace"),
    )
