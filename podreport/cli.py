"""
Command-line interface for podreport.

``podreport [OPTIONS] [PATH]`` reports the outdated pods of the CocoaPods
project in PATH (default: the current directory).
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from podreport.config import load_config
from podreport.__version__ import __version__
from podreport.context import PodReportContext
from podreport.exceptions import ConfigError, PodReportError
from podreport.commands.report import OUTPUT_FORMATS, run_report
from podreport.utils.logger import get_logger, setup_logging
from podreport.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    required=False,
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="PODREPORT_CONFIG",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="simple",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for each search request.",
    envvar="PODREPORT_TIMEOUT",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="PODREPORT_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="podreport",
    message="%(prog)s %(version)s",
)
def cli(
    path: Path,
    config: Optional[Path],
    output_format: str,
    timeout: Optional[float],
    verbose: int,
    color: bool,
) -> None:
    """Report outdated pods and link them to their GitHub releases.

    \b
    Examples:
      podreport
      podreport path/to/project
      podreport -f json path/to/project
    """
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    _configure_logging(verbose)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    if timeout is not None:
        loaded_config.timeout = timeout

    ctx = PodReportContext()
    ctx.config_path = config or loaded_config.source_path
    ctx.verbose = verbose
    ctx.color = color
    ctx.config = loaded_config

    logger.debug("podreport v%s", __version__)
    logger.debug("Config path: %s", ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())

    run_report(ctx, path, output_format.lower())


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the podreport CLI.

    Returns:
        Exit code:
            0   Success
            1   Application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli.main(args=argv, prog_name="podreport", standalone_mode=False)
        return 0

    except click.exceptions.Exit as exc:
        return exc.exit_code

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except PodReportError as exc:
        print_error(str(exc))
        logger.debug(
            "PodReportError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
