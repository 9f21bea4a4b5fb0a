"""
Executable module for podreport.

``python -m podreport`` is equivalent to the ``podreport`` console script.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be imported."""
    sys.stderr.write("podreport CLI could not be loaded.\n")
    sys.stderr.write(f"Python version   : {sys.version}\n")
    try:
        from podreport.__version__ import __version__

        sys.stderr.write(f"podreport version: {__version__}\n")
    except ImportError:
        sys.stderr.write("podreport version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Entry point for ``python -m podreport``.

    Returns:
        Exit code returned by the CLI, or 1 if it cannot be imported.
    """
    try:
        # Imported lazily so a broken install still produces a readable error
        from podreport.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
