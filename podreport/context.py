"""
Runtime context shared between the CLI and the report command.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from podreport.config import PodReportConfig


class PodReportContext:
    """Per-invocation settings resolved from CLI options and config.

    Attributes:
        config_path: Configuration file in use, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: PodReportConfig = PodReportConfig()
