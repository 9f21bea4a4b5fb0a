"""Configuration file loader for podreport.

Supports two formats:

- ``podreport.toml``: settings under a ``[podreport]`` table
- ``pyproject.toml``: settings under ``[tool.podreport]``

Discovery order:

1. Explicit path from ``--config`` or ``PODREPORT_CONFIG``
2. ``podreport.toml`` in the current directory
3. ``pyproject.toml`` with a ``[tool.podreport]`` section

Precedence: defaults < config file < CLI options.

Example (``podreport.toml``)::

    [podreport]
    timeout = 10
    max_concurrency = 4
    pod_command = "bundle-pod"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from podreport.exceptions import ConfigError
from podreport.utils.logger import get_logger
from podreport.constants import (
    COCOAPODS_SEARCH_URL,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_POD_COMMAND,
    DEFAULT_TIMEOUT,
)

logger = get_logger("config")

CONFIG_FILE_NAME = "podreport.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"
SECTION_NAME = "podreport"


@dataclass
class PodReportConfig:
    """Parsed and validated podreport configuration.

    Attributes:
        timeout: Seconds to wait for each search request.
        max_concurrency: Search requests allowed in flight at once.
        search_url: CocoaPods search endpoint.
        pod_command: Executable used to run ``pod outdated``.
        source_path: Loaded config file, or ``None`` for defaults.
    """

    timeout: float = DEFAULT_TIMEOUT
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    search_url: str = COCOAPODS_SEARCH_URL
    pod_command: str = DEFAULT_POD_COMMAND

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return user-facing options for debug logging."""
        return {
            "timeout": self.timeout,
            "max_concurrency": self.max_concurrency,
            "search_url": self.search_url,
            "pod_command": self.pod_command,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Raises:
        ConfigError: *explicit_path* was given but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    podreport_toml = cwd / CONFIG_FILE_NAME
    if podreport_toml.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, podreport_toml)
        return podreport_toml

    pyproject_toml = cwd / PYPROJECT_FILE_NAME
    if pyproject_toml.is_file() and _pyproject_has_section(pyproject_toml):
        logger.debug("Found [tool.%s] in %s", SECTION_NAME, pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Return True if *path* has a ``[tool.podreport]`` table.

    Unreadable or invalid files count as "no section".
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    return SECTION_NAME in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> PodReportConfig:
    """Load and validate podreport configuration.

    Returns the defaults when no configuration file is found.

    Raises:
        ConfigError: The file cannot be parsed, has unknown keys, or holds
            invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        return PodReportConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == PYPROJECT_FILE_NAME:
        section = raw.get("tool", {}).get(SECTION_NAME, {})
    else:
        section = raw.get(SECTION_NAME, {})

    if not section:
        logger.debug("Config file has no %s section; using defaults", SECTION_NAME)
        return PodReportConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: The file cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(section: Dict[str, Any], *, config_path: str) -> PodReportConfig:
    """Validate a ``[podreport]`` table and build the config from it.

    Raises:
        ConfigError: Unknown keys or values of the wrong type or range.
    """
    config = PodReportConfig()

    known = set(config.to_log_dict())
    unknown = set(section) - known
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "timeout" in section:
        val = section["timeout"]
        # bool is an int subclass
        if isinstance(val, bool) or not isinstance(val, (int, float)) or val <= 0:
            raise ConfigError(
                f"timeout must be a positive number, got {val!r}",
                config_path=config_path,
                option="timeout",
            )
        config.timeout = float(val)

    if "max_concurrency" in section:
        val = section["max_concurrency"]
        if isinstance(val, bool) or not isinstance(val, int) or val < 1:
            raise ConfigError(
                f"max_concurrency must be a positive integer, got {val!r}",
                config_path=config_path,
                option="max_concurrency",
            )
        config.max_concurrency = val

    if "search_url" in section:
        val = section["search_url"]
        if not isinstance(val, str) or not val.startswith(("http://", "https://")):
            raise ConfigError(
                f"search_url must be an http(s) URL, got {val!r}",
                config_path=config_path,
                option="search_url",
            )
        config.search_url = val

    if "pod_command" in section:
        val = section["pod_command"]
        if not isinstance(val, str) or not val.strip():
            raise ConfigError(
                f"pod_command must be a non-empty string, got {val!r}",
                config_path=config_path,
                option="pod_command",
            )
        config.pod_command = val

    return config
