"""Constants used in the project."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # project.lock.json format version written by restore and required by validation
    LOCK_FILE_FORMAT_VERSION = 1
    LOCK_FILE_INDENT = 2

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL = "INFO"

    ENV_LOG_LEVEL = "DEPMETA_LOG_LEVEL"
    ENV_CONFIG = "DEPMETA_CONFIG"
    CONFIG_FILE_NAME = "depmeta.yml"


def _default_config_paths() -> list:
    """Return candidate YAML config locations in priority order."""
    paths = []
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path and env_path.strip():
        paths.append(env_path.strip())
    paths.append(os.path.join(os.getcwd(), Constants.CONFIG_FILE_NAME))
    paths.append(os.path.join(os.path.expanduser("~"), ".config", "depmeta", Constants.CONFIG_FILE_NAME))
    return paths


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the first YAML configuration file found.

    Args:
        path: Explicit config path; default locations are searched when omitted.

    Returns:
        Parsed configuration mapping, empty when nothing usable was found.
    """
    import yaml

    candidates = [path] if path else _default_config_paths()
    for candidate in candidates:
        if not candidate or not os.path.isfile(candidate):
            continue
        try:
            with open(candidate, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Failed to load config %s: %s", candidate, exc)
            return {}
        if isinstance(data, dict):
            return data
        logger.warning("Ignoring config %s: top level must be a mapping", candidate)
        return {}
    return {}


def apply_config(cfg: Dict[str, Any]) -> None:
    """Apply a loaded configuration mapping onto Constants.

    Unknown keys are ignored and invalid values are skipped with a warning so a
    bad config file never breaks parsing or validation.
    """
    if not isinstance(cfg, dict):
        return

    log_cfg = cfg.get("logging")
    if isinstance(log_cfg, dict):
        level = log_cfg.get("level")
        if isinstance(level, str) and isinstance(getattr(logging, level.upper(), None), int):
            Constants.LOG_LEVEL = level.upper()
        elif level is not None:
            logger.warning("Ignoring invalid logging.level: %r", level)
        fmt = log_cfg.get("format")
        if isinstance(fmt, str) and fmt.strip():
            Constants.LOG_FORMAT = fmt

    lock_cfg = cfg.get("lockfile")
    if isinstance(lock_cfg, dict) and "indent" in lock_cfg:
        try:
            indent = int(lock_cfg["indent"])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid lockfile.indent: %r", lock_cfg["indent"])
        else:
            if indent >= 0:
                Constants.LOCK_FILE_INDENT = indent
            else:
                logger.warning("Ignoring negative lockfile.indent: %d", indent)


# Apply YAML overrides once at import time.
apply_config(_load_yaml_config())
