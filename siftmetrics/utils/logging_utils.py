"""Logging utilities for siftmetrics.

YAML-based logging configuration and namespaced logger lookup. All loggers
live under 'siftmetrics'. The library itself never configures logging on
import; applications call configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import yaml

if TYPE_CHECKING:
    from config.settings import MetricConfig

_NAMESPACE = "siftmetrics"
_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "logging.yaml"


def configure_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    config: Optional["MetricConfig"] = None,
) -> None:
    """Configure logging from the YAML configuration file.

    Falls back to basicConfig if the YAML file is not found.

    Args:
        config_path: Path to logging.yaml (defaults to config/logging.yaml).
        log_level: Override log level (e.g., "DEBUG", "INFO", "WARNING").
        log_file: Also write records to this file.
        config: MetricConfig whose log_level applies when log_level is not
            given explicitly.
    """
    if log_level is None and config is not None:
        log_level = config.log_level
    if config_path is None:
        config_path = str(_DEFAULT_CONFIG_PATH)

    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)

        if log_file:
            file_handler = {
                "class": "logging.FileHandler",
                "filename": log_file,
                "encoding": "utf-8",
            }
            if "standard" in cfg.get("formatters", {}):
                file_handler["formatter"] = "standard"
            cfg.setdefault("handlers", {})["file"] = file_handler
            for logger_cfg in cfg.get("loggers", {}).values():
                logger_cfg.setdefault("handlers", []).append("file")

        if log_level:
            for logger_cfg in cfg.get("loggers", {}).values():
                logger_cfg["level"] = log_level.upper()
            if "root" in cfg:
                cfg["root"]["level"] = log_level.upper()

        logging.config.dictConfig(cfg)
    else:
        logging.basicConfig(
            level=getattr(logging, (log_level or "INFO").upper(), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            filename=log_file,
        )


def get_logger(name: str) -> logging.Logger:
    """Get a namespaced logger under 'siftmetrics'.

    Args:
        name: Module or component name (e.g., "metrics").

    Returns:
        Logger instance with full 'siftmetrics.<name>' namespace.
    """
    if name.startswith(_NAMESPACE):
        return logging.getLogger(name)
    return logging.getLogger(f"{_NAMESPACE}.{name}")
