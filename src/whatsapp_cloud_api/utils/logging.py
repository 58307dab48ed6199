from __future__ import annotations
import logging
import logging.config
import os
from pathlib import Path
from typing import Optional
import yaml

PACKAGE_LOGGER = "whatsapp_cloud_api"
LOGGING_CONFIG_ENV = "WHATSAPP_CLOUD_API_LOGGING"
DEFAULT_LOGGING_CONFIG = "configs/logging.yaml"


def setup_logging(config_path: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    Configure logging for the client.

    The YAML file is taken from config_path, then the WHATSAPP_CLOUD_API_LOGGING
    environment variable, then configs/logging.yaml. A missing file falls back
    to basicConfig. `level` overrides the package logger level afterwards.
    """
    path = Path(config_path or os.environ.get(LOGGING_CONFIG_ENV) or DEFAULT_LOGGING_CONFIG)
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            logging.config.dictConfig(yaml.safe_load(f))
    else:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    if level:
        logging.getLogger(PACKAGE_LOGGER).setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
