from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from platformdirs import user_log_path

APP_NAME = "nadm"


def get_logger(name: str = "nadm") -> logging.Logger:
    return logging.getLogger(name)


def default_log_dir() -> Path:
    return Path(user_log_path(APP_NAME, appauthor=False))


def configure_logging(
    *,
    level: str = "info",
    format_name: str = "json",
    stream=None,
    log_dir: Path | None = None,
    filename: str = "nadm.log",
) -> None:
    """Install a root handler once.

    The child owns stdout and stderr, so without an explicit stream or log
    directory records go to a NullHandler.
    """
    normalized = level.strip().upper()
    level_value = getattr(logging, normalized, logging.INFO)
    if format_name == "json":
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter("%(levelname)s %(name)s %(message)s")
    root = logging.getLogger()
    root.setLevel(level_value)
    if root.handlers:
        return
    if stream is None:
        if log_dir is None:
            root.addHandler(logging.NullHandler())
            return
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(
            log_dir / filename, encoding="utf-8"
        )
    else:
        handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    payload = {"event": event, **fields}
    logger.info(json.dumps(payload, sort_keys=True, default=str))
