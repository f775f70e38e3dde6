from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_LOG_NAME = "applib"
DEFAULT_LOG_FILENAME = "applib.log"


def configure_logging(
    *,
    app_name: str = DEFAULT_LOG_NAME,
    base_dir: Path | None = None,
    level: str | int = logging.INFO,
) -> logging.Logger:
    """
    Configure application logging with a console handler and, when `base_dir`
    is given, a file handler as well.
    Subsequent calls return the already-configured logger.
    """
    logger = logging.getLogger(app_name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if base_dir is not None:
        log_path = Path(base_dir) / DEFAULT_LOG_FILENAME
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
