import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_LEVEL_ENV_VAR = "POSTURE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: Optional[str] = None,
    level: Optional[int] = None,
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = False,
    max_size_mb: int = 10,
) -> logging.Logger:
    """
    Configure a logger with a console handler and an optional rotating file.

    ``name=None`` configures the root logger, which covers every module logger.
    Level priority: POSTURE_LOG_LEVEL env var, then the ``level`` argument, then INFO.
    Calling it again for the same name only updates the level.
    """
    env_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_level:
        level = getattr(logging, env_level.upper(), logging.INFO)
    elif level is None:
        level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if enable_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / f"{name or 'posture'}.log",
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def level_from_name(name: str) -> int:
    return getattr(logging, str(name).upper(), logging.INFO)
