import sys
from pathlib import Path

from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | " \
             "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def init_logger(level: str = "INFO", log_dir: str = "", rotation: str = "10 MB"):
    """Replace the loguru sinks with stderr at ``level`` and, if ``log_dir`` is set, a rotating file."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(log_path / "stdkit.log", level=level.upper(), format=LOG_FORMAT, rotation=rotation,
                   encoding="utf-8")
