import sys
from pathlib import Path

from loguru import logger


def setup_logger(level: str = "INFO", log_file: Path | None = None) -> None:
    """Replace loguru's default sink with a console sink and an optional rotating file.

    The console only shows `level` and above; the file always gets DEBUG.
    """
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )
    if log_file is None:
        return
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        sink=str(log_file),
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} | {message}",
        rotation="10 MB",
        retention="1 week",
        encoding="utf-8",
    )
