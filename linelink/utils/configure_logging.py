import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path, level: str = "INFO") -> None:
    """Configure the ``linelink`` logger to write ``linelink.log`` under ``home``.

    Only the first call installs the handler; later calls adjust the level.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("linelink")
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    if _CONFIGURED:
        return

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "linelink.log"

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
