"""Logging setup for the balance-teams command.

Stdout is reserved for the team report, so console logging goes to
stderr and stays quiet (WARNING) unless ``--log-level`` asks for more.
The rotating file under ``logs/`` always records DEBUG, which includes the
per-trial seeds and standard deviations.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "team_builder.log"


def setup_logging(log_level: str = "WARNING", log_dir: Optional[Path] = None) -> None:
    """Attach the file and stderr handlers to the root logger.

    Does nothing when the root logger already has handlers, so repeated
    calls (or a host that configured logging first) keep their setup.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    log_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    console_level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # 5MB per file, 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=5 * 1024 * 1024, backupCount=3
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()  # stderr
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug(
        "Logging initialized (console=%s, file=%s)",
        logging.getLevelName(console_level), log_dir / LOG_FILE_NAME,
    )
