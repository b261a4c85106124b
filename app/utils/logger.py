import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import structlog


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_RENDERER = os.getenv("LOG_RENDERER", "json").lower()
LOG_FILE = LOG_DIR / "application.log"
ERROR_LOG_FILE = LOG_DIR / "error.log"
MAX_BYTES = 50 * 1024 * 1024  # 50 MB
BACKUP_COUNT = 14


def _file_handlers(plain_formatter, error_formatter):
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        LOG_FILE, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(plain_formatter)

    error_file_handler = RotatingFileHandler(
        ERROR_LOG_FILE,
        maxBytes=MAX_BYTES // 2,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(error_formatter)

    return [file_handler, error_file_handler]


def configure_logging():
    """Configure stdlib handlers and structlog for the job board service."""
    plain_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(processName)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    error_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(processName)s | %(name)s | %(pathname)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(plain_formatter)
    handlers = [console_handler]

    # File logging is opt-out so test runs and containers can stay on stdout
    if os.getenv("LOG_TO_FILE", "true").lower() == "true":
        handlers.extend(_file_handlers(plain_formatter, error_formatter))

    logging.basicConfig(level=LOG_LEVEL, handlers=handlers)

    for noisy in ("httpx", "asyncio", "aiosqlite", "sqlalchemy.engine.Engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if LOG_RENDERER == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("job_board")


logger = configure_logging()
