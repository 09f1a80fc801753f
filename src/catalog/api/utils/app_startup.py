"""Logging setup for the catalog service.

Everything ends up in loguru: the service's own ``logger`` calls and the
stdlib loggers of uvicorn, SQLAlchemy, httpx and passlib. Each record carries
a ``request_id`` and a short ``component`` label, and the JSON file sink
keeps every bound extra (``catalog_source``, ``error_type``, ``status_code``).
"""

import inspect
import logging
import sys
from pathlib import Path

from loguru import logger

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] "
    "<magenta>{extra[component]}</magenta> - "
    "<level>{message}</level>"
)

# Library loggers that are only interesting when something goes wrong
LIBRARY_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "passlib": logging.ERROR,
}

_PACKAGE_PREFIX = "src.catalog."


def component_name(logger_name: str) -> str:
    """``src.catalog.core.services.book.catalog_sync`` -> ``catalog_sync``."""
    if logger_name.startswith(_PACKAGE_PREFIX):
        return logger_name.rsplit(".", 1)[-1]
    return logger_name


def _fill_defaults(record) -> None:
    extra = record["extra"]
    extra.setdefault("request_id", "-")
    extra.setdefault(
        "component", component_name(extra.get("logger_name") or record["name"] or "-")
    )


class StdlibToLoguru(logging.Handler):
    """Forward stdlib log records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # One line per request already comes from the request middleware
        if record.name == "uvicorn.access":
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def configure_logging(config: ConfigData | None = None) -> None:
    """Install the console sink, the optional file sink and the stdlib bridge."""
    config = config or get_config()
    settings = config.logging
    verbose_traces = config.app.environment != "production"

    logger.remove()
    logger.configure(patcher=_fill_defaults)

    logger.add(
        sys.stderr,
        level=settings.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=verbose_traces,
        diagnose=verbose_traces,
    )

    if settings.file:
        log_path = Path(settings.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        as_json = settings.format == "json"
        logger.add(
            str(log_path),
            level=settings.level,
            format="{message}" if as_json else CONSOLE_FORMAT,
            serialize=as_json,
            rotation=f"{settings.max_size_mb} MB",
            retention=settings.backup_count,
            compression="zip",
            enqueue=True,
            backtrace=verbose_traces,
            diagnose=verbose_traces,
        )

    logging.basicConfig(handlers=[StdlibToLoguru()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True
    for name, level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    logger.bind(component="startup").info(
        "Logging ready: level={} file={} format={} environment={}",
        settings.level,
        settings.file or "-",
        settings.format,
        config.app.environment,
    )
