import logging
import sys
from pathlib import Path

from loguru import logger

from src.book_manager.runtime.context import get_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Loggers whose records would only repeat what the request middleware logs
_DROPPED = {"uvicorn.access"}


class InterceptHandler(logging.Handler):
    """Forward records from the standard ``logging`` module into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.name in _DROPPED:
            return
        # request.error in the middleware already carries the traceback
        if record.name == "uvicorn.error" and record.levelno >= logging.ERROR:
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _route_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True

    # SQL echo is controlled by database.echo, not by the log level
    for name in ("sqlalchemy.engine", "sqlalchemy.pool"):
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.CRITICAL)


def configure_logging() -> None:
    """Install the console sink, the optional file sink and stdlib forwarding."""
    config = get_config()
    settings = config.logging
    verbose_tracebacks = config.app.environment != "production"

    logger.remove()
    # Records logged outside a request still need a request_id for the format
    logger.configure(extra={"request_id": "-"})

    logger.add(
        sys.stderr,
        level=settings.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=verbose_tracebacks,
        diagnose=verbose_tracebacks,
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
            backtrace=verbose_tracebacks,
            diagnose=verbose_tracebacks,
        )

    _route_stdlib_logging()

    logger.info(
        "Logging configured: level={} file={} environment={}",
        settings.level,
        settings.file or "-",
        config.app.environment,
    )
