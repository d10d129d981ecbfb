import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler

from engine import config

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("-")
        return True


def setup_logging(log_dir: str | None = None) -> None:
    """Configure console and rotating file logging for the reading engine."""
    log_level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    log_format = "%(asctime)s [%(levelname)s] %(name)s [rid=%(request_id)s]: %(message)s"

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    logs_dir = log_dir or config.LOG_DIR
    os.makedirs(logs_dir, exist_ok=True)
    file_path = os.path.join(logs_dir, "tarot_timer.log")

    file_handler = RotatingFileHandler(
        file_path, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
    )
    handlers.append(file_handler)

    filter_instance = RequestIdFilter()
    for handler in handlers:
        handler.addFilter(filter_instance)

    logging.basicConfig(level=log_level, format=log_format, handlers=handlers, force=True)


__all__ = ["setup_logging", "request_id_var", "RequestIdFilter"]
