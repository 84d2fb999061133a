"""
Logging setup for the openings service.

One stdout handler on the root logger, emitting JSON lines in production and
plain text locally. SQL statement logging follows the DB_ECHO setting rather
than SQLAlchemy's own ``echo`` handler, so statements come out in the same
format as everything else.
"""

import logging
import sys
from typing import Any, Dict
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Library loggers that would drown request logs at INFO
QUIET_LOGGERS = ("uvicorn.access", "multipart")


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter stamping every record with the service name.

    Warnings and errors also carry ``where`` (module:function:line).
    """

    def __init__(self, *args, service: str = "openings-api", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z')
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = self.service

        if record.levelno >= logging.WARNING:
            log_record['where'] = f"{record.module}:{record.funcName}:{record.lineno}"


def sql_log_level(sql_echo: bool) -> int:
    """INFO shows every statement SQLAlchemy emits; WARNING hides them."""
    return logging.INFO if sql_echo else logging.WARNING


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    sql_echo: bool = False,
    service: str = "openings-api"
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Root level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON lines when True, human-readable text otherwise
        sql_echo: Log SQL statements (the DB_ECHO setting)
        service: Name written into every JSON record
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        console_handler.setFormatter(ServiceJsonFormatter('%(message)s', service=service))
    else:
        console_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(console_handler)

    logging.getLogger("sqlalchemy.engine").setLevel(sql_log_level(sql_echo))
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
