"""
loguru sinks and the shared bound logger

- stdout sink always; hourly-rotated file sink under LOG_DIR when DEBUG
  (TEST_LOG_DIR redirects it during test runs)
- every record carries the current service context, resolved per record so
  a name registered after import still applies
- standard-library logging (granian, SQLAlchemy, httpx) is routed into loguru
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING, Any
import zoneinfo

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Record

from movie_booking.platform.config.core_setting import settings
from movie_booking.platform.constant.path import LOG_DIR
from movie_booking.platform.logging.service_context import get_service_context


LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

SENSITIVE_KEYWORDS = {
    'password',
    'phone',
}

# Loggers too chatty to forward below INFO
QUIET_LOGGERS = ('httpcore', 'asyncio')

chain_start_time_var: ContextVar[float] = ContextVar('first_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _attach_service_context(record: 'Record') -> None:
    record['extra'][ExtraField.SERVICE_CONTEXT] = get_service_context()


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'


def _log_file_path() -> str:
    hour = datetime.now(zoneinfo.ZoneInfo(settings.TIMEZONE)).strftime('%Y-%m-%d_%H')
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{LOG_DIR}/{prefix}{hour}.log'


def _sinks() -> list[dict[str, Any]]:
    sinks: list[dict[str, Any]] = [
        {'sink': sys.stdout, 'format': io_log_format, 'level': min_log_level, 'enqueue': True}
    ]
    if settings.DEBUG:
        sinks.append(
            {
                'sink': _log_file_path(),
                'format': io_log_format,
                'level': min_log_level,
                'rotation': '1 hour',
                'retention': '7 days',
                'compression': 'gz',
                'enqueue': True,
            }
        )
    return sinks


loguru_logger.configure(handlers=_sinks(), patcher=_attach_service_context)
custom_logger = loguru_logger.bind(
    **{ExtraField.CHAIN_START_TIME: '', ExtraField.CALL_TARGET: ''}
)


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno < logging.INFO and record.name.startswith(QUIET_LOGGERS):
            return

        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging's own frames so the record points at the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
