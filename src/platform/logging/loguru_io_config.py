from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Keys whose values never reach a sink in clear text
SENSITIVE_KEYWORDS = {
    'password',
    'card_number',
    'cvv',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


class GeneratorMethod(StrEnum):
    NEXT = 'next'
    SEND = 'send'
    THROW = 'throw'


def _default_extra() -> dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    """Routes records from the standard logging module (third-party libraries) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


io_log_format = ' | '.join(
    (
        '<g>{time:HH:mm:ss.SSS}</>',
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        '<m>{thread.name}</>',
        f'<c>{{file}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> str:
    log_dir = os.environ.get('TEST_LOG_DIR', str(LOG_DIR))
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{log_dir}/{prefix}{datetime.now().strftime("%Y-%m-%d")}.log'


def configure_sinks(debug: bool) -> None:
    """
    Console always, to stderr (stdout is owned by the interactive prompt).
    A daily file under the log directory only when debug is on.
    """
    level = 'DEBUG' if debug else 'INFO'
    loguru_logger.remove()
    # Worker threads log concurrently; enqueue serializes writes per sink
    loguru_logger.add(sys.stderr, format=io_log_format, level=level, enqueue=True)
    if debug:
        loguru_logger.add(
            _log_file_path(),
            format=io_log_format,
            rotation='00:00',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=level,
        )


custom_logger: 'LoguruLogger' = loguru_logger.bind(**_default_extra())

configure_sinks(settings.DEBUG)

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
