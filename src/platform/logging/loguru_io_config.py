from contextvars import ContextVar
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Use test log directory if in test environment
LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)


# Payment form fields and credentials never reach the log sinks
SENSITIVE_KEYWORDS = {
    'password',
    'card_number',
    'cvv',
    'expiry_date',
    'bank_account',
    'phone_number',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


_DEFAULT_EXTRA = {
    ExtraField.SERVICE_CONTEXT: get_service_context(),
    ExtraField.CHAIN_START_TIME: '',
    ExtraField.CALL_TARGET: '',
}

_QUIET_LOGGERS = ('asyncio', 'httpx', 'httpcore', 'multipart')


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records (uvicorn, fastapi, ...) into loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(_QUIET_LOGGERS):
            return

        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


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


loguru_logger.remove()  # Drop the default sink so every line uses io_log_format
custom_logger: 'LoguruLogger' = loguru_logger.bind(**_DEFAULT_EXTRA)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

# Production uses stdout only
if settings.DEBUG:
    log_filename = (
        'test_{time:YYYY-MM-DD_HH}.log'
        if os.environ.get('TEST_LOG_DIR')
        else '{time:YYYY-MM-DD_HH}.log'
    )
    custom_logger.add(
        f'{LOG_DIR}/{log_filename}',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

for logger_name in ('uvicorn', 'uvicorn.error', 'uvicorn.access', 'fastapi'):
    logging_logger = logging.getLogger(logger_name)
    logging_logger.handlers = [InterceptHandler()]
    logging_logger.propagate = False
