# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import logging.config
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any

import structlog
from structlog.dev import ConsoleRenderer
from typing_extensions import assert_never


def get_logger(name: str) -> Any:
    """Structlog logger that hands its events to the stdlib logger `name`.

    Until `setup_logging` (or any other stdlib or structlog configuration) is in place, stdlib logging drops debug and
    info events and sends warnings to stderr, so encoding never writes to stdout.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


def setup_logging(*, logging_output: LoggingOutput = LoggingOutput.PRETTY, debug: bool = False) -> None:
    """Route structlog and stdlib logging to a single handler.

    Importing `storable_writer` never configures logging, applications that want the encoder logs call this once.
    """
    timestamper = structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S')

    # processors for stdlib loggers
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    match logging_output:
        case LoggingOutput.NULL:
            handlers = ['null']
        case LoggingOutput.PRETTY:
            handlers = ['pretty']
        case LoggingOutput.JSON:
            handlers = ['json']
        case _:
            assert_never(logging_output)

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'colored': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': ConsoleRenderer(colors=True),
                'foreign_pre_chain': pre_chain,
            },
            'json': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.processors.JSONRenderer(),
                'foreign_pre_chain': pre_chain,
            },
        },
        'handlers': {
            'pretty': {
                'level': 'DEBUG',
                'class': 'logging.StreamHandler',
                'formatter': 'colored',
            },
            'json': {
                'level': 'DEBUG',
                'class': 'logging.StreamHandler',
                'formatter': 'json',
            },
            'null': {
                'class': 'logging.NullHandler',
            },
        },
        'loggers': {
            '': {
                'handlers': handlers,
                'level': 'DEBUG' if debug else 'INFO',
            },
        },
    })

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
