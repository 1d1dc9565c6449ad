# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Structured output for flypager's own loggers.

flypager modules log through ``logging.getLogger(__name__)``. Calling
:func:`configure_logging` attaches a single handler to the ``flypager``
package logger whose formatter runs those records through structlog, sets
the package and per-module levels from ``flypager.logging.level``, and
leaves the root logger alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

from flypager.config.properties import LoggingProperties
from flypager.core.config import Config

PACKAGE_LOGGER = "flypager"
HANDLER_NAME = "flypager-structlog"


def _level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    return getattr(logging, str(value).upper(), logging.WARNING)


def build_formatter(fmt: str = "console") -> structlog.stdlib.ProcessorFormatter:
    """A stdlib formatter that renders records as structlog events."""
    if fmt.lower() == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(config: Config | None = None, stream: IO[str] | None = None) -> logging.Logger:
    """Configure the ``flypager`` logger tree from ``flypager.logging``.

    *config* defaults to the packaged defaults and *stream* to stdout.
    Calling it again replaces the previously installed handler.
    """
    props = (config if config is not None else Config.defaults()).bind(LoggingProperties)
    levels = {str(name): level for name, level in dict(props.level).items()}

    package = logging.getLogger(PACKAGE_LOGGER)
    reset_logging()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(build_formatter(str(props.format)))
    package.addHandler(handler)
    package.setLevel(_level(levels.pop(PACKAGE_LOGGER, "WARNING")))
    package.propagate = bool(props.propagate)

    for name, level in levels.items():
        if not name.startswith(PACKAGE_LOGGER + "."):
            raise ValueError(f"Logger {name!r} in flypager.logging.level is outside the {PACKAGE_LOGGER!r} package")
        logging.getLogger(name).setLevel(_level(level))
    return package


def reset_logging() -> None:
    """Remove the installed handler and restore default levels and propagation."""
    package = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package.handlers):
        if handler.get_name() == HANDLER_NAME:
            package.removeHandler(handler)
            handler.close()
    package.setLevel(logging.NOTSET)
    package.propagate = True
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if name.startswith(PACKAGE_LOGGER + ".") and isinstance(logger, logging.Logger):
            logger.setLevel(logging.NOTSET)
