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
"""StructlogAdapter — the structlog pipeline behind translatorkit's events."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from translatorkit.core.config import Config
from translatorkit.logging.properties import LoggingProperties

logger = structlog.get_logger("translatorkit.logging")

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
)


class StructlogAdapter:
    """:class:`LoggingPort` rendering structlog events through stdlib logging.

    Events carry logger name, level and an ISO timestamp, and are rendered
    as console lines or JSON objects on *stream* (stdout by default). The
    library's own loggers (``translatorkit.i18n``, ``translatorkit.mvc``,
    ...) get explicit levels, so an entry such as
    ``level: {translatorkit.i18n: DEBUG}`` turns on missing-translation
    events without touching the rest.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._properties = LoggingProperties()

    @property
    def properties(self) -> LoggingProperties:
        """Settings applied by the last :meth:`configure` call."""
        return self._properties

    def configure(self, config: Config) -> None:
        self._properties = config.bind(LoggingProperties)

        structlog.configure(
            processors=[*_SHARED_PROCESSORS, *self._renderers()],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=self._stream or sys.stdout,
            level=self._properties.root_level,
            force=True,
        )
        for name, level in self._properties.logger_levels().items():
            logging.getLogger(name).setLevel(level)

        logger.debug(
            "logging_configured",
            format=self._properties.format,
            root_level=self._properties.root_level,
        )

    def _renderers(self) -> list[structlog.types.Processor]:
        if self._properties.format == "json":
            return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        return [structlog.dev.ConsoleRenderer()]
