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
"""Logging settings bound from ``translatorkit.logging``."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from translatorkit.core.config import config_properties

ROOT = "root"

# Each follows the root level unless configured on its own.
LIBRARY_LOGGERS = (
    "translatorkit.bootstrap",
    "translatorkit.container",
    "translatorkit.i18n",
    "translatorkit.logging",
    "translatorkit.mvc",
)


@config_properties(prefix="translatorkit.logging")
class LoggingProperties(BaseModel):
    """``format`` picks the renderer; ``level`` maps logger names to levels.

    ``level.root`` sets the root logger. A plain string, such as the value
    of ``TRANSLATORKIT_LOGGING_LEVEL``, is read as the root level alone.
    """

    model_config = ConfigDict(extra="ignore")

    format: Literal["console", "json"] = "console"
    level: dict[str, str] = Field(default_factory=lambda: {ROOT: "INFO"})

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_levels(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = {ROOT: value}
        if not isinstance(value, dict):
            return value

        levels: dict[str, str] = {}
        for name, level in value.items():
            normalized = str(level).strip().upper()
            if not isinstance(logging.getLevelName(normalized), int):
                raise ValueError(f"unknown log level {level!r} for logger {name!r}")
            levels[str(name)] = normalized
        levels.setdefault(ROOT, "INFO")
        return levels

    @property
    def root_level(self) -> str:
        return self.level[ROOT]

    def logger_levels(self) -> dict[str, str]:
        """Levels for named loggers: the library's own, then any configured ones."""
        levels = dict.fromkeys(LIBRARY_LOGGERS, self.root_level)
        levels.update((name, level) for name, level in self.level.items() if name != ROOT)
        return levels
