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
"""Locale capability — decided once at startup, then passed around as a flag."""

from __future__ import annotations

import importlib
from dataclasses import dataclass

import structlog
from pydantic import BaseModel, ConfigDict, Field

from translatorkit.core.config import Config, config_properties

logger = structlog.get_logger("translatorkit.i18n.capability")

# CPython falls back to an emulated ``locale`` module when this is missing.
NATIVE_LOCALE_MODULE = "_locale"


@config_properties(prefix="translatorkit.i18n")
class I18nProperties(BaseModel):
    """Settings under ``translatorkit.i18n``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    intl: str | bool = "auto"
    default_locale: str = Field(default="en_US", alias="default-locale")


@dataclass(frozen=True)
class IntlCapability:
    """Whether locale-aware translation is available in this process.

    ``source`` records how the answer was reached: ``"config"`` when forced
    by ``translatorkit.i18n.intl``, ``"detected"`` when probed.
    """

    available: bool
    source: str = "config"

    @staticmethod
    def is_available(module_name: str) -> bool:
        """Check if a module is importable."""
        try:
            importlib.import_module(module_name)
            return True
        except ImportError:
            return False

    @classmethod
    def enabled(cls) -> IntlCapability:
        return cls(available=True)

    @classmethod
    def disabled(cls) -> IntlCapability:
        return cls(available=False)

    @classmethod
    def detect(cls, config: Config | None = None) -> IntlCapability:
        """Resolve the capability from config, probing the runtime on ``auto``."""
        properties = (config or Config()).bind(I18nProperties)
        setting = str(properties.intl).strip().lower()

        if setting in ("true", "1", "yes", "on"):
            capability = cls(available=True, source="config")
        elif setting in ("false", "0", "no", "off"):
            capability = cls(available=False, source="config")
        else:
            capability = cls(available=cls.is_available(NATIVE_LOCALE_MODULE), source="detected")

        logger.info("intl_capability", available=capability.available, source=capability.source)
        return capability
