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
"""Application bootstrap — configuration, logging, capability, registry."""

from __future__ import annotations

from pathlib import Path

import structlog

from translatorkit.container.registry import ServiceRegistry
from translatorkit.core.config import Config
from translatorkit.i18n.capability import IntlCapability
from translatorkit.logging.port import LoggingPort
from translatorkit.logging.structlog_adapter import StructlogAdapter
from translatorkit.mvc.service_config import create_registry

logger = structlog.get_logger("translatorkit.bootstrap")


def bootstrap(
    config_path: str | Path | None = None,
    active_profiles: list[str] | None = None,
    *,
    config: Config | None = None,
    logging_port: LoggingPort | None = None,
    allow_override: bool = False,
) -> ServiceRegistry:
    """Load configuration, configure logging, and return a wired registry.

    The locale capability is probed here, once, and handed to the
    translator factory. Pass *config* to skip file loading.
    """
    if config is None:
        config = Config.from_file(config_path, active_profiles) if config_path else Config.defaults()

    (logging_port or StructlogAdapter()).configure(config)

    intl = IntlCapability.detect(config)
    registry = create_registry(config, intl=intl, allow_override=allow_override)

    logger.info(
        "translatorkit_bootstrapped",
        sources=config.loaded_sources,
        intl=intl.available,
        intl_source=intl.source,
    )
    return registry
