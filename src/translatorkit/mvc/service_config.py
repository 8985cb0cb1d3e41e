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
"""Minimum registry bootstrap for the translator services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from translatorkit.container.registry import ServiceRegistry
from translatorkit.core.config import Config
from translatorkit.i18n.capability import I18nProperties, IntlCapability
from translatorkit.mvc.service import (
    CONFIG,
    TRANSLATOR_PLUGIN_MANAGER,
    TranslatorPluginManagerFactory,
    TranslatorServiceFactory,
)

MVC_TRANSLATOR = "MvcTranslator"
TRANSLATOR_ALIAS = "translator"


class ServiceRegistryConfig:
    """Registers ``Config``, ``TranslatorPluginManager`` and ``MvcTranslator``.

    ``translator`` is an alias of ``MvcTranslator``. When *config* is a
    :class:`Config`, the locale capability and default locale are read
    from its ``translatorkit.i18n`` section unless given explicitly.
    """

    def __init__(
        self,
        config: Config | Mapping[str, Any] | None = None,
        intl: IntlCapability | None = None,
        default_locale: str | None = None,
    ) -> None:
        self._config = config
        typed = config if isinstance(config, Config) else None
        self._intl = intl if intl is not None else IntlCapability.detect(typed)
        if default_locale is None and typed is not None:
            default_locale = typed.bind(I18nProperties).default_locale
        self._default_locale = default_locale

    def configure_registry(self, registry: ServiceRegistry) -> ServiceRegistry:
        if self._config is not None:
            registry.set_service(CONFIG, self._config)
        registry.set_factory(TRANSLATOR_PLUGIN_MANAGER, TranslatorPluginManagerFactory())
        registry.set_factory(
            MVC_TRANSLATOR,
            TranslatorServiceFactory(intl=self._intl, default_locale=self._default_locale),
        )
        registry.set_alias(TRANSLATOR_ALIAS, MVC_TRANSLATOR)
        return registry


def create_registry(
    config: Config | Mapping[str, Any] | None = None,
    *,
    intl: IntlCapability | None = None,
    default_locale: str | None = None,
    allow_override: bool = False,
) -> ServiceRegistry:
    """Return a new registry with the translator services wired in."""
    registry = ServiceRegistry(allow_override=allow_override)
    return ServiceRegistryConfig(config, intl, default_locale).configure_registry(registry)
