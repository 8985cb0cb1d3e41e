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
"""translatorkit MVC integration — translator adapter and service factories."""

from translatorkit.mvc.service import (
    CONFIG,
    TRANSLATOR_INTERFACE,
    TRANSLATOR_PLUGIN_MANAGER,
    TranslatorPluginManagerFactory,
    TranslatorServiceFactory,
    resolve_translator,
)
from translatorkit.mvc.service_config import (
    MVC_TRANSLATOR,
    TRANSLATOR_ALIAS,
    ServiceRegistryConfig,
    create_registry,
)
from translatorkit.mvc.translator import MvcTranslator

__all__ = [
    "CONFIG",
    "MVC_TRANSLATOR",
    "MvcTranslator",
    "ServiceRegistryConfig",
    "TRANSLATOR_ALIAS",
    "TRANSLATOR_INTERFACE",
    "TRANSLATOR_PLUGIN_MANAGER",
    "TranslatorPluginManagerFactory",
    "TranslatorServiceFactory",
    "create_registry",
    "resolve_translator",
]
