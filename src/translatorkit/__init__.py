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
"""translatorkit — translator resolution for service-registry based applications."""

from translatorkit.bootstrap import bootstrap
from translatorkit.container import ServiceRegistry
from translatorkit.core import Config
from translatorkit.i18n import DummyTranslator, IntlCapability, Translator
from translatorkit.mvc import (
    MvcTranslator,
    TranslatorServiceFactory,
    create_registry,
    resolve_translator,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DummyTranslator",
    "IntlCapability",
    "MvcTranslator",
    "ServiceRegistry",
    "Translator",
    "TranslatorServiceFactory",
    "bootstrap",
    "create_registry",
    "resolve_translator",
]
