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
"""translatorkit i18n — translators, text domains, and resource loaders.

Import concrete loaders from the loader package::

    from translatorkit.i18n.loaders.mapping import YamlLoader
"""

from translatorkit.i18n.capability import IntlCapability
from translatorkit.i18n.dummy import DummyTranslator
from translatorkit.i18n.exceptions import (
    InvalidLoaderError,
    InvalidTranslatorConfigError,
    PluralRuleError,
    TranslationLoadError,
)
from translatorkit.i18n.loaders.plugin_manager import LoaderPluginManager
from translatorkit.i18n.plural import PluralRule
from translatorkit.i18n.ports.outbound import FileLoader, RemoteLoader, TranslatorInterface
from translatorkit.i18n.text_domain import TextDomain
from translatorkit.i18n.translator import Translator

__all__ = [
    "DummyTranslator",
    "FileLoader",
    "IntlCapability",
    "InvalidLoaderError",
    "InvalidTranslatorConfigError",
    "LoaderPluginManager",
    "PluralRule",
    "PluralRuleError",
    "RemoteLoader",
    "TextDomain",
    "TranslationLoadError",
    "Translator",
    "TranslatorInterface",
]
