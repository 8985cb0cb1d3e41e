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
"""i18n exceptions — translator configuration, loading, and plural rules."""

from __future__ import annotations

from translatorkit.kernel.exceptions import InfrastructureException, ValidationException


class InvalidTranslatorConfigError(ValidationException):
    """The ``translator`` configuration mapping is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="TRANSLATOR_CONFIG")


class InvalidLoaderError(ValidationException):
    """A loader name is unknown or resolves to an object of the wrong kind."""

    def __init__(self, message: str, loader: str = "") -> None:
        super().__init__(message, code="TRANSLATOR_LOADER", context={"loader": loader})


class PluralRuleError(ValidationException):
    """A plural-forms expression is malformed or selects a missing form."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="TRANSLATOR_PLURAL_RULE")


class TranslationLoadError(InfrastructureException):
    """A translation resource could not be read or parsed."""

    def __init__(self, message: str, resource: str = "") -> None:
        super().__init__(message, code="TRANSLATOR_LOAD", context={"resource": resource})
