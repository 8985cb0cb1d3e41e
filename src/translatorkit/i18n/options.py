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
"""Validated shape of the ``translator`` configuration mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from translatorkit.i18n.exceptions import InvalidTranslatorConfigError


class TranslationFileOptions(BaseModel):
    """One explicitly listed translation file."""

    model_config = ConfigDict(extra="ignore")

    type: str
    filename: str
    text_domain: str = "default"
    locale: str | None = None


class TranslationFilePatternOptions(BaseModel):
    """A directory plus a filename pattern containing ``{locale}``."""

    model_config = ConfigDict(extra="ignore")

    type: str
    base_dir: str
    pattern: str
    text_domain: str = "default"


class RemoteTranslationOptions(BaseModel):
    """A remote loader registered for one text domain."""

    model_config = ConfigDict(extra="ignore")

    type: str
    text_domain: str = "default"


class TranslatorOptions(BaseModel):
    """Options accepted by :meth:`Translator.from_config`."""

    model_config = ConfigDict(extra="ignore")

    locale: str | None = None
    fallback_locale: str | None = None
    log_missing_translations: bool = False
    translation_files: list[TranslationFileOptions] = Field(default_factory=list)
    translation_file_patterns: list[TranslationFilePatternOptions] = Field(default_factory=list)
    remote_translation: list[RemoteTranslationOptions] = Field(default_factory=list)

    @classmethod
    def parse(cls, options: Mapping[str, Any]) -> TranslatorOptions:
        """Validate *options*, raising ``InvalidTranslatorConfigError`` on failure."""
        if not isinstance(options, Mapping):
            raise InvalidTranslatorConfigError(
                f"Translator options must be a mapping, got {type(options).__name__}"
            )
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            raise InvalidTranslatorConfigError(f"Invalid translator configuration:\n{exc}") from exc
