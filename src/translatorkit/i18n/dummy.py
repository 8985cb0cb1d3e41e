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
"""DummyTranslator — the no-op fallback translator."""

from __future__ import annotations


class DummyTranslator:
    """Returns messages untouched.

    Used when no localisation backend is configured or the locale
    capability is unavailable.
    """

    def translate(
        self,
        message: str,
        text_domain: str = "default",  # noqa: ARG002
        locale: str | None = None,  # noqa: ARG002
    ) -> str:
        return message

    def translate_plural(
        self,
        singular: str,
        plural: str,
        number: int,
        text_domain: str = "default",  # noqa: ARG002
        locale: str | None = None,  # noqa: ARG002
    ) -> str:
        return singular if number == 1 else plural

    def __repr__(self) -> str:
        return "DummyTranslator()"
