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
"""Unified exception hierarchy for translatorkit.

All library exceptions inherit from TranslatorKitException, so callers can
catch one base type or target a specific category.

Categories:
- BusinessException: invalid input such as malformed translator options
- InfrastructureException: registry wiring failures and unreadable resources
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class TranslatorKitException(Exception):
    """Base exception for all translatorkit errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "TRANSLATOR_CONFIG").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# ---------------------------------------------------------------------------
# Business
# ---------------------------------------------------------------------------


class BusinessException(TranslatorKitException):
    """Caller-supplied data violates a rule of the library."""


class ValidationException(BusinessException):
    """Input validation failures."""


class ResourceNotFoundException(BusinessException):
    """Requested resource does not exist."""


# ---------------------------------------------------------------------------
# Infrastructure
# ---------------------------------------------------------------------------


class InfrastructureException(TranslatorKitException):
    """Infrastructure failures: service wiring, file system, remote loaders."""
