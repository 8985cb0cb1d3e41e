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
"""String-keyed service registry with shared factories and aliases."""

from __future__ import annotations

import difflib
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import structlog

from translatorkit.container.exceptions import (
    CircularServiceReferenceError,
    ServiceCreationException,
    ServiceFactoryError,
    ServiceNotFoundError,
    ServiceOverrideError,
)

logger = structlog.get_logger("translatorkit.container.registry")

ServiceFactory = Callable[["ServiceRegistry"], Any]


@runtime_checkable
class ServiceLocator(Protocol):
    """The read/write surface factories need from a registry."""

    def has(self, name: str) -> bool: ...
    def get(self, name: str) -> Any: ...
    def set_service(self, name: str, service: Any) -> None: ...


@dataclass
class Registration:
    """Metadata for a registered service."""

    name: str
    factory: ServiceFactory | None = None
    shared: bool = True
    instance: Any = field(default=None, repr=False)
    created: bool = False


class ServiceRegistry:
    """Service locator keyed by exact string names.

    Services are either ready instances (``set_service``) or factories
    invoked with the registry on first ``get`` (``set_factory``). Shared
    factories are created once and cached. Aliases point at another name.
    Replacing an existing name requires ``allow_override``.
    """

    def __init__(self, allow_override: bool = False) -> None:
        self._registrations: dict[str, Registration] = {}
        self._aliases: dict[str, str] = {}
        self._creating: dict[str, None] = {}  # insertion-ordered, O(1) lookup
        self._allow_override = allow_override

    @property
    def allow_override(self) -> bool:
        return self._allow_override

    @allow_override.setter
    def allow_override(self, value: bool) -> None:
        self._allow_override = bool(value)

    def set_service(self, name: str, service: Any) -> None:
        """Register a ready-made instance under *name*."""
        self._guard_override(name)
        self._registrations[name] = Registration(name=name, instance=service, created=True)
        logger.debug("service_registered", service=name, kind="instance")

    def set_factory(self, name: str, factory: ServiceFactory, shared: bool = True) -> None:
        """Register a factory called with this registry when *name* is requested."""
        self._guard_override(name)
        self._registrations[name] = Registration(name=name, factory=factory, shared=shared)
        logger.debug("service_registered", service=name, kind="factory", shared=shared)

    def set_alias(self, alias: str, target: str) -> None:
        """Make *alias* resolve to whatever is registered under *target*."""
        self._guard_override(alias)
        self._aliases[alias] = target

    def has(self, name: str) -> bool:
        """Check whether *name* (or the alias chain it starts) is registered."""
        return self._canonical(name) in self._registrations

    def get(self, name: str) -> Any:
        """Return the service registered under *name*, creating it if needed."""
        canonical = self._canonical(name)
        reg = self._registrations.get(canonical)
        if reg is None:
            raise ServiceNotFoundError(name, suggestions=self._similar_names(name))

        if reg.factory is None or (reg.created and reg.shared):
            return reg.instance
        return self._create(reg, reg.factory)

    def registered_names(self) -> list[str]:
        """All registered service names and aliases, sorted."""
        return sorted({*self._registrations, *self._aliases})

    def _create(self, reg: Registration, factory: ServiceFactory) -> Any:
        if reg.name in self._creating:
            raise CircularServiceReferenceError(chain=list(self._creating), current=reg.name)

        self._creating[reg.name] = None
        try:
            instance = factory(self)
        except ServiceCreationException:
            raise
        except Exception as exc:
            raise ServiceFactoryError(reg.name, exc) from exc
        finally:
            self._creating.pop(reg.name, None)

        if reg.shared:
            reg.instance = instance
            reg.created = True
        logger.debug("service_created", service=reg.name, shared=reg.shared)
        return instance

    def _canonical(self, name: str) -> str:
        seen: set[str] = set()
        while name in self._aliases and name not in seen:
            seen.add(name)
            name = self._aliases[name]
        return name

    def _guard_override(self, name: str) -> None:
        exists = name in self._registrations or name in self._aliases
        if exists and not self._allow_override:
            raise ServiceOverrideError(name)
        self._aliases.pop(name, None)

    def _similar_names(self, name: str) -> list[str]:
        return difflib.get_close_matches(name, self.registered_names(), n=5, cutoff=0.4)
