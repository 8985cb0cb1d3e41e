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
"""Registry exceptions — failures while looking up or creating services."""

from __future__ import annotations

from translatorkit.kernel.exceptions import InfrastructureException


class ServiceCreationException(InfrastructureException):
    """Base error for service registry wiring problems."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(
            message=f"Service '{name}': {reason}",
            code="SERVICE_REGISTRY",
            context={"service": name},
        )


class ServiceNotFoundError(ServiceCreationException):
    """No service, factory, or alias is registered under the requested name."""

    def __init__(self, name: str, suggestions: list[str] | None = None) -> None:
        self.suggestions = suggestions or []
        headline = f"No service named '{name}' is registered"

        lines = [f"ServiceNotFoundError: {headline}"]
        lines.append("")
        lines.append("  Suggestions:")
        lines.append("    - Register it with set_service() or set_factory()")
        lines.append("    - Check that ServiceRegistryConfig was applied to this registry")
        if self.suggestions:
            lines.append("")
            lines.append(f"  Similar registered names: {', '.join(self.suggestions)}")

        ServiceCreationException.__init__(self, name, headline)
        self.args = ("\n".join(lines),)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class ServiceOverrideError(ServiceCreationException):
    """A name is already registered and the registry does not allow overrides."""

    def __init__(self, name: str) -> None:
        ServiceCreationException.__init__(
            self,
            name,
            "already registered; set allow_override=True to replace it",
        )


class CircularServiceReferenceError(ServiceCreationException):
    """A factory asked for a service that is still being created.

    The ``chain`` attribute holds the creation path in resolution order.
    """

    def __init__(self, *, chain: list[str], current: str) -> None:
        self.chain = chain
        self.current = current
        chain_str = " -> ".join([*chain, current])
        ServiceCreationException.__init__(self, current, f"circular reference: {chain_str}")


class ServiceFactoryError(ServiceCreationException):
    """A registered factory raised while creating its service."""

    def __init__(self, name: str, error: BaseException) -> None:
        ServiceCreationException.__init__(
            self,
            name,
            f"factory raised {type(error).__name__}: {error}",
        )
