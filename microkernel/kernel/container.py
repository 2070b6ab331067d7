"""
Service container - lazy construction and caching of named services.

Services are registered as factories taking the owning kernel. Singleton
results are kept in an explicit resolved cache; transient factories run
on every access.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, auto
from typing import Any, TypeVar

from microkernel.kernel.errors import ServiceTypeError, UndefinedServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Leading marker that flags an identifier as transient when no lifecycle is given
TRANSIENT_MARKER = "_"


class Lifecycle(Enum):
    """Service lifecycle type."""

    # Resolved once per definition, then reused
    SINGLETON = auto()
    # Resolved anew on every access
    TRANSIENT = auto()

    @classmethod
    def infer(cls, service_id: str) -> Lifecycle:
        """
        Infer the lifecycle from the identifier spelling.

        One or more leading underscores mark a transient service.
        """
        if service_id.startswith(TRANSIENT_MARKER):
            return cls.TRANSIENT
        return cls.SINGLETON


class ServiceDescriptor:
    """Records how to create a single service."""

    __slots__ = ("service_id", "factory", "lifecycle")

    def __init__(
        self,
        service_id: str,
        factory: Callable[[Any], Any],
        lifecycle: Lifecycle,
    ) -> None:
        self.service_id = service_id
        self.factory = factory
        self.lifecycle = lifecycle

    def __repr__(self) -> str:
        return f"ServiceDescriptor({self.service_id!r}, {self.lifecycle.name})"


class ServiceContainer:
    """
    Service container owned by a single kernel.

    The owner is what every factory receives; the container itself is
    never handed out.
    """

    def __init__(self, owner: Any) -> None:
        self._owner = owner
        # id -> descriptor, in definition order
        self._definitions: dict[str, ServiceDescriptor] = {}
        # id -> resolved singleton
        self._resolved: dict[str, Any] = {}

    def define(
        self,
        service_id: str,
        factory: Callable[[Any], Any],
        lifecycle: Lifecycle | None = None,
    ) -> ServiceDescriptor:
        """
        Register (or replace) a service definition.

        Replacing a definition drops any value cached for the old one.
        """
        if not callable(factory):
            raise TypeError(f'Factory for service "{service_id}" is not callable.')
        if lifecycle is None:
            lifecycle = Lifecycle.infer(service_id)

        descriptor = ServiceDescriptor(service_id, factory, lifecycle)
        self._definitions[service_id] = descriptor
        self._resolved.pop(service_id, None)

        logger.debug("Defined service %s (%s)", service_id, lifecycle.name)
        return descriptor

    def get(self, service_id: str, expected: type[T] | None = None) -> T | Any:
        """Resolve a service, optionally checking its type."""
        descriptor = self._definitions.get(service_id)
        if descriptor is None:
            raise UndefinedServiceError(service_id)

        instance = self._create_instance(descriptor)
        if expected is not None and not isinstance(instance, expected):
            raise ServiceTypeError(service_id, expected, instance)
        return instance

    def _create_instance(self, descriptor: ServiceDescriptor) -> Any:
        if descriptor.lifecycle is Lifecycle.TRANSIENT:
            return descriptor.factory(self._owner)

        service_id = descriptor.service_id
        if service_id in self._resolved:
            return self._resolved[service_id]

        instance = descriptor.factory(self._owner)
        # The factory may have redefined this id while running
        if self._definitions.get(service_id) is descriptor:
            self._resolved[service_id] = instance
        logger.debug("Resolved singleton %s", service_id)
        return instance

    def has(self, service_id: str) -> bool:
        return service_id in self._definitions

    def descriptor(self, service_id: str) -> ServiceDescriptor:
        descriptor = self._definitions.get(service_id)
        if descriptor is None:
            raise UndefinedServiceError(service_id)
        return descriptor

    def ids(self) -> list[str]:
        """All defined ids, in definition order."""
        return list(self._definitions)
