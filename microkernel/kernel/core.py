"""
Kernel - the single object an application is assembled around.

Includes a lazy dependency injection container, a parameter store and a
synchronous event dispatcher.

Example:
    kernel = Kernel()
    kernel.set_parameter("greeting", "hello")
    kernel.define_service("greeter", lambda k: Greeter(k.get_parameter("greeting")))
    kernel.subscribe("app.start", "banner", lambda k, args: print("starting"))
    kernel.notify("app.start")
    kernel.run("greeter")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from microkernel.kernel.container import Lifecycle, ServiceContainer, ServiceDescriptor
from microkernel.kernel.dispatcher import Callback, EventDispatcher
from microkernel.kernel.errors import UndefinedParameterError
from microkernel.kernel.interface import KernelInterface

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Kernel(KernelInterface):
    """
    Application kernel.

    Services, parameters and subscriptions live in separate namespaces.
    Mapping-style access (``kernel["key"]``) is bound to parameters.
    """

    def __init__(self) -> None:
        self._container = ServiceContainer(self)
        self._parameters: dict[str, Any] = {}
        self._dispatcher = EventDispatcher(self)

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------

    def define_service(
        self,
        service_id: str,
        factory: Callable[[Kernel], Any],
        lifecycle: Lifecycle | None = None,
    ) -> None:
        """
        Set a service definition.

        Without an explicit lifecycle, ids with a leading underscore are
        transient and all others are singletons.
        """
        self._container.define(service_id, factory, lifecycle)

    def get_service(self, service_id: str, expected: type[T] | None = None) -> T | Any:
        """
        Return a service instance.

        Raises UndefinedServiceError if the id has no definition, and
        ServiceTypeError if ``expected`` is given and does not match.
        """
        return self._container.get(service_id, expected)

    def has_service(self, service_id: str) -> bool:
        """Check whether a definition exists, without resolving it."""
        return self._container.has(service_id)

    def service_ids(self) -> list[str]:
        return self._container.ids()

    def service_descriptor(self, service_id: str) -> ServiceDescriptor:
        return self._container.descriptor(service_id)

    def run(self, service_id: str) -> Any:
        logger.info("Running application entry point: %s", service_id)
        return self._container.get(service_id)

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def get_parameter(self, key: str) -> Any:
        try:
            return self._parameters[key]
        except KeyError:
            raise UndefinedParameterError(key) from None

    def set_parameter(self, key: str, value: Any) -> None:
        self._parameters[key] = value

    def has_parameter(self, key: str) -> bool:
        """True whenever the key is stored, whatever its value."""
        return key in self._parameters

    def delete_parameter(self, key: str) -> None:
        self._parameters.pop(key, None)

    def parameter_keys(self) -> list[str]:
        return list(self._parameters)

    def __getitem__(self, key: str) -> Any:
        return self.get_parameter(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_parameter(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete_parameter(key)

    def __contains__(self, key: object) -> bool:
        return key in self._parameters

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, event: str, listener: str, callback: Callback) -> None:
        self._dispatcher.subscribe(event, listener, callback)

    def notify(self, event: str, arguments: Mapping[str, Any] | None = None) -> None:
        """
        Notify listeners about an event.

        Unknown events are ignored. Listener exceptions propagate.
        """
        self._dispatcher.notify(event, arguments)

    def has_listeners(self, event: str) -> bool:
        return self._dispatcher.has_listeners(event)

    def listeners(self, event: str) -> list[str]:
        return self._dispatcher.listeners(event)

    def __repr__(self) -> str:
        return (
            f"<Kernel services={len(self._container.ids())} "
            f"parameters={len(self._parameters)} "
            f"events={len(self._dispatcher.events())}>"
        )
