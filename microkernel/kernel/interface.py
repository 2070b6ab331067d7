"""
Kernel interface - the contract shared by every kernel implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any


class KernelInterface(ABC):
    """
    Dependency injection container plus event dispatcher.

    Factories receive the kernel and return a service; callbacks receive
    the kernel and the event arguments.
    """

    # Services

    @abstractmethod
    def define_service(
        self, service_id: str, factory: Callable[[Any], Any], lifecycle: Any = None
    ) -> None: ...

    @abstractmethod
    def get_service(self, service_id: str, expected: type | None = None) -> Any: ...

    @abstractmethod
    def has_service(self, service_id: str) -> bool: ...

    @abstractmethod
    def run(self, service_id: str) -> Any:
        """Resolve the service used as the application entry point."""
        ...

    # Parameters

    @abstractmethod
    def get_parameter(self, key: str) -> Any: ...

    @abstractmethod
    def set_parameter(self, key: str, value: Any) -> None: ...

    @abstractmethod
    def has_parameter(self, key: str) -> bool: ...

    @abstractmethod
    def delete_parameter(self, key: str) -> None: ...

    # Events

    @abstractmethod
    def subscribe(
        self,
        event: str,
        listener: str,
        callback: Callable[[Any, Mapping[str, Any]], Any],
    ) -> None: ...

    @abstractmethod
    def notify(self, event: str, arguments: Mapping[str, Any] | None = None) -> None: ...
