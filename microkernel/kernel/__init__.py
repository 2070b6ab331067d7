"""
Microkernel - dependency injection container and event dispatcher.
"""

from microkernel.kernel.container import Lifecycle, ServiceContainer, ServiceDescriptor
from microkernel.kernel.core import Kernel
from microkernel.kernel.dispatcher import EventDispatcher, ListenerResult, Subscription
from microkernel.kernel.errors import (
    ConfigError,
    KernelError,
    ServiceTypeError,
    UndefinedParameterError,
    UndefinedServiceError,
)
from microkernel.kernel.interface import KernelInterface

__all__ = [
    "ConfigError",
    "EventDispatcher",
    "Kernel",
    "KernelError",
    "KernelInterface",
    "Lifecycle",
    "ListenerResult",
    "ServiceContainer",
    "ServiceDescriptor",
    "ServiceTypeError",
    "Subscription",
    "UndefinedParameterError",
    "UndefinedServiceError",
]
