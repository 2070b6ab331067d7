"""
microkernel - a minimal application kernel.

A lazy service container, a parameter store and a synchronous event
dispatcher, all on one object.
"""

from microkernel.kernel import (
    Kernel,
    KernelError,
    KernelInterface,
    Lifecycle,
    ListenerResult,
    ServiceTypeError,
    UndefinedParameterError,
    UndefinedServiceError,
)

__version__ = "1.0.0"

__all__ = [
    "Kernel",
    "KernelError",
    "KernelInterface",
    "Lifecycle",
    "ListenerResult",
    "ServiceTypeError",
    "UndefinedParameterError",
    "UndefinedServiceError",
    "__version__",
]
