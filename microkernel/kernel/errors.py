"""
Kernel errors.

Every lookup failure is fatal at the point of raise and propagates to the
caller unchanged; the kernel never retries or synthesizes defaults.
"""

from __future__ import annotations

from typing import Any


class KernelError(Exception):
    """Base class for all errors raised by the kernel."""


class UndefinedServiceError(KernelError, LookupError):
    """Raised when a service identifier has no definition."""

    def __init__(self, service_id: str) -> None:
        self.service_id = service_id
        super().__init__(f'Service "{service_id}" is not defined.')


class UndefinedParameterError(KernelError, LookupError):
    """Raised when a parameter key has no stored value."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f'Parameter "{key}" is not defined.')


class ServiceTypeError(KernelError, TypeError):
    """Raised when a resolved service is not of the requested type."""

    def __init__(self, service_id: str, expected: type, actual: Any) -> None:
        self.service_id = service_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'Service "{service_id}" is {type(actual).__name__}, '
            f"expected {expected.__name__}."
        )


class ConfigError(KernelError):
    """Raised when a configuration file cannot be parsed."""
