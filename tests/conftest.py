"""Shared fixtures for the kernel test suite."""

from __future__ import annotations

import logging

import pytest

from microkernel import Kernel
from microkernel.kernel.logging import ROOT_LOGGER


@pytest.fixture
def kernel() -> Kernel:
    return Kernel()


@pytest.fixture
def calls() -> list:
    """Records invocations in order."""
    return []


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
