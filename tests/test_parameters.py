"""Parameter store."""

from __future__ import annotations

import pytest

from microkernel import UndefinedParameterError


@pytest.mark.parametrize("value", [None, False, 0, "", [], {}, "text", 3.5])
def test_round_trip_keeps_value_and_existence(kernel, value):
    kernel.set_parameter("key", value)

    assert kernel.get_parameter("key") == value
    assert kernel.has_parameter("key")


def test_values_are_stored_verbatim(kernel):
    factory = lambda k: object()  # noqa: E731
    kernel.set_parameter("factory", factory)

    assert kernel.get_parameter("factory") is factory


def test_set_overwrites(kernel):
    kernel.set_parameter("key", 1)
    kernel.set_parameter("key", 2)

    assert kernel.get_parameter("key") == 2


def test_undefined_parameter_raises(kernel):
    with pytest.raises(UndefinedParameterError) as exc_info:
        kernel.get_parameter("missing")

    assert exc_info.value.key == "missing"
    assert str(exc_info.value) == 'Parameter "missing" is not defined.'
    assert not kernel.has_parameter("missing")


def test_delete_parameter(kernel):
    kernel.set_parameter("key", "value")
    kernel.delete_parameter("key")

    assert not kernel.has_parameter("key")
    with pytest.raises(UndefinedParameterError):
        kernel.get_parameter("key")


def test_delete_missing_parameter_is_noop(kernel):
    kernel.delete_parameter("missing")

    assert kernel.parameter_keys() == []


def test_mapping_access_is_bound_to_parameters(kernel):
    kernel["debug"] = False

    assert "debug" in kernel
    assert kernel["debug"] is False
    assert not kernel.has_service("debug")

    del kernel["debug"]

    assert "debug" not in kernel
    with pytest.raises(UndefinedParameterError):
        kernel["debug"]


def test_mapping_delete_missing_is_noop(kernel):
    del kernel["missing"]


def test_parameters_and_services_are_disjoint(kernel):
    kernel.define_service("db", lambda k: object())

    assert not kernel.has_parameter("db")
    with pytest.raises(UndefinedParameterError):
        kernel.get_parameter("db")
