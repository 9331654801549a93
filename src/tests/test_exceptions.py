"""
Tests for the built-in error types.
"""

from __future__ import annotations

import pytest

from customerrors import AbstractError, CircularReference, ErrorNotFound
from customerrors.core import recorded_descriptor


@pytest.mark.parametrize(
    "error_type, name",
    [
        (AbstractError, "customErrors.AbstractError"),
        (ErrorNotFound, "customErrors.ErrorNotFound"),
        (CircularReference, "customErrors.CircularReference"),
    ],
)
def test_builtins_come_from_factory(error_type, name):
    assert error_type.name == name
    assert recorded_descriptor(error_type) is error_type.descriptor
    assert issubclass(error_type, Exception)


def test_abstract_error_message():
    error = AbstractError("app.Base")

    assert error.errorname == "app.Base"
    assert str(error) == "Error app.Base is abstract"


def test_not_found_message():
    error = ErrorNotFound("api.Missing")

    assert error.errorname == "api.Missing"
    assert str(error) == "Error api.Missing is not found in block"


def test_circular_reference_chains_to_not_found():
    error = CircularReference("x.A", ("x.A", "x.B", "x.A"))

    assert isinstance(error, ErrorNotFound)
    assert error.errorname == "x.A"
    assert error.chain == ("x.A", "x.B", "x.A")
    assert str(error) == "Error x.A has a circular parent reference: x.A -> x.B -> x.A"


def test_builtins_are_throwable():
    with pytest.raises(ErrorNotFound, match="api.Missing"):
        raise ErrorNotFound("api.Missing")
