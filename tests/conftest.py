"""
Shared pytest fixtures for testing the numtower value types.

This module provides:
- Fixtures for comparing Rational / BigDecimal components
- Utilities for testing Pydantic validation of the frozen models
- Settings and logging isolation
"""

import logging

import pytest
from typing import Any, Type, TypeVar
from pydantic import BaseModel, ValidationError

from numtower.core.config import get_settings
from numtower.core.logging import ROOT_LOGGER_NAME


T = TypeVar('T', bound=BaseModel)


@pytest.fixture
def assert_components():
    """Helper to assert the stored (not reduced) fields of a value."""
    def _assert_components(value: BaseModel, **expected: int) -> None:
        """
        Assert that a model holds exactly the given field values.

        Args:
            value: The Rational or BigDecimal under test
            expected: Field name to expected value
        """
        actual = {name: getattr(value, name) for name in expected}
        assert actual == expected, f"Components differ:\n{actual}\n!=\n{expected}"

    return _assert_components


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised for a model."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that validating data raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model_validate
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class.model_validate(data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'] and e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model survives model_dump / model_validate."""
    def _assert_serialization(model: BaseModel) -> BaseModel:
        serialized = model.model_dump()
        reconstructed = type(model).model_validate(serialized)
        assert reconstructed.model_dump() == serialized
        return reconstructed

    return _assert_serialization


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear the cached settings so environment overrides take effect."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def numtower_logger():
    """Snapshot and restore the package logger around a test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

