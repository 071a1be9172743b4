"""
Pytest configuration and fixtures for Halting tests.
"""

import pytest

from halting.config import reset_config
from halting.core.registry import build_registry
from halting.core.sink import CapturingSink
from halting.services.assessment_service import AssessmentService


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """
    Start every test from default configuration.

    Removes HALTING_* and LOG_LEVEL variables and drops the cached config.
    """
    for name in [
        "HALTING_GRID_SIZE",
        "HALTING_DISTINGUISHED_INDEX",
        "HALTING_INCLUDE_ASSESSOR",
        "HALTING_ASSESSOR_TEST",
        "HALTING_BUFFER_WIDTH",
        "LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def capturing_sink():
    """Sink that records every line written to it."""
    return CapturingSink()


@pytest.fixture
def default_registry():
    """Registry of 8 computations with the assessor at slot 6."""
    return build_registry(size=8, distinguished_index=6)


@pytest.fixture
def assessment_service(default_registry, capturing_sink):
    """AssessmentService over the default registry, specialised test off."""
    return AssessmentService(default_registry, capturing_sink)


@pytest.fixture
def specialised_service(default_registry, capturing_sink):
    """AssessmentService over the default registry, specialised test on."""
    return AssessmentService(default_registry, capturing_sink, assessor_test=True)
