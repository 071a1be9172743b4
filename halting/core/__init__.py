"""
Halting core components.

The computation registry and the output sinks the assessor reports through.
"""

from halting.core.registry import (
    ComputationRegistry,
    RegistryConfigurationError,
    build_registry,
)
from halting.core.sink import CapturingSink, ConsoleSink, OutputSink

__all__ = [
    "ComputationRegistry",
    "RegistryConfigurationError",
    "build_registry",
    "CapturingSink",
    "ConsoleSink",
    "OutputSink",
]
