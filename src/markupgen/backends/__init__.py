"""Backends rendering the element table (builder module, smoke tests)."""

from .builder_generator import generate_builder_module
from .smoke_test_generator import generate_smoke_tests

__all__ = ["generate_builder_module", "generate_smoke_tests"]
