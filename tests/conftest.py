"""Pytest configuration and shared fixtures."""

import pytest

from random_string_parameter.config.schema import PluginConfig
from random_string_parameter.parameters import DEFAULT_REGEX, RandomStringDescriptor
from random_string_parameter.parameters.registry import _DESCRIPTORS


@pytest.fixture(autouse=True)
def _clean_registry():
    """Restore the descriptor registry and built-in options after each test."""
    before = dict(_DESCRIPTORS)
    yield
    _DESCRIPTORS.clear()
    _DESCRIPTORS.update(before)
    for descriptor in before.values():
        if isinstance(descriptor, RandomStringDescriptor):
            descriptor.regex = DEFAULT_REGEX
            descriptor.root_url = None


@pytest.fixture
def default_config() -> PluginConfig:
    """Provide a default configuration without entry point discovery."""
    config = PluginConfig()
    config.extensions.discover = False
    return config
