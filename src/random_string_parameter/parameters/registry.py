"""Parameter type registration and discovery."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from importlib.metadata import entry_points
from typing import Any, TypeVar

from random_string_parameter.parameters.base import ParameterDescriptor

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "random_string_parameter.extensions"

# Global descriptor registry, keyed by type name
_DESCRIPTORS: dict[str, ParameterDescriptor] = {}

D = TypeVar("D", bound=type[ParameterDescriptor])


def extension(cls: D) -> D:
    """Class decorator that registers a parameter descriptor.

    The class is instantiated once and stored under its ``type_name``.

    Example:
        @extension
        class MyDescriptor(ParameterDescriptor):
            type_name = "my-type"
            ...
    """
    descriptor = cls()
    existing = _DESCRIPTORS.get(cls.type_name)
    if existing is not None and type(existing) is not cls:
        logger.warning(
            "Parameter type '%s' already registered by %s, replacing with %s",
            cls.type_name,
            type(existing).__name__,
            cls.__name__,
        )
    _DESCRIPTORS[cls.type_name] = descriptor
    return cls


def get_descriptor(type_name: str) -> ParameterDescriptor:
    """Get a registered descriptor by type name.

    Raises:
        KeyError: If no parameter type is registered under that name
    """
    return _DESCRIPTORS[type_name]


def get_all_descriptors() -> dict[str, ParameterDescriptor]:
    """Get a copy of all registered descriptors."""
    return _DESCRIPTORS.copy()


def clear_descriptors() -> None:
    """Clear all registered descriptors. Used for testing."""
    _DESCRIPTORS.clear()


def discover_extensions(
    group: str = ENTRY_POINT_GROUP,
    blocked: Iterable[str] = (),
    loader: Callable[[str], Iterable[Any]] | None = None,
) -> list[str]:
    """Load parameter types contributed by installed packages.

    Each entry point in ``group`` is imported; importing it is expected to
    register descriptors through :func:`extension`.

    Args:
        group: Entry point group to scan
        blocked: Entry point names to skip
        loader: Returns the entry points of a group; defaults to
            :func:`importlib.metadata.entry_points`

    Returns:
        Type names registered while loading
    """
    blocked = set(blocked)
    before = set(_DESCRIPTORS)

    if loader is None:
        eps: Iterable[Any] = entry_points(group=group)
    else:
        eps = loader(group)

    for ep in eps:
        if ep.name in blocked:
            logger.info("Extension '%s' is blocked, skipping", ep.name)
            continue
        try:
            ep.load()
        except Exception as e:
            logger.warning("Failed to load extension '%s': %s", ep.name, e)
            continue
        logger.debug("Loaded extension '%s'", ep.name)

    return sorted(set(_DESCRIPTORS) - before)


def configure_descriptors(options: Mapping[str, Mapping[str, Any]]) -> None:
    """Apply operator configuration to registered descriptors.

    Args:
        options: Per type name, the keyword options for
            :meth:`ParameterDescriptor.configure`. Unknown type names are
            logged and ignored.
    """
    for type_name, type_options in options.items():
        descriptor = _DESCRIPTORS.get(type_name)
        if descriptor is None:
            logger.warning("No parameter type '%s' registered, ignoring its configuration", type_name)
            continue
        descriptor.configure(**type_options)
