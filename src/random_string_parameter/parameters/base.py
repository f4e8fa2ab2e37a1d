"""Base types for build parameter extensions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from random_string_parameter.parameters.validation import FormValidation


@dataclass
class ParameterValue:
    """The concrete value bound to a parameter for one build run."""

    name: str
    value: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "description": self.description}


class ParameterDefinition(ABC):
    """An input a build job accepts.

    Subclasses supply the default value and know how to bind submitted form
    data or query parameters into a :class:`ParameterValue`.
    """

    def __init__(self, name: str, description: str | None = None) -> None:
        if not name:
            raise ValueError("Parameter name must not be empty")
        self.name = name
        self.description = description

    @abstractmethod
    def get_default_parameter_value(self) -> ParameterValue:
        """Value used when a build is started without an explicit one."""

    @abstractmethod
    def create_value_from_json(self, data: Mapping[str, Any]) -> ParameterValue:
        """Bind a submitted JSON form object into a value.

        Args:
            data: Form object, e.g. ``{"name": "TOKEN", "value": "ABC"}``

        Returns:
            Bound parameter value
        """

    @abstractmethod
    def create_value_from_query(self, params: Mapping[str, Sequence[str]]) -> ParameterValue:
        """Bind request query parameters into a value.

        Args:
            params: Query parameters, each name mapping to all submitted values

        Returns:
            Bound parameter value
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class ParameterDescriptor(ABC):
    """Metadata for one parameter type.

    Exposes the display name and help page shown by the host, builds
    definitions from job configuration, and answers the server-side
    validation callback for form fields.
    """

    type_name: ClassVar[str]
    display_name: ClassVar[str]
    help_file: ClassVar[str]
    help_text: ClassVar[str] = ""

    @abstractmethod
    def new_instance(self, **config: Any) -> ParameterDefinition:
        """Create a parameter definition from job configuration."""

    @abstractmethod
    def do_validate(self, failed_validation_message: str | None, value: str | None) -> FormValidation:
        """Validate a user-entered value for this parameter type."""

    def configure(self, **options: Any) -> None:
        """Apply operator configuration. The default accepts nothing."""
        if options:
            raise TypeError(f"{type(self).__name__} takes no options: {sorted(options)}")

    def summary(self) -> dict[str, str]:
        return {
            "type_name": self.type_name,
            "display_name": self.display_name,
            "help_file": self.help_file,
        }
