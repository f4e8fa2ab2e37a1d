"""Build parameter types.

Parameter types are contributed by descriptor classes decorated with
``@extension``. Importing this package registers the built-in
``random-string`` type; installed packages can add more through the
``random_string_parameter.extensions`` entry point group.

Usage::

    from random_string_parameter.parameters import get_descriptor

    descriptor = get_descriptor("random-string")
    definition = descriptor.new_instance(name="BUILD_TOKEN")
    value = definition.get_default_parameter_value()
"""

from random_string_parameter.parameters.base import (
    ParameterDefinition,
    ParameterDescriptor,
    ParameterValue,
)
from random_string_parameter.parameters.random_string import (
    ALPHABET,
    DEFAULT_REGEX,
    TOKEN_LENGTH,
    RandomStringDescriptor,
    RandomStringParameterDefinition,
    RandomStringParameterValue,
    create_random_string,
)
from random_string_parameter.parameters.registry import (
    clear_descriptors,
    configure_descriptors,
    discover_extensions,
    extension,
    get_all_descriptors,
    get_descriptor,
)
from random_string_parameter.parameters.validation import (
    FormValidation,
    ValidationErrorType,
    ValidationKind,
    validate,
)

__all__ = [
    "ALPHABET",
    "DEFAULT_REGEX",
    "TOKEN_LENGTH",
    "FormValidation",
    "ParameterDefinition",
    "ParameterDescriptor",
    "ParameterValue",
    "RandomStringDescriptor",
    "RandomStringParameterDefinition",
    "RandomStringParameterValue",
    "ValidationErrorType",
    "ValidationKind",
    "clear_descriptors",
    "configure_descriptors",
    "create_random_string",
    "discover_extensions",
    "extension",
    "get_all_descriptors",
    "get_descriptor",
    "validate",
]
