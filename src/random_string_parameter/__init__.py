"""random-string-parameter - Random string build parameter for CI servers.

Contributes a single parameter type to a continuous-integration host: the
default value of each build is a freshly generated 12-character token, and
user-supplied overrides can be checked against an operator-configured
regular expression with real-time feedback.

Key modules:

- :mod:`random_string_parameter.parameters` - Parameter definitions, values, descriptors and the extension registry
- :mod:`random_string_parameter.config` - YAML configuration with pydantic validation
- :mod:`random_string_parameter.server` - HTTP surface for form validation and value binding
- :mod:`random_string_parameter.cli` - Command-line interface
"""

__version__ = "1.0.0"
