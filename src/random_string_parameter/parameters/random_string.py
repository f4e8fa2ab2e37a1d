"""Random string parameter type.

String based parameter whose default value is a freshly generated random
token. A user-entered override is accepted as-is when the build is started;
the descriptor can check it against a regular expression so the form gives
real-time feedback.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence
from typing import Any

from random_string_parameter.parameters.base import (
    ParameterDefinition,
    ParameterDescriptor,
    ParameterValue,
)
from random_string_parameter.parameters.registry import extension
from random_string_parameter.parameters.validation import FormValidation, validate

logger = logging.getLogger(__name__)

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
TOKEN_LENGTH = 12
DEFAULT_REGEX = "[a-zA-Z0-9_,-]{8,}"
DISPLAY_NAME = "Random String Parameter"
HELP_FILE = "/plugin/random-string-parameter/help.html"

# Shared by every caller and thread. Not suitable for secrets.
_rng = random.Random()


def create_random_string(rng: random.Random | None = None) -> str:
    """Generate a random token.

    Each of the ``TOKEN_LENGTH`` characters is drawn independently and
    uniformly from ``ALPHABET``.

    Args:
        rng: Generator to draw from; defaults to the shared module generator

    Returns:
        12-character uppercase alphanumeric string
    """
    token = "".join((rng or _rng).choices(ALPHABET, k=TOKEN_LENGTH))
    logger.debug("Generated random string %s", token)
    return token


class RandomStringParameterValue(ParameterValue):
    """Value of a random string parameter for one build."""


class RandomStringParameterDefinition(ParameterDefinition):
    """Build parameter defaulting to a random string."""

    def __init__(
        self,
        name: str,
        failed_validation_message: str | None = None,
        description: str | None = None,
        root_url: str | None = None,
    ) -> None:
        super().__init__(name, description)
        self.failed_validation_message = failed_validation_message
        self._root_url = root_url

    @property
    def default_value(self) -> str:
        """A new random string on every read."""
        return create_random_string()

    @property
    def root_url(self) -> str | None:
        """Root URL of the server hosting the validation endpoint."""
        return self._root_url

    def get_default_parameter_value(self) -> RandomStringParameterValue:
        return RandomStringParameterValue(
            name=self.name,
            value=create_random_string(),
            description=self.description,
        )

    def create_value_from_json(self, data: Mapping[str, Any]) -> RandomStringParameterValue:
        raw = data.get("value")
        return RandomStringParameterValue(
            name=data.get("name") or self.name,
            value="" if raw is None else str(raw),
            # Always the definition's description, never the submitted one
            description=self.description,
        )

    def create_value_from_query(
        self, params: Mapping[str, Sequence[str]]
    ) -> RandomStringParameterValue:
        values = params.get(self.name)
        if not values:
            return self.get_default_parameter_value()
        return RandomStringParameterValue(
            name=self.name,
            value=values[0],
            description=self.description,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "failedValidationMessage": self.failed_validation_message,
            "description": self.description,
        }


@extension
class RandomStringDescriptor(ParameterDescriptor):
    """Descriptor for :class:`RandomStringParameterDefinition`."""

    type_name = "random-string"
    display_name = DISPLAY_NAME
    help_file = HELP_FILE
    help_text = (
        "<div>"
        "<p>Defines a parameter whose default value is a random string of "
        f"{TOKEN_LENGTH} characters drawn from <code>{ALPHABET}</code>.</p>"
        "<p>A value entered when starting the build replaces the generated one. "
        "The entered value is checked against the configured regular expression "
        "and, when it does not match, the <em>failed validation message</em> is "
        "shown (or a generic message naming the expression if none is set).</p>"
        "<p>The generator is not cryptographically secure; do not use the value "
        "as a secret.</p>"
        "</div>"
    )

    def __init__(self) -> None:
        self.regex = DEFAULT_REGEX
        self.root_url: str | None = None

    def configure(self, regex: str | None = None, root_url: str | None = None) -> None:
        if regex is not None:
            self.regex = regex
        if root_url is not None:
            self.root_url = root_url

    def new_instance(self, **config: Any) -> RandomStringParameterDefinition:
        """Create a definition from job configuration.

        Accepts ``name``, ``description`` and the failed validation message
        under either ``failedValidationMessage`` or ``failed_validation_message``.
        """
        message = config.get("failedValidationMessage", config.get("failed_validation_message"))
        return RandomStringParameterDefinition(
            name=config.get("name", ""),
            failed_validation_message=message,
            description=config.get("description"),
            root_url=self.root_url,
        )

    def do_validate(self, failed_validation_message: str | None, value: str | None) -> FormValidation:
        """Validate a user-entered value against the configured regular expression."""
        return validate(self.regex, value, failed_validation_message)
