"""Module-level app for ``uvicorn random_string_parameter.server.asgi:app``.

Reads the default configuration file at import time.
"""

from random_string_parameter.config.loader import load_config
from random_string_parameter.server.app import create_app

app = create_app(load_config())
