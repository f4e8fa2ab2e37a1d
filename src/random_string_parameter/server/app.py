"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from random_string_parameter import __version__
from random_string_parameter.config.schema import PluginConfig
from random_string_parameter.logging_config import setup_logging
from random_string_parameter.parameters import configure_descriptors, discover_extensions
from random_string_parameter.server.routes import create_router

logger = logging.getLogger(__name__)


def create_app(config: PluginConfig) -> FastAPI:
    """Create and configure FastAPI application.

    Discovers installed parameter types, applies the operator configuration
    to every registered descriptor and mounts the routes.

    Args:
        config: Plugin configuration

    Returns:
        Configured FastAPI app
    """
    setup_logging(config.logging.level)

    if config.extensions.discover:
        added = discover_extensions(blocked=config.extensions.blocked)
        if added:
            logger.info("Discovered parameter types: %s", ", ".join(added))

    configure_descriptors(config.descriptor_options())

    app = FastAPI(
        title="Random String Parameter",
        description="Random string build parameter with regular expression validation",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(create_router(config))

    return app
