"""API routes for the parameter server."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from random_string_parameter.config.schema import PluginConfig
from random_string_parameter.parameters.base import ParameterDescriptor
from random_string_parameter.parameters.registry import get_all_descriptors, get_descriptor

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    root_url: str


class DescriptorSummary(BaseModel):
    """A registered parameter type."""

    type_name: str
    display_name: str
    help_file: str


class ValidationResponse(BaseModel):
    """Result of the form validation callback."""

    kind: str
    message: str | None = None
    error_type: str | None = None


class ParameterValueResponse(BaseModel):
    """A bound parameter value."""

    name: str
    value: str
    description: str | None = None


class BindRequest(BaseModel):
    """Submitted parameter form, bound to a value."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    value: str | None = None
    description: str | None = None
    failed_validation_message: str | None = Field(default=None, alias="failedValidationMessage")


def _descriptor_or_404(type_name: str) -> ParameterDescriptor:
    try:
        return get_descriptor(type_name)
    except KeyError:
        raise HTTPException(
            status_code=404, detail=f"Unknown parameter type '{type_name}'"
        ) from None


def _help_endpoint(descriptor: ParameterDescriptor) -> Callable[[], Awaitable[HTMLResponse]]:
    async def help_page() -> HTMLResponse:
        return HTMLResponse(descriptor.help_text)

    return help_page


def create_router(config: PluginConfig) -> APIRouter:
    """Create API router exposing the registered parameter types.

    Args:
        config: Plugin configuration

    Returns:
        Configured API router
    """
    router = APIRouter()

    @router.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Health check endpoint."""
        from random_string_parameter import __version__

        return HealthResponse(
            status="healthy",
            version=__version__,
            root_url=config.server.root_url,
        )

    @router.get("/parameters", response_model=list[DescriptorSummary])
    async def list_parameters() -> list[DescriptorSummary]:
        """List registered parameter types."""
        return [DescriptorSummary(**d.summary()) for d in get_all_descriptors().values()]

    @router.get("/parameters/{type_name}/validate", response_model=ValidationResponse)
    async def validate_value(
        type_name: str,
        value: str = Query(default=""),
        failed_validation_message: str | None = Query(
            default=None, alias="failedValidationMessage"
        ),
    ) -> ValidationResponse:
        """Validate a user-entered value.

        Both outcomes are returned with status 200; the form shows the
        message next to the field.
        """
        descriptor = _descriptor_or_404(type_name)
        result = descriptor.do_validate(failed_validation_message, value)
        return ValidationResponse(**result.to_dict())

    @router.get("/parameters/{type_name}/default", response_model=ParameterValueResponse)
    async def default_value(
        type_name: str,
        name: str = Query(..., min_length=1),
        description: str | None = Query(default=None),
    ) -> ParameterValueResponse:
        """Generate the default value a new build would get."""
        descriptor = _descriptor_or_404(type_name)
        definition = descriptor.new_instance(name=name, description=description)
        return ParameterValueResponse(**definition.get_default_parameter_value().to_dict())

    @router.post("/parameters/{type_name}/value", response_model=ParameterValueResponse)
    async def bind_form(type_name: str, request: BindRequest) -> ParameterValueResponse:
        """Bind a submitted JSON form into a parameter value."""
        descriptor = _descriptor_or_404(type_name)
        definition = descriptor.new_instance(
            name=request.name,
            description=request.description,
            failedValidationMessage=request.failed_validation_message,
        )
        data: dict[str, Any] = {"name": request.name, "value": request.value}
        return ParameterValueResponse(**definition.create_value_from_json(data).to_dict())

    @router.get("/parameters/{type_name}/bind", response_model=ParameterValueResponse)
    async def bind_query(
        type_name: str,
        request: Request,
        name: str = Query(..., min_length=1),
        description: str | None = Query(default=None),
    ) -> ParameterValueResponse:
        """Bind the query parameter named ``name``, or generate a default."""
        descriptor = _descriptor_or_404(type_name)
        definition = descriptor.new_instance(name=name, description=description)
        params = {key: request.query_params.getlist(key) for key in request.query_params.keys()}
        return ParameterValueResponse(**definition.create_value_from_query(params).to_dict())

    # Help pages live at the path each descriptor advertises
    for descriptor in get_all_descriptors().values():
        if not descriptor.help_file:
            continue

        router.add_api_route(
            descriptor.help_file,
            _help_endpoint(descriptor),
            methods=["GET"],
            response_class=HTMLResponse,
            include_in_schema=False,
        )
        logger.debug("Serving help for '%s' at %s", descriptor.type_name, descriptor.help_file)

    return router
