"""
ParamBinder Backend — FastAPI Binding Dependencies
===================================================

What:  Glue between Starlette requests and the pure ParamBinder.
Why:   Route handlers declare their parameters once, as Depends(...) values,
       and receive bound Python values; failures surface as exceptions that the
       global handlers in main.py turn into 400/500 responses.
How:   get_raw_parameters() decodes query string + form body into a
       RawParameters snapshot. FastAPI caches it per request, so several
       RequestParam dependencies on one route share a single decode.

Usage:
    @router.get("/example")
    async def example(
        username: str = Depends(RequestParam("username", required=True)),
        age: int = Depends(RequestParam("age", TargetType.INTEGER, required=True)),
    ): ...
"""

import logging
from typing import Any, Optional

from fastapi import Depends, Request

from app.schemas.binding import (
    ABSENT,
    BindingSpec,
    ObjectBindingSpec,
    RawParameters,
    TargetType,
)
from app.services.param_binder import param_binder

logger = logging.getLogger(__name__)


async def get_raw_parameters(request: Request) -> RawParameters:
    """
    Decode the request's query string and form body into RawParameters.

    Query-string values come first, form values after, so a key sent in
    both places resolves to its query-string value under first-wins.
    Bodies that are not form-encoded contribute nothing.
    """
    pairs = list(request.query_params.multi_items())
    form = await request.form()
    for key, value in form.multi_items():
        # File parts of a multipart body are not request parameters
        if isinstance(value, str):
            pairs.append((key, value))
    raw = RawParameters.from_pairs(pairs)
    logger.debug("Decoded %d request parameter(s): %s", len(raw), sorted(raw))
    return raw


class RequestParam:
    """
    Dependency binding one request parameter according to a BindingSpec.

    Optional parameters the client did not send are handed to the route
    as None (ABSENT is an internal sentinel of the binder).
    """

    def __init__(
        self,
        name: str = "",
        target_type: TargetType = TargetType.STRING,
        required: bool = False,
        default_value: Optional[str] = None,
    ):
        self.spec = BindingSpec(
            name=name,
            target_type=target_type,
            required=required,
            default_value=default_value,
        )

    async def __call__(self, raw: RawParameters = Depends(get_raw_parameters)) -> Any:
        value = param_binder.bind(self.spec, raw)
        return None if value is ABSENT else value


class RequestParamMap(RequestParam):
    """Dependency binding the whole request as a mapping."""

    def __init__(self, multi_value: bool = False):
        super().__init__(
            target_type=TargetType.MULTI_MAPPING if multi_value else TargetType.MAPPING
        )


class ModelAttribute:
    """Dependency binding several request parameters onto one record."""

    def __init__(self, object_spec: ObjectBindingSpec):
        self.object_spec = object_spec

    async def __call__(self, raw: RawParameters = Depends(get_raw_parameters)) -> Any:
        return param_binder.bind_object(self.object_spec, raw)
