"""
ParamBinder Backend — Request Parameter Demo Routes
====================================================

What:  A catalogue of endpoints that bind the same two parameters
       (username, age) in different declaration styles.
Why:   Side-by-side handlers make the binding rules observable over HTTP:
       which requests succeed, which return 400, which return 500.
How:   Every handler reads its parameters, logs them and answers "OK".
       Binding is declared with the dependencies from app.dependencies;
       failures are rendered by the global exception handlers in main.py.

Route Inventory (all accept GET and POST):
    /request-param-v1          manual access to the raw parameters
    /request-param-v2          named binding onto differently-named arguments
    /request-param-v3          parameter name equals argument name
    /request-param-v4          declaration omitted → both optional
    /request-param-required    username required, age optional integer
    /request-param-default     username defaults to "guest", age to -1
    /request-param-map         whole request as Dict[str, str]
    /request-param-multi-map   whole request as Dict[str, List[str]]
    /model-attribute-v1        bind onto a HelloData record
    /model-attribute-v2        same, declared implicitly

Status codes:
    200 "OK"  binding succeeded
    400       MissingRequiredError
    500       CoercionFailedError (e.g. ?age=abc for a plain integer)
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.dependencies import ModelAttribute, RequestParam, RequestParamMap, get_raw_parameters
from app.schemas.binding import TargetType
from app.schemas.common import ErrorResponse
from app.schemas.hello import HELLO_DATA_BINDING, HelloData
from app.services.param_binder import parse_integer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Request Params"])

RESPONSE_BODY = "OK"

# Shared by every route: the error envelope for binding failures
_BINDING_RESPONSES = {
    400: {"description": "Required parameter missing", "model": ErrorResponse},
    500: {"description": "Parameter could not be converted", "model": ErrorResponse},
}


def _log_bound(username: Any, age: Any) -> None:
    if settings.log_bound_values:
        logger.info("username=%s, age=%s", username, age)


def _demo_route(path: str, summary: str):
    return router.api_route(
        path,
        methods=["GET", "POST"],
        response_class=PlainTextResponse,
        responses=_BINDING_RESPONSES,
        summary=summary,
    )


@_demo_route("/request-param-v1", "Read parameters from the request by hand")
async def request_param_v1(request: Request) -> PlainTextResponse:
    """
    No binding declarations: the handler pulls values out of the request
    itself and parses `age` on its own. A missing or non-numeric age fails
    the parse and is reported as a 500.
    """
    raw = await get_raw_parameters(request)
    username = raw.first("username")
    age = parse_integer("age", raw.first("age"))
    _log_bound(username, age)
    return PlainTextResponse(RESPONSE_BODY)


@_demo_route("/request-param-v2", "Bind parameters by name onto other argument names")
async def request_param_v2(
    member_name: str = Depends(RequestParam("username", required=True)),
    member_age: int = Depends(RequestParam("age", TargetType.INTEGER, required=True)),
) -> str:
    _log_bound(member_name, member_age)
    return RESPONSE_BODY


@_demo_route("/request-param-v3", "Bind parameters whose names match the arguments")
async def request_param_v3(
    username: str = Depends(RequestParam("username", required=True)),
    age: int = Depends(RequestParam("age", TargetType.INTEGER, required=True)),
) -> str:
    _log_bound(username, age)
    return RESPONSE_BODY


@_demo_route("/request-param-v4", "Bind simple parameters with the declaration left bare")
async def request_param_v4(
    username: Optional[str] = Depends(RequestParam("username")),
    age: int = Depends(RequestParam("age", TargetType.INTEGER)),
) -> str:
    """
    Both parameters are optional, but a plain integer cannot hold "absent":
    /request-param-v4?username=kim fails with a 500.
    """
    _log_bound(username, age)
    return RESPONSE_BODY


@_demo_route("/request-param-required", "Required vs optional parameters")
async def request_param_required(
    username: str = Depends(RequestParam("username", required=True)),
    age: Optional[int] = Depends(RequestParam("age", TargetType.OPTIONAL_INTEGER)),
) -> str:
    """
    /request-param-required            → 400, username is missing
    /request-param-required?username=  → 200, an empty string is present
    /request-param-required?username=kim → 200 with age=None
    """
    _log_bound(username, age)
    return RESPONSE_BODY


@_demo_route("/request-param-default", "Parameters with default values")
async def request_param_default(
    username: str = Depends(
        RequestParam("username", required=True, default_value="guest")
    ),
    age: int = Depends(
        RequestParam("age", TargetType.INTEGER, default_value="-1")
    ),
) -> str:
    """
    Defaults only replace a wholly absent key. ?username= binds "" and
    ?age= is still a conversion failure (500).
    """
    _log_bound(username, age)
    return RESPONSE_BODY


@_demo_route("/request-param-map", "Bind every parameter into one mapping")
async def request_param_map(
    param_map: Dict[str, str] = Depends(RequestParamMap()),
) -> str:
    _log_bound(param_map.get("username"), param_map.get("age"))
    return RESPONSE_BODY


@_demo_route("/request-param-multi-map", "Bind every parameter with all of its values")
async def request_param_multi_map(
    param_map: Dict[str, List[str]] = Depends(RequestParamMap(multi_value=True)),
) -> str:
    _log_bound(param_map.get("username"), param_map.get("age"))
    return RESPONSE_BODY


@_demo_route("/model-attribute-v1", "Bind parameters onto a HelloData record")
async def model_attribute_v1(
    hello_data: HelloData = Depends(ModelAttribute(HELLO_DATA_BINDING)),
) -> str:
    _log_bound(hello_data.username, hello_data.age)
    return RESPONSE_BODY


# v1 and v2 share HELLO_DATA_BINDING; only the handler shape differs
_bind_hello_data = ModelAttribute(HELLO_DATA_BINDING)


@_demo_route("/model-attribute-v2", "Bind onto HelloData with an implicit declaration")
async def model_attribute_v2(hello_data: HelloData = Depends(_bind_hello_data)) -> str:
    _log_bound(hello_data.username, hello_data.age)
    return RESPONSE_BODY
