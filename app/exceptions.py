"""
ParamBinder Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for parameter binding failures.
Why:   Each failure kind maps to a different HTTP status code, so handlers can
       be registered per type instead of inspecting error strings.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Returned by ParamBinder.resolve(); raised by ParamBinder.bind() and by
       the FastAPI dependencies; caught by global handlers.

Exception Hierarchy:
    ParamBinderError (base)
    └── BindingError                 (reason code + parameter name)
        ├── MissingRequiredError     → 400 Bad Request (client can fix)
        └── CoercionFailedError      → 500 Internal Server Error

Design Decision:
    BindingError instances double as result values: resolve() RETURNS them,
    bind() RAISES them. Pure callers (tests, other services) can branch on the
    returned value without try/except; route dependencies simply raise and let
    the global handlers render the response.
"""

import enum
from typing import Any, Dict, Optional


class ParamBinderError(Exception):
    """
    Base exception for all ParamBinder application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only returned for client errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BindingErrorReason(str, enum.Enum):
    """Reason codes carried by every BindingError."""

    MISSING_REQUIRED = "missing_required"
    COERCION_FAILED = "coercion_failed"


class BindingError(ParamBinderError):
    """
    A request parameter could not be bound to its declared target.

    Abstract: only the subclasses, which set `reason`, are instantiated.

    Attributes:
        reason:      BindingErrorReason code
        param_name:  Name of the offending request parameter
    """

    reason: BindingErrorReason

    def __init__(
        self,
        param_name: str,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        reason = getattr(type(self), "reason", None)
        if reason is None:
            raise TypeError(
                f"{type(self).__name__} has no reason code; raise "
                "MissingRequiredError or CoercionFailedError instead"
            )
        ctx = dict(context or {})
        ctx["param"] = param_name
        ctx["reason"] = reason.value
        super().__init__(message=message, context=ctx)
        self.param_name = param_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindingError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.param_name == other.param_name
            and self.context == other.context
        )

    def __hash__(self) -> int:
        return hash((type(self), self.param_name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.param_name!r})"


class MissingRequiredError(BindingError):
    """
    Raised when a required parameter is absent and has no default.

    What:    The client left out a parameter the handler cannot work without.
    When:    GET /request-param-v2 without ?username=...
    HTTP:    400 Bad Request

    Note: `?username=` (present but empty) is NOT missing. Only a wholly
    absent key triggers this error.
    """

    reason = BindingErrorReason.MISSING_REQUIRED

    def __init__(self, param_name: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            param_name=param_name,
            message=f"Required request parameter '{param_name}' is not present",
            context=context,
        )


class CoercionFailedError(BindingError):
    """
    Raised when a raw string value cannot be converted to the target type.

    What:    "abc" (or "", or nothing at all) was offered for an integer.
    When:    GET /request-param-v2?username=kim&age=abc
    HTTP:    500 Internal Server Error

    Why 500 (not 400):
        Declaring the parameter as optional_integer or giving it a default is
        the documented way to avoid this failure. Reaching it means the
        handler's declaration does not match the traffic it receives, which
        is treated as a server-side defect.

    Attributes:
        raw_value: The offending string, or None when the key was absent and
                   the target type cannot represent absence.
    """

    reason = BindingErrorReason.COERCION_FAILED

    def __init__(
        self,
        param_name: str,
        raw_value: Optional[str],
        target_type: str = "integer",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["raw_value"] = raw_value
        ctx["target_type"] = target_type
        if raw_value is None:
            message = (
                f"Request parameter '{param_name}' is absent and cannot be "
                f"represented as a non-nullable {target_type}"
            )
        else:
            message = (
                f"Failed to convert request parameter '{param_name}' "
                f"value {raw_value!r} to {target_type}"
            )
        super().__init__(param_name=param_name, message=message, context=ctx)
        self.raw_value = raw_value
        self.target_type = target_type
