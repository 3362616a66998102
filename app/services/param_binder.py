"""
ParamBinder Backend — Parameter Binder (Resolution Logic)
==========================================================

What:  Resolves a declared BindingSpec against the RawParameters of a request,
       producing a coerced value, the ABSENT sentinel, or a BindingError.
Why:   This is the only decision logic in the service: every demo endpoint is
       the same resolution contract under a different declaration.
How:   Pure functions of (spec, raw). No logging, no I/O, no shared state.
Who:   Called by app.dependencies (raising variants) and by tests (pure variants).
When:  Once per declared parameter per request.

Resolution Algorithm (per parameter):
    1. Look up spec.name in raw.
    2. Key absent:
         default set       → coerce the default string
         required          → MissingRequiredError
         nullable target   → ABSENT
         non-nullable int  → CoercionFailedError(raw_value=None)
    3. Key present (even as "") → coerce the FIRST value; a default never
       overrides an explicitly present value.
    4. Coerce:
         string            → unchanged
         (optional) integer → base-10, ASCII digits, optional sign, 32-bit range
         mapping           → whole request, first value per key
         multi_mapping     → whole request, all values per key

Multi-value policy:
    FIRST value wins, for scalar lookups and for MAPPING. This matches what a
    servlet-style getParameter(name) returns.

Concurrency:
    Stateless. One module-level instance is shared by all requests.
"""

import re
from typing import Any, Dict, Optional, Union

from app.exceptions import BindingError, CoercionFailedError, MissingRequiredError
from app.schemas.binding import (
    ABSENT,
    BindingSpec,
    ObjectBindingSpec,
    RawParameters,
    TargetType,
)

# Signed 32-bit range of the integer targets
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

# ASCII only: int() alone would also accept "1_000", " 7 " and non-ASCII digits
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# len(str(2 ** 31)); anything longer is out of range without parsing it
_MAX_SIGNIFICANT_DIGITS = 10


def parse_integer(name: str, value: Optional[str]) -> int:
    """
    Parse a raw parameter value as a base-10 signed 32-bit integer.

    Leading zeros are accepted in any number ("0007" is 7). Only the
    significant digits are handed to int(), so arbitrarily long input is
    rejected by length instead of by the interpreter's digit limit.

    Raises:
        CoercionFailedError: value is None, empty, non-numeric or out of range.
    """
    if value is None or not _INTEGER_PATTERN.fullmatch(value):
        raise CoercionFailedError(name, value)
    digits = value.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        raise CoercionFailedError(name, value)
    number = int(digits or "0")
    if value.startswith("-"):
        number = -number
    if not INT_MIN <= number <= INT_MAX:
        raise CoercionFailedError(name, value)
    return number


class ParamBinder:
    """
    Resolves BindingSpecs and ObjectBindingSpecs against RawParameters.

    Two flavours of every operation:
        resolve / resolve_object:  return the value OR the BindingError
        bind / bind_object:        return the value, raise the BindingError

    The returning flavour is the contract; the raising flavour exists so
    route dependencies can hand errors to the global exception handlers.
    """

    def resolve(self, spec: BindingSpec, raw: RawParameters) -> Union[Any, BindingError]:
        """Resolve one declared parameter. Never raises BindingError."""
        try:
            return self.bind(spec, raw)
        except BindingError as exc:
            return exc

    def bind(self, spec: BindingSpec, raw: RawParameters) -> Any:
        """Resolve one declared parameter, raising on failure."""
        if spec.target_type is TargetType.MAPPING:
            return raw.to_dict()
        if spec.target_type is TargetType.MULTI_MAPPING:
            return raw.to_multi_dict()

        value = raw.first(spec.name)
        if spec.name not in raw:
            if spec.default_value is not None:
                value = spec.default_value
            elif spec.required:
                raise MissingRequiredError(spec.name)
            elif spec.target_type.is_nullable:
                return ABSENT

        return self._coerce(spec, value)

    def resolve_object(
        self, object_spec: ObjectBindingSpec, raw: RawParameters
    ) -> Union[Any, BindingError]:
        """Bind several parameters onto one record. Never raises BindingError."""
        try:
            return self.bind_object(object_spec, raw)
        except BindingError as exc:
            return exc

    def bind_object(self, object_spec: ObjectBindingSpec, raw: RawParameters) -> Any:
        """
        Bind every field spec, then construct the target record.

        Fields are resolved in declaration order; the first failing field
        fails the whole bind. ABSENT fields are omitted so the record's own
        field defaults apply.
        """
        values: Dict[str, Any] = {}
        for field_spec in object_spec.field_specs:
            value = self.bind(field_spec, raw)
            if value is not ABSENT:
                values[field_spec.name] = value
        return object_spec.target(**values)

    def _coerce(self, spec: BindingSpec, value: Optional[str]) -> Any:
        if spec.target_type is TargetType.STRING:
            return value
        # INTEGER with value None lands here: absent, optional, no default
        return parse_integer(spec.name, value)


# Module-level singleton; the binder holds no state
param_binder = ParamBinder()
