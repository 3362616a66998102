"""
ParamBinder Backend — Binding Data Model
=========================================

What:  The value types the binder works with: RawParameters (what the client
       sent), BindingSpec / ObjectBindingSpec (what a handler declared) and the
       ABSENT sentinel (what a nullable parameter resolves to when not sent).
Why:   Handlers declare their parameters as explicit values instead of relying
       on signature reflection, so the binding contract can be tested on its own.
How:   RawParameters is a read-only Mapping of name → tuple of values.
       Specs are frozen Pydantic models, validated once at declaration time.
Who:   Built by app.dependencies (RawParameters) and the route modules (specs);
       consumed by app.services.param_binder.
When:  Specs are created at import time; RawParameters once per request.
"""

import enum
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, Field, model_validator


# ══════════════════════════════════════════════════════════════════════════
# Raw Request Parameters
# ══════════════════════════════════════════════════════════════════════════


class RawParameters(Mapping):
    """
    Immutable multi-value view of a request's query string and form body.

    ``raw["age"]`` returns the full tuple of values in arrival order.
    ``raw.first("age")`` returns the first value, or None if the key is absent.

    Keys are case-sensitive. A key may map to ("",) when the client sent
    ``?age=``; that key is present, not absent.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Iterable[str]]] = None):
        frozen: Dict[str, Tuple[str, ...]] = {}
        for key, values in (data or {}).items():
            if isinstance(values, str):
                values = (values,)
            values = tuple(values)
            if values:
                frozen[key] = values
        self._data = MappingProxyType(frozen)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "RawParameters":
        """Build from (name, value) pairs, keeping duplicate keys in order."""
        grouped: Dict[str, List[str]] = {}
        for key, value in pairs:
            grouped.setdefault(key, []).append(value)
        return cls(grouped)

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RawParameters({dict(self._data)!r})"

    def first(self, key: str) -> Optional[str]:
        """First value for key, None when the key is absent."""
        values = self._data.get(key)
        return values[0] if values else None

    def get_list(self, key: str) -> List[str]:
        """All values for key (empty list when absent)."""
        return list(self._data.get(key, ()))

    def to_dict(self) -> Dict[str, str]:
        """Single-value view: the FIRST value wins for repeated keys."""
        return {key: values[0] for key, values in self._data.items()}

    def to_multi_dict(self) -> Dict[str, List[str]]:
        """Multi-value view: every value, in arrival order."""
        return {key: self.get_list(key) for key in self._data}


# ══════════════════════════════════════════════════════════════════════════
# Absent Sentinel
# ══════════════════════════════════════════════════════════════════════════


class _Absent(enum.Enum):
    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


# Resolved value of an optional parameter the client did not send.
# Distinct from None so callers can tell "not sent" from "sent as null-ish".
ABSENT = _Absent.ABSENT


# ══════════════════════════════════════════════════════════════════════════
# Binding Declarations
# ══════════════════════════════════════════════════════════════════════════


class TargetType(str, enum.Enum):
    """
    Declared target type of a bound parameter.

    STRING            → str, passed through unchanged
    INTEGER           → int, non-nullable (absence is a coercion failure)
    OPTIONAL_INTEGER  → int or ABSENT
    MAPPING           → Dict[str, str] of the whole request (first value wins)
    MULTI_MAPPING     → Dict[str, List[str]] of the whole request
    """

    STRING = "string"
    INTEGER = "integer"
    OPTIONAL_INTEGER = "optional_integer"
    MAPPING = "mapping"
    MULTI_MAPPING = "multi_mapping"

    @property
    def is_mapping(self) -> bool:
        return self in (TargetType.MAPPING, TargetType.MULTI_MAPPING)

    @property
    def is_nullable(self) -> bool:
        return self in (TargetType.STRING, TargetType.OPTIONAL_INTEGER)


class BindingSpec(BaseModel):
    """
    One declared handler parameter.

    What:  name + target type + required flag + optional default.
    Why:   Replaces annotation metadata with an explicit, immutable value.

    Rules:
        - required defaults to False: leaving the declaration bare means optional.
        - A default_value makes `required` irrelevant; the default is applied
          only when the key is wholly absent, never over an explicit "".
        - Mapping targets ignore name, required and default entirely.
    """

    name: str = Field(default="", description="Request parameter name")
    target_type: TargetType = Field(default=TargetType.STRING)
    required: bool = Field(default=False)
    default_value: Optional[str] = Field(
        default=None,
        description="Pre-coercion default, used only when the key is absent",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_name(self) -> "BindingSpec":
        if not self.target_type.is_mapping and not self.name:
            raise ValueError(
                f"A {self.target_type.value} binding needs a parameter name"
            )
        return self


class ObjectBindingSpec(BaseModel):
    """
    Declaration for binding several request parameters onto one record.

    Each field spec's name is both the request parameter name and the
    attribute name on `target`. Fields resolving to ABSENT are left out of
    the constructor call, so the record's own defaults apply.
    """

    target: Type[BaseModel]
    field_specs: Tuple[BindingSpec, ...]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_fields(self) -> "ObjectBindingSpec":
        known = set(self.target.model_fields)
        for spec in self.field_specs:
            if spec.target_type.is_mapping:
                raise ValueError(
                    f"Field '{spec.name}': mapping targets cannot be object fields"
                )
            if spec.name not in known:
                raise ValueError(
                    f"Field '{spec.name}' is not defined on {self.target.__name__}"
                )
        return self
