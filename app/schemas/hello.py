"""
HelloData: the record bound by the /model-attribute-* endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.binding import BindingSpec, ObjectBindingSpec, TargetType


class HelloData(BaseModel):
    username: Optional[str] = Field(default=None, description="Display name")
    age: int = Field(default=0, description="Age in years")


# username: optional string, stays None when not sent.
# age: a non-nullable int field; "0" mirrors an unassigned primitive.
HELLO_DATA_BINDING = ObjectBindingSpec(
    target=HelloData,
    field_specs=(
        BindingSpec(name="username", target_type=TargetType.STRING),
        BindingSpec(name="age", target_type=TargetType.INTEGER, default_value="0"),
    ),
)
