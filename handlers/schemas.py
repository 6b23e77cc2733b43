"""
handlers/schemas.py
-------------------
Request bodies accepted by the order endpoints.
Decoding and validation happen here so the repository only ever sees
complete NewOrder payloads and null-free OrderPatch values that fit the
orders table columns.
"""

from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, Field, StrictInt, StrictStr, field_validator

from models.order import NewOrder, OrderPatch

# Range of the PostgreSQL INTEGER column backing `total`.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


def _reject_nul(value: str) -> str:
    # PostgreSQL text cannot store NUL
    if "\x00" in value:
        raise ValueError("must not contain NUL characters")
    return value


Text = Annotated[StrictStr, AfterValidator(_reject_nul)]
Total = Annotated[StrictInt, Field(ge=INT4_MIN, le=INT4_MAX)]


class CreateOrderRequest(BaseModel):
    name: Text
    coffee_name: Text
    size: Text
    total: Total

    def to_model(self) -> NewOrder:
        return NewOrder(
            name=self.name,
            coffee_name=self.coffee_name,
            size=self.size,
            total=self.total,
        )


class UpdateOrderRequest(BaseModel):
    """
    Partial update body. Omitted fields are left unchanged; a field that is
    sent must carry a value, so an explicit null is rejected.
    """
    name: Optional[Text] = None
    coffee_name: Optional[Text] = None
    size: Optional[Text] = None
    total: Optional[Total] = None

    @field_validator("name", "coffee_name", "size", "total", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not set to null")
        return value

    def to_patch(self) -> OrderPatch:
        return OrderPatch(**self.model_dump(exclude_unset=True))
