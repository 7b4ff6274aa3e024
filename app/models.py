# app/models.py
import math
from typing import Any, Optional, Union

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr,
    ValidationInfo, field_validator,
)
from pydantic_core import PydanticCustomError

Price = Union[StrictInt, StrictFloat]

# What each body field must hold; fields are checked in this order
FIELD_KINDS = {
    "name": "a string",
    "description": "a string",
    "price": "a number",
    "category": "a string",
}
IN_STOCK_MESSAGE = "inStock must be a boolean if provided"


def is_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def is_number(value: Any) -> bool:
    # bool is an int subclass, but true/false is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large to convert to float
        return False


def required_message(field: str) -> str:
    return f"Product {field} is required and must be {FIELD_KINDS[field]}"


def _check_field(field: str, value: Any, message: str) -> Any:
    ok = is_number(value) if FIELD_KINDS[field] == "a number" else is_text(value)
    if not ok:
        raise PydanticCustomError("product_field", message)
    return value


def _check_in_stock(value: Any) -> Any:
    if not isinstance(value, bool):
        raise PydanticCustomError("product_in_stock", IN_STOCK_MESSAGE)
    return value


class ProductIn(BaseModel):
    """Body of a create request: every field but inStock is required."""

    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr
    description: StrictStr
    price: Price
    category: StrictStr
    in_stock: StrictBool = Field(True, alias="inStock")

    @field_validator("name", "description", "price", "category", mode="before")
    @classmethod
    def _check_required(cls, value: Any, info: ValidationInfo) -> Any:
        return _check_field(info.field_name, value, required_message(info.field_name))

    @field_validator("in_stock", mode="before")
    @classmethod
    def _check_stock(cls, value: Any) -> Any:
        return _check_in_stock(value)


class ProductUpdate(BaseModel):
    """Body of an update request: only the fields sent are checked and applied."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    price: Optional[Price] = None
    category: Optional[StrictStr] = None
    in_stock: Optional[StrictBool] = Field(None, alias="inStock")

    @field_validator("name", "description", "price", "category", mode="before")
    @classmethod
    def _check_changed(cls, value: Any, info: ValidationInfo) -> Any:
        field = info.field_name
        return _check_field(field, value, f"Product {field} must be {FIELD_KINDS[field]}")

    @field_validator("in_stock", mode="before")
    @classmethod
    def _check_stock(cls, value: Any) -> Any:
        return _check_in_stock(value)


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Price
    category: str
    in_stock: bool = Field(True, alias="inStock")
