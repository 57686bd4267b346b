"""
Pydantic schemas for products.

A product has a generated ``id``, a ``name``, a ``description``, a
numeric ``price``, a ``category`` and an ``inStock`` flag.  Types are
strict: a price must be a JSON number (not a string or boolean) and
``inStock`` must be a JSON boolean.  Unknown fields are ignored; the
request models only read the wire name ``inStock``, so a snake_case
``in_stock`` key is just another unknown field.

``parse_product_create`` and ``parse_product_update`` are the
validation rules applied by the route handlers.  Both raise
``InvalidProductData`` naming the offending fields.
"""

from typing import Any, List, Optional, Sequence, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    confloat,
    field_validator,
)

# JSON integers stay integers; floats must be finite.
Price = Union[StrictInt, confloat(strict=True, allow_inf_nan=False)]


class InvalidProductData(ValueError):
    """Raised when a create or update payload fails validation."""

    def __init__(self, message: str, fields: Sequence[str] = ()) -> None:
        self.message = message
        self.fields = list(fields)
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.fields:
            return self.message
        return f"{self.message}: {', '.join(self.fields)}"


class ProductCreate(BaseModel):
    """Schema for creating a new product."""

    name: StrictStr = Field(..., min_length=1, description="Display name")
    description: StrictStr = Field(..., min_length=1, description="Free‑text description")
    price: Price = Field(..., description="Unit price; negative values are not rejected")
    category: StrictStr = Field(..., min_length=1, description="Category, matched case‑insensitively")
    in_stock: StrictBool = Field(True, alias="inStock")


class ProductUpdate(BaseModel):
    """Schema for partially updating a product.

    All fields are optional; only fields present in the payload are
    applied, even when their value is falsy (``0`` or ``false``).  An
    explicit ``null`` or an empty string is rejected.
    """

    name: Optional[StrictStr] = Field(None, min_length=1)
    description: Optional[StrictStr] = Field(None, min_length=1)
    price: Optional[Price] = None
    category: Optional[StrictStr] = Field(None, min_length=1)
    in_stock: Optional[StrictBool] = Field(None, alias="inStock")

    @field_validator("name", "description", "price", "category", "in_stock", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict:
        """Return only the fields supplied by the client, keyed by field name."""
        return self.model_dump(exclude_unset=True)


class ProductRead(BaseModel):
    """Schema for reading a product."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(True, alias="inStock")


class ProductPage(BaseModel):
    """One page of a (possibly filtered) product listing.

    ``total`` counts every product matching the filter, not just the
    ones on this page.
    """

    page: int
    total: int
    products: List[ProductRead]


class ProductDeleted(BaseModel):
    message: str
    product: ProductRead


def _invalid_fields(exc: ValidationError) -> List[str]:
    fields = []
    for error in exc.errors():
        loc = error.get("loc") or ("payload",)
        name = str(loc[0])
        if name not in fields:
            fields.append(name)
    return fields


def parse_product_create(payload: Any) -> ProductCreate:
    """Validate a create payload.

    ``name``, ``description`` and ``category`` must be non-empty
    strings and ``price`` a number; ``inStock`` defaults to ``True``.
    """
    if not isinstance(payload, dict):
        raise InvalidProductData("Missing or invalid fields")
    try:
        return ProductCreate.model_validate(payload)
    except ValidationError as exc:
        raise InvalidProductData("Missing or invalid fields", _invalid_fields(exc)) from exc


def parse_product_update(payload: Any) -> ProductUpdate:
    """Validate a partial update payload; only supplied fields are checked."""
    if not isinstance(payload, dict):
        raise InvalidProductData("Invalid input types")
    try:
        return ProductUpdate.model_validate(payload)
    except ValidationError as exc:
        raise InvalidProductData("Invalid input types", _invalid_fields(exc)) from exc
