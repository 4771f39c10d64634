# storefront/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# prices stay Decimal internally and go out as JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ProductSummaryOut(CamelModel):
    """Product as shown in the catalog listing."""

    product_id: int
    name: str
    price: Price
    image: str
    short_description: str


class ProductOut(ProductSummaryOut):
    """Product detail page."""

    long_description: str


class CartItemIn(CamelModel):
    """Body of POST /api/cart. Taken as sent, CartService parses and range-checks it."""

    product_id: Any = None


class CartItemOut(CamelModel):
    """Cart line item joined with the product's display fields."""

    cart_item_id: int
    price: Price
    product_id: int
    image: str
    name: str
    short_description: str


class OrderIn(CamelModel):
    """Buyer details for POST /api/orders. Taken as sent, OrderService rejects blanks and non-strings."""

    name: Any = None
    credit_card: Any = None
    shipping_address: Any = None


class OrderOut(CamelModel):
    """Placed order. The originating cart id is never exposed."""

    order_id: int
    name: str
    credit_card: str
    shipping_address: str
    created_at: datetime


class HealthOut(BaseModel):
    message: str
