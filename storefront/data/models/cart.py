# storefront/data/models/cart.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, DateTime

from storefront.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"

    cart_id = Column(Integer, primary_key=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
