from sqlalchemy import Column, Integer, ForeignKey, String, DateTime
from datetime import datetime, timezone

from storefront.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True)
    # one order per cart
    cart_id = Column(Integer, ForeignKey("carts.cart_id"), nullable=False, unique=True)

    name = Column(String, nullable=False)
    credit_card = Column(String, nullable=False)
    shipping_address = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
