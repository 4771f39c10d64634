from sqlalchemy import Column, Integer, ForeignKey, Numeric

from storefront.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    cart_item_id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.cart_id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False)

    # price at the moment the item was added, never re-read from the product
    price = Column(Numeric(10, 2), nullable=False)
