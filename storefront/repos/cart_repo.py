# storefront/repos/cart_repo.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel


class CartRepo:
    """
    Queries for carts and their items.
    Nothing here commits; the service decides where the unit of work ends.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_cart(self) -> CartModel:
        cart = CartModel()
        self.db.add(cart)
        self.db.flush()
        return cart

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def get_cart_items(self, cart_id: int) -> list[tuple[CartItemModel, ProductModel]]:
        stmt = (
            select(CartItemModel, ProductModel)
            .join(ProductModel, CartItemModel.product_id == ProductModel.product_id)
            .where(CartItemModel.cart_id == cart_id)
            .order_by(CartItemModel.cart_item_id)
        )
        return [(item, product) for item, product in self.db.execute(stmt)]

    def count_cart_items(self, cart_id: int) -> int:
        stmt = select(func.count(CartItemModel.cart_item_id)).where(
            CartItemModel.cart_id == cart_id
        )
        return self.db.execute(stmt).scalar_one()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
