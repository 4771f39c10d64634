# storefront/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def get_order_by_cart(self, cart_id: int) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel).where(OrderModel.cart_id == cart_id)
        ).scalar_one_or_none()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
