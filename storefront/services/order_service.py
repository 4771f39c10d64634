# storefront/services/order_service.py
from dataclasses import dataclass
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.core.exceptions import CartAlreadyOrdered, InvalidInput, InvalidState, NotFound
from storefront.data.models.order import OrderModel
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

BUYER_FIELDS = ("name", "credit_card", "shipping_address")


@dataclass
class OrderPlaced:
    order: Dict[str, Any]
    # cart that was consumed; its session binding must be cleared by the caller
    cart_id: int


class OrderService:
    """
    Turns the cart bound to a session into a permanent order.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)

    def place_order(self, cart_id: int | None, buyer: Dict[str, Any], commit: bool = True) -> OrderPlaced:
        """
        Use case: place the order.

        1. the session must have a cart
        2. name, credit card and shipping address must be filled in
        3. the cart must hold at least one item and not be ordered yet
        4. order row and the checks above share one transaction

        Buyer details are stored exactly as given. With commit=False the order
        is only flushed so the caller can release the session first.
        """
        if cart_id is None:
            raise InvalidState("cart does not exist")

        details = {}
        for field in BUYER_FIELDS:
            value = buyer.get(field)
            if not isinstance(value, str) or not value.strip():
                raise InvalidInput("please enter valid information")
            details[field] = value

        try:
            if self.carts.count_cart_items(cart_id) == 0:
                raise NotFound("order failed")

            if self.repo.get_order_by_cart(cart_id) is not None:
                raise CartAlreadyOrdered()

            order = self.repo.create_order(OrderModel(cart_id=cart_id, **details))
            if commit:
                self.repo.commit()
        except IntegrityError:
            # concurrent submit for the same cart won the unique constraint
            self.repo.rollback()
            logger.warning(f"Cart {cart_id} was ordered concurrently")
            raise CartAlreadyOrdered() from None
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Order {order.order_id} created from cart {cart_id}")

        return OrderPlaced(
            order={
                "order_id": order.order_id,
                "name": order.name,
                "credit_card": order.credit_card,
                "shipping_address": order.shipping_address,
                "created_at": order.created_at,
            },
            cart_id=cart_id,
        )

    def commit(self):
        try:
            self.repo.commit()
        except IntegrityError:
            self.repo.rollback()
            raise CartAlreadyOrdered() from None

    def rollback(self):
        self.repo.rollback()
