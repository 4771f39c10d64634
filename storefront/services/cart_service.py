# storefront/services/cart_service.py
from dataclasses import dataclass
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.core.exceptions import InvalidInput, NotFound
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import MAX_PRODUCT_ID, ProductModel
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CartItemAdded:
    item: Dict[str, Any]
    cart_id: int
    # True when the cart was created by this call and still has to be bound to the session
    created: bool


def project_item(item: CartItemModel, product: ProductModel) -> Dict[str, Any]:
    return {
        "cart_item_id": item.cart_item_id,
        "price": item.price,
        "product_id": product.product_id,
        "image": product.image,
        "name": product.name,
        "short_description": product.short_description,
    }


class CartService:
    """
    Cart ledger for anonymous sessions.

    The caller passes the cart id currently bound to the session (or None) and
    gets the new binding back in the result; this class never touches the session.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    # query
    def get_cart(self, cart_id: int | None) -> List[Dict[str, Any]]:
        # no cart yet, and reading must not create one
        if cart_id is None:
            return []

        return [project_item(item, product) for item, product in self.repo.get_cart_items(cart_id)]

    # command
    def add_item(self, cart_id: int | None, product_id: Any, commit: bool = True) -> CartItemAdded:
        """
        With commit=False the rows are only flushed; the caller binds the
        session and then calls commit() or rollback().
        """
        product_id = self._validate_product_id(product_id)

        try:
            product = self.products.get_product(product_id)
            if product is None:
                raise NotFound(f"product {product_id} does not exist", status_code=400)

            created = cart_id is None
            if created:
                cart = self.repo.create_cart()
                cart_id = cart.cart_id
                logger.info(f"Created cart {cart_id}")

            item = self.repo.add_cart_item(
                CartItemModel(
                    cart_id=cart_id,
                    product_id=product.product_id,
                    price=product.price,
                )
            )
            if commit:
                self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Added product {product_id} to cart {cart_id} at {item.price}")

        return CartItemAdded(item=project_item(item, product), cart_id=cart_id, created=created)

    def commit(self):
        self.repo.commit()

    def rollback(self):
        self.repo.rollback()

    @staticmethod
    def _validate_product_id(product_id: Any) -> int:
        if product_id is None or isinstance(product_id, bool):
            raise InvalidInput("invalid entry")
        try:
            parsed = int(str(product_id).strip(), 10)
        except ValueError:
            raise InvalidInput("invalid entry") from None
        if not 0 < parsed <= MAX_PRODUCT_ID:
            raise InvalidInput("invalid entry")
        return parsed
