# storefront/api/routers/orders.py
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import ensure_session_token, get_session_store
from storefront.core.exceptions import CartAlreadyOrdered
from storefront.data.database import get_db
from storefront.domain.schemas import OrderIn, OrderOut
from storefront.services.order_service import OrderService
from storefront.services.session_store import SessionStore

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("", response_model=OrderOut, status_code=201)
def place_order(
    body: Any = Body(default=None),
    token: str = Depends(ensure_session_token),
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
):
    """
    Places an order from the session's cart and releases the cart.
    """
    # OrderIn accepts anything, the service checks the cart before the details
    payload = OrderIn.model_validate(body) if isinstance(body, dict) else OrderIn()
    cart_id = sessions.get_cart_id(token)
    svc = get_service(db)

    try:
        placed = svc.place_order(cart_id, payload.model_dump(), commit=False)
    except CartAlreadyOrdered:
        # binding outlived its order, the next add must start a new cart
        sessions.clear_cart(token)
        raise

    # released before the order is committed, restored if the commit fails
    try:
        sessions.clear_cart(token)
        svc.commit()
    except CartAlreadyOrdered:
        raise
    except Exception:
        svc.rollback()
        sessions.bind_cart(token, cart_id)
        raise

    return placed.order
