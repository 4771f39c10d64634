# storefront/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import ensure_session_token, get_lock_service, get_session_store
from storefront.data.database import get_db
from storefront.domain.schemas import CartItemIn, CartItemOut
from storefront.services.cart_service import CartService
from storefront.services.lock_service import LockService
from storefront.services.session_store import SessionStore

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=List[CartItemOut])
def get_cart(
    token: str = Depends(ensure_session_token),
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
):
    return get_service(db).get_cart(sessions.get_cart_id(token))


@router.post("", response_model=CartItemOut, status_code=201)
def add_item(
    payload: CartItemIn,
    token: str = Depends(ensure_session_token),
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
    locks: LockService = Depends(get_lock_service),
):
    svc = get_service(db)

    cart_id = sessions.get_cart_id(token)
    if cart_id is not None:
        sessions.touch(token)
        return svc.add_item(cart_id, payload.product_id).item

    # first item for this session: create and bind under the session lock,
    # a request that waited here finds the cart the winner bound
    with locks.session_lock(token):
        result = svc.add_item(sessions.get_cart_id(token), payload.product_id, commit=False)
        if not result.created:
            svc.commit()
            return result.item

        # the cart only exists once both the binding and the rows are stored
        try:
            sessions.bind_cart(token, result.cart_id)
            svc.commit()
        except Exception:
            svc.rollback()
            sessions.clear_cart(token)
            raise

    return result.item
