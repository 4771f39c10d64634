# storefront/api/deps.py
import uuid

import redis
from fastapi import Depends, Request

from storefront.data.redis_client import get_redis
from storefront.services.lock_service import LockService
from storefront.services.session_store import SessionStore

SESSION_TOKEN_KEY = "token"


def get_session_store(client: redis.Redis = Depends(get_redis)) -> SessionStore:
    return SessionStore(client=client)


def get_lock_service(client: redis.Redis = Depends(get_redis)) -> LockService:
    return LockService(client=client)


def ensure_session_token(request: Request) -> str:
    # every /api response carries the cookie, so a page that loads the cart
    # before its first add already has the token the cart lock is keyed on
    token = request.session.get(SESSION_TOKEN_KEY)
    if token is None:
        token = uuid.uuid4().hex
        request.session[SESSION_TOKEN_KEY] = token
    return token
