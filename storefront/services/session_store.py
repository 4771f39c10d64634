# storefront/services/session_store.py
import redis

from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL, SESSION_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class SessionStore:
    """
    Session binding: opaque session token -> active cart id.

    The cookie only carries the token, the binding itself lives in Redis so
    every request of a session sees the same cart.
    """

    def __init__(
        self,
        url: str | None = None,
        client: redis.Redis | None = None,
        ttl: int = SESSION_TTL_SECONDS,
    ):
        self.redis = client if client is not None else redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl

    @staticmethod
    def _key(token: str) -> str:
        return f"session:{token}:cart"

    @redis_retry()
    def get_cart_id(self, token: str | None) -> int | None:
        if not token:
            return None
        value = self.redis.get(self._key(token))
        return int(value) if value is not None else None

    @redis_retry()
    def bind_cart(self, token: str, cart_id: int) -> None:
        self.redis.set(self._key(token), str(cart_id), ex=self.ttl)
        logger.info(f"Session {token} bound to cart {cart_id}")

    @redis_retry()
    def clear_cart(self, token: str) -> None:
        self.redis.delete(self._key(token))
        logger.info(f"Session {token} released its cart")

    @redis_retry()
    def touch(self, token: str) -> None:
        # sliding expiry, an active shopper keeps the cart
        self.redis.expire(self._key(token), self.ttl)
