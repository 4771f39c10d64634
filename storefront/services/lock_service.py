# storefront/services/lock_service.py
import uuid
from contextlib import contextmanager

import redis
from tenacity import retry, retry_if_result, stop_after_delay, wait_fixed, RetryError

from storefront.core.exceptions import SessionLockTimeout
from storefront.utils.retry import redis_retry
from storefront.utils.settings import (
    REDIS_URL,
    SESSION_LOCK_TTL_SECONDS,
    SESSION_LOCK_WAIT_SECONDS,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# compare-and-delete runs as one script, nobody can take the key between GET and DEL
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""


class LockService:
    """
    Per-session lock around the first cart write.

    Held only while a new cart is created and bound, so two first-time
    requests from one session end up in the same cart.
    """

    def __init__(
        self,
        url: str | None = None,
        client: redis.Redis | None = None,
        ttl: int = SESSION_LOCK_TTL_SECONDS,
        wait: float = SESSION_LOCK_WAIT_SECONDS,
    ):
        self.redis = client if client is not None else redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl
        self.wait = wait

    @staticmethod
    def _key(token: str) -> str:
        return f"session:{token}:cart-lock"

    @redis_retry()
    def acquire_session_lock(self, token: str, owner: str) -> bool:
        # SET session:<token>:cart-lock <owner> NX EX <ttl>
        return bool(
            self.redis.set(
                name=self._key(token),
                value=owner,
                nx=True,
                ex=self.ttl,
            )
        )

    @redis_retry()
    def release_session_lock(self, token: str, owner: str) -> bool:
        res = self.redis.eval(_RELEASE_LUA, 1, self._key(token), owner)
        return bool(res)

    def _wait_for_lock(self, token: str, owner: str) -> bool:
        waiter = retry(
            retry=retry_if_result(lambda acquired: not acquired),
            stop=stop_after_delay(self.wait),
            wait=wait_fixed(0.05),
        )
        try:
            return waiter(self.acquire_session_lock)(token, owner)
        except RetryError:
            return False

    @contextmanager
    def session_lock(self, token: str):
        owner = uuid.uuid4().hex
        if not self._wait_for_lock(token, owner):
            raise SessionLockTimeout(f"could not lock session {token} within {self.wait}s")

        logger.info(f"Locked session {token} for cart creation")
        try:
            yield
        finally:
            if not self.release_session_lock(token, owner):
                logger.warning(f"Session lock for {token} expired before release")
