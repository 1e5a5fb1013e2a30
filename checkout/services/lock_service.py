import uuid
from contextlib import contextmanager
from typing import Iterator

import redis
from fastapi import Request
from redis.exceptions import RedisError

from checkout.domain.errors import CartLockedError, StoreFailureError
from checkout.utils.settings import REDIS_URL, CART_LOCK_TTL_SECONDS
from checkout.utils.logging import get_logger

logger = get_logger(__name__)

#compare and delete in one script, redis runs lua atomically
#so nobody can take the lock between GET and DEL
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""


class LockService:
    """
    -per-cart lock for finalize and delete cart
    -SET NX EX, expires by itself if the holder dies
    -release only by the owner token (lua)
    """

    def __init__(self, url: str | None = None, ttl: int | None = None):
        self.redis = redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl or CART_LOCK_TTL_SECONDS

    @staticmethod
    def _key(cart_id: int) -> str:
        return f"cart:{cart_id}:lock"

    def acquire_cart_lock(self, cart_id: int, token: str) -> bool:
        key = self._key(cart_id)
        logger.info(f"Acquire lock {key}")
        #SET cart:11:lock "<token>" NX EX 30
        return bool(self.redis.set(name=key, value=token, nx=True, ex=self.ttl))

    def release_cart_lock(self, cart_id: int, token: str) -> bool:
        key = self._key(cart_id)
        logger.info(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    @contextmanager
    def cart_lock(self, cart_id: int) -> Iterator[None]:
        token = uuid.uuid4().hex

        try:
            locked = self.acquire_cart_lock(cart_id, token)
        except RedisError as e:
            raise StoreFailureError(str(e)) from e

        if not locked:
            raise CartLockedError(cart_id)

        try:
            yield
        finally:
            try:
                self.release_cart_lock(cart_id, token)
            except RedisError as e:
                #the key still expires after ttl
                logger.warning(f"Failed to release lock for cart {cart_id}: {e}")

    def close(self) -> None:
        self.redis.close()


def get_lock_service(request: Request) -> LockService:
    return request.app.state.lock_service
