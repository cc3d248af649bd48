import uuid
from contextlib import contextmanager

import redis

from storefront.domain.errors import CartBusy
from storefront.utils.retry import redis_retry, until_acquired
from storefront.utils.settings import REDIS_URL, CART_LOCK_TTL_SECONDS, CART_LOCK_WAIT_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje skrypt lua atomowo, nie da sie wcisnac miedzy GET a DEL
#wiec nie skasujemy locka ktory po wygasnieciu przejal inny request


class LockService:
    """
    -blokada koszyka per user (serializacja zapisow jednego usera)
    -zwalnianie locka tylko przez wlasciciela
    -brak blokad miedzy roznymi userami
    """

    def __init__(
        self,
        url: str | None = None,
        ttl: int = CART_LOCK_TTL_SECONDS,
        max_wait: float = CART_LOCK_WAIT_SECONDS,
    ):
        self.redis = redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl
        self.max_wait = max_wait

    @staticmethod
    def _key(user_id: int) -> str:
        return f"user:{user_id}:cart:lock"

    @redis_retry()
    def acquire_user_lock(self, user_id: int, owner: str) -> bool:
        key = self._key(user_id)
        #SET user:1:cart:lock "<owner>" NX EX 10
        return bool(self.redis.set(name=key, value=owner, nx=True, ex=self.ttl))

    @redis_retry()
    def release_user_lock(self, user_id: int, owner: str) -> bool:
        key = self._key(user_id)
        res = self.redis.eval(_RELEASE_LUA, 1, key, owner)
        return bool(res)

    @contextmanager
    def user_lock(self, user_id: int):
        owner = uuid.uuid4().hex
        acquire = until_acquired(self.max_wait)(self.acquire_user_lock)

        if not acquire(user_id, owner):
            logger.warning(f"Could not lock cart of user {user_id} within {self.max_wait}s")
            raise CartBusy()

        try:
            yield
        finally:
            if not self.release_user_lock(user_id, owner):
                logger.warning(f"Cart lock of user {user_id} expired before release")
