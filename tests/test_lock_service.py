from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from storefront.domain.errors import CartBusy
from storefront.services.lock_service import LockService


@pytest.fixture
def lock():
    svc = LockService(url="redis://localhost:6379/15", ttl=5, max_wait=0.2)
    svc.redis = MagicMock()
    return svc


def test_lock_is_set_nx_with_ttl_and_released_by_owner(lock):
    lock.redis.set.return_value = True
    lock.redis.eval.return_value = 1

    with lock.user_lock(7):
        _, kwargs = lock.redis.set.call_args
        assert kwargs["name"] == "user:7:cart:lock"
        assert kwargs["nx"] is True
        assert kwargs["ex"] == 5
        owner = kwargs["value"]

    args = lock.redis.eval.call_args.args
    assert args[1:] == (1, "user:7:cart:lock", owner)


def test_lock_is_released_when_body_raises(lock):
    lock.redis.set.return_value = True
    lock.redis.eval.return_value = 1

    with pytest.raises(RuntimeError):
        with lock.user_lock(7):
            raise RuntimeError("boom")

    lock.redis.eval.assert_called_once()


def test_waits_for_lock_then_acquires(lock):
    lock.redis.set.side_effect = [None, None, True]
    lock.redis.eval.return_value = 1

    with lock.user_lock(3):
        pass

    assert lock.redis.set.call_count == 3


def test_busy_lock_raises_cart_busy(lock):
    lock.redis.set.return_value = None

    with pytest.raises(CartBusy):
        with lock.user_lock(3):
            pytest.fail("body must not run")

    lock.redis.eval.assert_not_called()


def test_redis_errors_are_retried_then_raised(lock):
    lock.redis.set.side_effect = RedisConnectionError("down")

    with pytest.raises(RedisConnectionError):
        with lock.user_lock(3):
            pass

    assert lock.redis.set.call_count == 3


def test_different_users_use_different_keys(lock):
    lock.redis.set.return_value = True
    lock.redis.eval.return_value = 1

    with lock.user_lock(1):
        with lock.user_lock(2):
            pass

    keys = [c.kwargs["name"] for c in lock.redis.set.call_args_list]
    assert keys == ["user:1:cart:lock", "user:2:cart:lock"]
