# storefront/api/routers/orders.py
from fastapi import APIRouter, Depends, Header
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id, get_lock_service
from storefront.api.responses import ok, store_error, internal_error
from storefront.data.database import get_db
from storefront.domain.errors import StoreError
from storefront.domain.schemas import ApiResponse
from storefront.services.lock_service import LockService
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/api/order", tags=["order"])


def get_service(
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    return OrderService(db, lock_service)


@router.post("/place-order", response_model=ApiResponse, response_model_exclude_none=True, status_code=201)
def place_order(
    idempotency_key: str | None = Header(None),
    user_id: int = Depends(get_current_user_id),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamowienie z koszyka i czysci koszyk (jedna transakcja).
    Powtorzony Idempotency-Key zwraca to samo zamowienie.
    """
    try:
        order = svc.place_order(user_id, idempotency_key)
    except StoreError as e:
        raise store_error(e)
    except (SQLAlchemyError, RedisError) as e:
        raise internal_error("Error placing the order", e)
    return ok("Order placed successfully", order)


@router.get("/order-history", response_model=ApiResponse, response_model_exclude_none=True)
def order_history(
    user_id: int = Depends(get_current_user_id),
    svc: OrderService = Depends(get_service),
):
    try:
        orders = svc.order_history(user_id)
    except SQLAlchemyError as e:
        raise internal_error("Error fetching order history", e)
    return ok("Order history fetched successfully", orders)


@router.get("/order-details/{order_id}", response_model=ApiResponse, response_model_exclude_none=True)
def order_details(
    order_id: int,
    user_id: int = Depends(get_current_user_id),
    svc: OrderService = Depends(get_service),
):
    try:
        order = svc.order_details(user_id, order_id)
    except StoreError as e:
        raise store_error(e)
    except SQLAlchemyError as e:
        raise internal_error("Error fetching order details", e)
    return ok("Order details fetched successfully", order)
