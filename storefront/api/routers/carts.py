#storefront/api/routers/carts.py
from fastapi import APIRouter, Depends
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id, get_lock_service
from storefront.api.responses import ok, store_error, internal_error
from storefront.data.database import get_db
from storefront.domain.errors import StoreError
from storefront.domain.schemas import ApiResponse, CartUpdateIn
from storefront.services.cart_service import CartService
from storefront.services.lock_service import LockService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    return CartService(db=db, lock_service=lock_service)


@router.post("/add-to-cart/{product_id}", response_model=ApiResponse, response_model_exclude_none=True)
def add_to_cart(
    product_id: int,
    user_id: int = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    try:
        cart = svc.add_item(user_id, product_id)
    except StoreError as e:
        raise store_error(e)
    except (SQLAlchemyError, RedisError) as e:
        raise internal_error("Error adding product to cart", e)
    return ok("Product added to cart successfully", cart)


@router.get("/view-cart", response_model=ApiResponse, response_model_exclude_none=True)
def view_cart(
    user_id: int = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    try:
        cart = svc.view_cart(user_id)
    except StoreError as e:
        raise store_error(e)
    except SQLAlchemyError as e:
        raise internal_error("Error retrieving cart", e)
    return ok("Cart retrieved successfully", cart)


@router.put("/update-cart/{product_id}", response_model=ApiResponse, response_model_exclude_none=True)
def update_cart(
    product_id: int,
    payload: CartUpdateIn,
    user_id: int = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    try:
        cart = svc.update_item(user_id, product_id, payload.quantity)
    except StoreError as e:
        raise store_error(e)
    except (SQLAlchemyError, RedisError) as e:
        raise internal_error("Error updating cart", e)
    return ok("Cart updated successfully", cart)


@router.delete("/remove-from-cart/{product_id}", response_model=ApiResponse, response_model_exclude_none=True)
def remove_from_cart(
    product_id: int,
    user_id: int = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    try:
        cart = svc.remove_item(user_id, product_id)
    except StoreError as e:
        raise store_error(e)
    except (SQLAlchemyError, RedisError) as e:
        raise internal_error("Error removing product from cart", e)
    return ok("Product removed from cart successfully", cart)
