# storefront/api/routers/products.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.api.responses import ok, store_error, internal_error
from storefront.data.database import get_db
from storefront.domain.errors import StoreError
from storefront.domain.schemas import ApiResponse, ProductIn
from storefront.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/product", tags=["product"])


@router.post(
    "/add-product",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    status_code=201,
    dependencies=[Depends(get_current_user_id)],
)
def add_product(payload: ProductIn, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        product = svc.create_product(payload)
    except StoreError as e:
        raise store_error(e)
    except SQLAlchemyError as e:
        raise internal_error("Error inserting product", e)
    return ok("Product inserted successfully", product)


#odczyty katalogu bez autoryzacji
@router.get("/get-products-by-category/{category_id}", response_model=ApiResponse, response_model_exclude_none=True)
def get_products_by_category(category_id: int, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        products = svc.list_products_by_category(category_id)
    except SQLAlchemyError as e:
        raise internal_error("Error fetching products", e)
    return ok("Products fetched successfully", products)


@router.get("/get-product-details/{product_id}", response_model=ApiResponse, response_model_exclude_none=True)
def get_product_details(product_id: int, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        product = svc.get_product(product_id)
    except StoreError as e:
        raise store_error(e)
    except SQLAlchemyError as e:
        raise internal_error("Error fetching product details", e)
    return ok("Product details fetched successfully", product)
