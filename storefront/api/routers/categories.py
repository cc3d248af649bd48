# storefront/api/routers/categories.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.api.responses import ok, internal_error
from storefront.data.database import get_db
from storefront.domain.schemas import ApiResponse, CategoryIn
from storefront.services.catalog_service import CatalogService

router = APIRouter(
    prefix="/api/category",
    tags=["category"],
    dependencies=[Depends(get_current_user_id)],
)


@router.post("/add-category", response_model=ApiResponse, response_model_exclude_none=True, status_code=201)
def add_category(payload: CategoryIn, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        category = svc.create_category(payload)
    except SQLAlchemyError as e:
        raise internal_error("Error inserting category", e)
    return ok("Category inserted successfully", category)


@router.get("/get-all-category", response_model=ApiResponse, response_model_exclude_none=True)
def get_all_categories(db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        categories = svc.list_categories()
    except SQLAlchemyError as e:
        raise internal_error("Error fetching categories", e)
    return ok("Categories fetched successfully", categories)
