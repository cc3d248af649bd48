from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.api.deps import get_token_service
from storefront.api.responses import ok, store_error, internal_error
from storefront.data.database import get_db
from storefront.domain.errors import StoreError
from storefront.domain.schemas import ApiResponse, LoginResponse, UserLogin, UserRegister
from storefront.services.token_service import TokenService
from storefront.services.user_service import UserService

router = APIRouter(prefix="/api/user", tags=["user"])


def get_service(db: Session, token_service: TokenService):
    return UserService(db, token_service)


@router.post("/register", response_model=ApiResponse, response_model_exclude_none=True, status_code=201)
def register(
    payload: UserRegister,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    svc = get_service(db, token_service)
    try:
        svc.register(payload)
    except StoreError as e:
        raise store_error(e)
    except SQLAlchemyError as e:
        raise internal_error("Error registering user", e)
    return ok("User registered successfully")


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
def login(
    payload: UserLogin,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    svc = get_service(db, token_service)
    try:
        token = svc.login(payload)
    except StoreError as e:
        raise store_error(e)
    except SQLAlchemyError as e:
        raise internal_error("Error logging in", e)
    return {**ok("Login successful"), "token": token}
