# storefront/api/responses.py
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel

from storefront.domain.errors import StoreError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def as_data(value: Any) -> Any:
    """Pydantic -> json-owy dict z aliasami (productId, lineItems...)."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [as_data(v) for v in value]
    return value


def ok(message: str, data: Any = None) -> dict:
    body = {"message": message, "success": True}
    if data is not None:
        body["data"] = as_data(data)
    return body


def store_error(e: StoreError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=str(e))


def internal_error(message: str, e: Exception) -> HTTPException:
    #szczegoly tylko do logu, klient dostaje staly komunikat
    logger.exception(f"{message}: {e}")
    return HTTPException(status_code=500, detail=message)
