# storefront/api/deps.py
from fastapi import Depends, Header, HTTPException

from storefront.domain.errors import AuthFailed, MissingOrMalformedHeader
from storefront.services.lock_service import LockService
from storefront.services.token_service import TokenService

_BEARER_PREFIX = "Bearer "

_token_service = TokenService()
_lock_service: LockService | None = None


def get_token_service() -> TokenService:
    return _token_service


def get_lock_service() -> LockService:
    global _lock_service
    if _lock_service is None:
        _lock_service = LockService()
    return _lock_service


def get_current_user_id(
    authorization: str | None = Header(None),
    token_service: TokenService = Depends(get_token_service),
) -> int:
    """
    Auth gate: user id wyciagany wylacznie ze zweryfikowanego tokena.
    Pola z body requestu nigdy nie nadpisuja tozsamosci.
    """
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise HTTPException(status_code=401, detail=MissingOrMalformedHeader.message)

    token = authorization[len(_BEARER_PREFIX):].strip()
    try:
        return token_service.verify(token)
    except AuthFailed:
        raise HTTPException(status_code=401, detail=AuthFailed.message)

