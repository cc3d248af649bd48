# storefront/services/token_service.py
from datetime import datetime, timezone, timedelta

import jwt

from storefront.domain.errors import InvalidToken
from storefront.utils.settings import JWT_SECRET, JWT_ALGORITHM, JWT_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class TokenService:
    """
    Podpisane tokeny bearer (JWT HS256) z claimem `id`.
    Brak listy odwolan, token wazny do naturalnego wygasniecia.
    """

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        ttl_seconds: int | None = None,
    ):
        self.secret = secret or JWT_SECRET
        self.algorithm = algorithm or JWT_ALGORITHM
        self.ttl = timedelta(seconds=ttl_seconds if ttl_seconds is not None else JWT_TTL_SECONDS)

    def issue(self, identity_claim: int) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": identity_claim,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "id"]},
            )
        except jwt.PyJWTError as e:
            #expired / zly podpis / smieci - ten sam blad na zewnatrz
            logger.info(f"Token rejected: {type(e).__name__}")
            raise InvalidToken() from e

        return payload["id"]
