# storefront/services/password_service.py
import bcrypt

from storefront.utils.settings import BCRYPT_ROUNDS


def hash_password(password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        #uszkodzony hash w bazie traktujemy jak zle haslo
        return False
