# storefront/domain/errors.py
"""
Bledy domenowe sklepu.

Kazdy blad niesie status HTTP, routery tlumacza je na HTTPException.
"""


class StoreError(Exception):
    status_code = 500
    message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


# 400
class ValidationError(StoreError):
    status_code = 400
    message = "Invalid request"


class DuplicateEmail(ValidationError):
    message = "User with this email already exists"


class InvalidCategory(ValidationError):
    message = "Invalid category type"


class EmptyCart(ValidationError):
    message = "Cart is empty. Cannot place an order."


class InvalidQuantity(ValidationError):
    message = "Quantity must be greater than 0"


# 404
class NotFound(StoreError):
    status_code = 404
    message = "Not found"


class UserNotFound(NotFound):
    message = "User not found"


class ProductNotFound(NotFound):
    message = "Product not found"


class ItemNotInCart(NotFound):
    message = "Product not found in cart"


class OrderNotFound(NotFound):
    message = "Order not found"


# 401
class AuthFailed(StoreError):
    status_code = 401
    message = "Auth failed"


class MissingOrMalformedHeader(AuthFailed):
    message = "Invalid authorization header format"


class InvalidToken(AuthFailed):
    pass


class InvalidCredentials(AuthFailed):
    message = "Invalid email or password"


# 409
class CartBusy(StoreError):
    status_code = 409
    message = "Cart is being modified by another request"
