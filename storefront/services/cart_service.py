from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.user import UserModel
from storefront.repos.cart_repo import CartRepo
from storefront.services.lock_service import LockService
from storefront.domain.schemas import CartItemOut
from storefront.domain.errors import UserNotFound, ProductNotFound, ItemNotInCart, InvalidQuantity
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk osadzony w userze - uporzadkowana lista pozycji (product_id, quantity).
    commands (add, update, remove) pod lockiem per user
    query (view) tylko odczyt
    """

    def __init__(self, db: Session, lock_service: LockService):
        self.repo = CartRepo(db)
        self.lock_service = lock_service

    def _load_user(self, user_id: int) -> UserModel:
        user = self.repo.get_user_with_cart(user_id)
        if not user:
            raise UserNotFound()
        return user

    @staticmethod
    def _find_index(user: UserModel, product_id: int) -> int:
        #pierwsza pasujaca pozycja, -1 gdy brak
        for idx, item in enumerate(user.cart):
            if item.product_id == product_id:
                return idx
        return -1

    @staticmethod
    def _to_out(user: UserModel) -> list[CartItemOut]:
        return [CartItemOut.model_validate(i) for i in user.cart]

    #query
    def view_cart(self, user_id: int) -> list[CartItemOut]:
        return self._to_out(self._load_user(user_id))

    #commands
    def add_item(self, user_id: int, product_id: int) -> list[CartItemOut]:
        with self.lock_service.user_lock(user_id):
            user = self._load_user(user_id)

            product = self.repo.get_product(product_id)
            if not product:
                raise ProductNotFound()

            #bez scalania - kazde dodanie to nowa pozycja z quantity 1
            user.cart.append(CartItemModel(product_id=product.id, quantity=1))
            self.repo.save(user)

            logger.info(
                f"Product {product_id} added to cart of user {user_id}, "
                f"cart size: {len(user.cart)}"
            )
            return self._to_out(user)

    def update_item(self, user_id: int, product_id: int, quantity: int) -> list[CartItemOut]:
        if quantity <= 0:
            raise InvalidQuantity()

        with self.lock_service.user_lock(user_id):
            user = self._load_user(user_id)

            idx = self._find_index(user, product_id)
            if idx == -1:
                raise ItemNotInCart()

            user.cart[idx].quantity = quantity
            self.repo.save(user)

            logger.info(f"Cart of user {user_id}: product {product_id} quantity set to {quantity}")
            return self._to_out(user)

    def remove_item(self, user_id: int, product_id: int) -> list[CartItemOut]:
        with self.lock_service.user_lock(user_id):
            user = self._load_user(user_id)

            idx = self._find_index(user, product_id)
            if idx == -1:
                raise ItemNotInCart()

            #delete-orphan usuwa wiersz z cart_items
            user.cart.pop(idx)
            self.repo.save(user)

            logger.info(f"Product {product_id} removed from cart of user {user_id}")
            return self._to_out(user)
