# storefront/services/order_service.py
from celery.exceptions import CeleryError
from kombu.exceptions import OperationalError as KombuOperationalError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.domain.schemas import OrderOut
from storefront.domain.errors import UserNotFound, EmptyCart, OrderNotFound
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Zamowienie powstaje z koszyka usera i jest pozniej niezmienne.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        notification_service: NotificationService | None = None,
    ):
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.lock_service = lock_service
        self.notification_service = notification_service or NotificationService()

    def place_order(self, user_id: int, idempotency_key: str | None = None) -> OrderOut:
        """
        Use Case: Zlozenie zamowienia z koszyka.

        1. Jesli klucz idempotencji byl juz uzyty - zwraca istniejace zamowienie
        2. Odrzuca pusty koszyk
        3. Kopiuje pozycje koszyka (product_id, quantity) do zamowienia
        4. Czysci koszyk - zamowienie i czyszczenie w jednym commicie
        5. Wysyla powiadomienie (async)
        """
        with self.lock_service.user_lock(user_id):
            user = self.cart_repo.get_user_with_cart(user_id)
            if not user:
                raise UserNotFound()

            if idempotency_key:
                existing = self.repo.get_by_idempotency_key(user_id, idempotency_key)
                if existing:
                    logger.info(f"Order {existing.id} replayed for key {idempotency_key}")
                    return OrderOut.model_validate(existing)

            if not user.cart:
                raise EmptyCart()

            order = OrderModel(
                user_id=user.id,
                status="Pending",
                idempotency_key=idempotency_key,
                items=[
                    OrderItemModel(product_id=item.product_id, quantity=item.quantity)
                    for item in user.cart
                ],
            )
            self.repo.add_order(order)
            user.cart.clear()

            try:
                self.repo.commit()
            except IntegrityError:
                #rownolegly request z tym samym kluczem zdazyl pierwszy
                self.repo.rollback()
                existing = self.repo.get_by_idempotency_key(user_id, idempotency_key) if idempotency_key else None
                if not existing:
                    raise
                return OrderOut.model_validate(existing)
            except SQLAlchemyError:
                #zamowienie i czyszczenie koszyka wycofane razem
                self.repo.rollback()
                raise

            created = self.repo.get_order(order.id)

        logger.info(f"Order {created.id} placed by user {user_id} with {len(created.items)} line items")

        placed = OrderOut.model_validate(created)

        #zamowienie juz zapisane - blad brokera nie moze zamienic sukcesu w 500
        try:
            self.notification_service.order_placed(placed)
        except (KombuOperationalError, CeleryError) as e:
            logger.exception(f"Order {placed.id} saved but notification was not queued: {e}")

        return placed

    def order_history(self, user_id: int) -> list[OrderOut]:
        return [OrderOut.model_validate(o) for o in self.repo.list_orders_by_user(user_id)]

    def order_details(self, user_id: int, order_id: int) -> OrderOut:
        order = self.repo.get_order(order_id)

        #cudze zamowienie wyglada jak nieistniejace
        if not order or order.user_id != user_id:
            raise OrderNotFound()

        return OrderOut.model_validate(order)
