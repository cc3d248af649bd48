# storefront/services/notification_service.py
from storefront.celery_worker import celery_app
from storefront.domain.schemas import OrderOut
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """Kolejkuje powiadomienie o zlozonym zamowieniu (Celery)."""

    def order_placed(self, order: OrderOut):
        send_order_placed_task.delay(
            user_id=order.user_id,
            order_id=order.id,
            line_items=len(order.items),
            units=sum(i.quantity for i in order.items),
            status=order.status,
        )


@celery_app.task(name="storefront.services.notification_service.send_order_placed_task")
def send_order_placed_task(user_id: int, order_id: int, line_items: int, units: int, status: str):
    #brak kanalu wysylki - potwierdzenie trafia do logu
    logger.info(
        f"[NOTIFICATION] user={user_id} order={order_id} "
        f"lines={line_items} units={units} status={status}"
    )
    return {"order_id": order_id, "line_items": line_items, "units": units, "status": status}
