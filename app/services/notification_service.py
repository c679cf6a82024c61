# app/services/notification_service.py
from app.celery_worker import celery_app
from app.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia o zamowieniach, wysylane przez Celery.
    Zamowienie jest juz zapisane w bazie, blad kolejki tylko logujemy.
    """

    @staticmethod
    def notify_order_placed(order_id: int, seller_id: int, buyer_id: int) -> bool:
        try:
            send_order_placed_notification.delay(order_id, seller_id, buyer_id)
            return True
        except Exception as e:
            logger.warning(f"Could not queue placement notification for order {order_id}: {e}")
            return False

    @staticmethod
    def notify_status_changed(order_id: int, buyer_id: int, status: str) -> bool:
        try:
            send_order_status_notification.delay(order_id, buyer_id, status)
            return True
        except Exception as e:
            logger.warning(f"Could not queue status notification for order {order_id}: {e}")
            return False


@celery_app.task(name="app.services.notification_service.send_order_placed_notification")
def send_order_placed_notification(order_id: int, seller_id: int, buyer_id: int):
    """
    Informuje sprzedawce o nowym zamowieniu. Brak kanalu dostarczenia, tylko log.
    """
    logger.info(f"[NOTIFICATION] Seller {seller_id}: new order {order_id} from buyer {buyer_id}")
    return {"order_id": order_id, "recipient_id": seller_id, "event": "placed"}


@celery_app.task(name="app.services.notification_service.send_order_status_notification")
def send_order_status_notification(order_id: int, buyer_id: int, status: str):
    logger.info(f"[NOTIFICATION] Buyer {buyer_id}: order {order_id} is now {status}")
    return {"order_id": order_id, "recipient_id": buyer_id, "event": status}
