# storefront/services/notification_service.py
from decimal import Decimal

from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Serwis do wysyłania powiadomień.
    Używa Celery do asynchronicznego przetwarzania.
    """

    @staticmethod
    def send_order_notification(user_id: str, order_id: int, total: Decimal):
        """
        Kolejkuje powiadomienie o zlozeniu zamowienia.
        Fire-and-forget: blad kolejki nie wycofuje zamowienia.
        """
        try:
            send_order_notification_task.delay(user_id, order_id, str(total))
        except Exception as e:
            logger.warning(f"Failed to queue notification for order {order_id}: {e}")


@celery_app.task(name="storefront.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: str, order_id: int, total: str):
    """
    Celery task - w prawdziwym systemie wysłałby email/push.
    Teraz tylko loguje.
    """
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} placed, total {total}")

    return {"user_id": user_id, "order_id": order_id, "status": "sent"}
