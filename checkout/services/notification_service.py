# checkout/services/notification_service.py
from typing import List

from checkout.celery_worker import celery_app
from checkout.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Purchase confirmations. Sent through Celery so the sale request
    does not wait for delivery.
    """

    @staticmethod
    def send_sale_confirmation(emails: List[str], tickets_sold: int):
        send_sale_confirmation_task.delay(emails, tickets_sold)


@celery_app.task(name="checkout.services.notification_service.send_sale_confirmation_task")
def send_sale_confirmation_task(emails: List[str], tickets_sold: int):
    """
    Logs one confirmation per distinct purchaser email.
    """
    recipients = sorted(set(emails))

    for email in recipients:
        logger.info(f"[NOTIFICATION] {email}: purchase of {tickets_sold} ticket line(s) confirmed")

    return {"recipients": recipients, "tickets_sold": tickets_sold, "status": "sent"}
