# notifications/tasks.py
"""
Celery task delivering an email copy of a notification
"""
import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail

from notifications.models import Notification

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def send_notification_email(self, notification_id):
    """
    Email a notification to its recipient.
    Delivery is at-least-once: a failed send is retried.
    """
    try:
        notification = Notification.objects.select_related('user').get(pk=notification_id)
    except Notification.DoesNotExist:
        return f"Notification {notification_id} not found"

    recipient = notification.user
    if not recipient.email:
        return f"User {recipient.pk} has no email address"

    message = f"""
{notification.message}

Login to respond: {settings.SITE_URL}/dashboard

BloodMatch
    """.strip()

    try:
        send_mail(
            subject=notification.title,
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient.email],
            fail_silently=False,
        )
    except Exception as exc:
        logger.exception("Email for notification %s failed", notification_id)
        raise self.retry(exc=exc)

    logger.info("Email sent to %s for notification %s", recipient.email, notification_id)
    return f"Email sent to {recipient.email}"
