# requesters/signals.py
"""
Run match detection as soon as a blood request is created
"""
import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from matches.detection import find_and_create_matches
from requesters.models import BloodRequest

logger = logging.getLogger(__name__)


@receiver(post_save, sender=BloodRequest)
def detect_matches_for_new_request(sender, instance, created, **kwargs):
    if created and instance.is_pending:
        logger.info("New request #%s created, triggering match detection", instance.pk)
        find_and_create_matches(request_id=instance.pk)
