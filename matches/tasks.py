# matches/tasks.py
"""
Celery tasks for background match detection and the lifecycle reaper
"""
import logging

from celery import shared_task

from matches.detection import find_and_create_matches
from matches.reaper import run_reaper_sweep

logger = logging.getLogger(__name__)


@shared_task
def find_matches_task(request_id=None, donor_id=None):
    """Periodic full scan, or a targeted pass when an id is given"""
    matches_created = find_and_create_matches(request_id=request_id, donor_id=donor_id)
    return f"Created {matches_created} new matches"


@shared_task
def run_reaper_sweep_task():
    """Send reminders and expire stale matches"""
    summary = run_reaper_sweep()
    logger.info("Reaper sweep finished: %s", summary)
    return summary
