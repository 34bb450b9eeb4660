"""
Lifecycle reaper: reminders for proposals still waiting on a party and
expiry of proposals past their deadline.

Scheduled by Celery beat (matches.tasks.run_reaper_sweep_task) and
callable directly with an explicit ``now`` for deterministic runs.
"""
import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from matches.models import Match
from notifications.services import NotificationService

logger = logging.getLogger(__name__)


def expire_match(match):
    """
    Retire an open match and notify both parties.
    The caller holds the row lock and has checked that the match is open.
    """
    match.status = Match.Status.EXPIRED
    match.save(update_fields=['status'])
    NotificationService.notify_match_expired(match)
    logger.info("Match #%s expired (%s <-> %s)", match.pk, match.donor_name, match.requester_name)


def send_reminders(now=None):
    """
    Remind each party that has not answered an open, unexpired match
    created at least MATCH_REMINDER_AFTER_HOURS ago.

    Returns:
        Number of reminder notifications sent
    """
    now = now or timezone.now()
    created_before = now - timedelta(hours=settings.MATCH_REMINDER_AFTER_HOURS)

    waiting = (
        Match.objects.select_related('request')
        .filter(
            status__in=Match.OPEN_STATUSES,
            expires_at__gt=now,
            created_at__lte=created_before,
        )
    )

    sent = 0
    for match in waiting:
        try:
            hours_remaining = match.hours_remaining(now)
            if match.donor_response == Match.Response.PENDING:
                NotificationService.notify_reminder_donor(match, hours_remaining, match.request.urgency)
                sent += 1
            if match.requester_response == Match.Response.PENDING:
                NotificationService.notify_reminder_requester(match, hours_remaining)
                sent += 1
        except Exception:
            logger.exception("Failed to send reminders for match #%s", match.pk)

    logger.info("Sent %s reminder notifications", sent)
    return sent


def expire_stale_matches(now=None):
    """
    Expire every open match whose deadline has passed.

    Works from a snapshot of ids; each match is re-read under lock and
    skipped if a concurrent response or sweep already moved it on.

    Returns:
        Number of matches expired by this call
    """
    now = now or timezone.now()
    stale_ids = list(
        Match.objects.filter(status__in=Match.OPEN_STATUSES, expires_at__lte=now)
        .order_by('pk')
        .values_list('pk', flat=True)
    )

    expired = 0
    for match_id in stale_ids:
        try:
            with transaction.atomic():
                match = (
                    Match.objects.select_for_update()
                    .filter(pk=match_id, status__in=Match.OPEN_STATUSES)
                    .first()
                )
                if match is None:
                    continue
                expire_match(match)
                expired += 1
        except Exception:
            logger.exception("Failed to expire match #%s", match_id)

    logger.info("Expired %s old matches", expired)
    return expired


def run_reaper_sweep(now=None):
    """One reaper iteration: reminders first, then the expiry sweep"""
    now = now or timezone.now()
    return {
        'reminders_sent': send_reminders(now=now),
        'matches_expired': expire_stale_matches(now=now),
    }
