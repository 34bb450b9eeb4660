"""
Automatic match detection.

Pairs Pending blood requests with available compatible donors and opens a
12-hour proposal for every pair that has no active match yet. Detection is
best-effort background work: it never raises and it is always safe to re-run.
"""
import logging
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.utils import timezone

from accounts.models import MatchStatus, Role
from algorithms.blood_compatibility import compatible_donor_types, get_compatible_recipients
from matches.models import Match
from notifications.services import NotificationService
from requesters.models import BloodRequest

User = get_user_model()

logger = logging.getLogger(__name__)


def available_donors():
    return User.objects.filter(
        role=Role.DONOR,
        is_available=True,
        match_status=MatchStatus.AVAILABLE,
    )


def _collect_candidates(request_id=None, donor_id=None):
    """
    Build the (requests, donors) candidate lists for one detection pass.

    - request_id: the new request against every available compatible donor
    - donor_id: the newly available donor against every compatible Pending request
    - neither: every Pending request against every available donor
    """
    if request_id is not None:
        blood_request = (
            BloodRequest.objects.select_related('requester')
            .filter(pk=request_id, status=BloodRequest.STATUS_PENDING)
            .first()
        )
        if blood_request is None:
            return [], []
        donors = available_donors().filter(
            blood_type__in=compatible_donor_types(blood_request.blood_type)
        )
        return [blood_request], list(donors)

    if donor_id is not None:
        donor = available_donors().filter(pk=donor_id).first()
        if donor is None:
            return [], []
        requests = BloodRequest.objects.select_related('requester').filter(
            status=BloodRequest.STATUS_PENDING,
            blood_type__in=get_compatible_recipients(donor.blood_type),
        )
        return list(requests), [donor]

    requests = BloodRequest.objects.select_related('requester').filter(
        status=BloodRequest.STATUS_PENDING
    )
    return list(requests), list(available_donors())


def _active_match_exists(donor, blood_request):
    return Match.objects.filter(
        donor=donor,
        request=blood_request,
        status__in=Match.ACTIVE_STATUSES,
    ).exists()


def create_match(blood_request, donor, now=None):
    """
    Open a proposal for one (request, donor) pair and notify both parties.

    Returns the new Match, or None when an active match already exists or
    when the request or donor changed since the candidates were read.
    The request row is locked before the insert, the same order the
    resolver and cancellation use. The conditional unique constraint on
    (donor, request) closes the race between the existence check and the
    insert.
    """
    if _active_match_exists(donor, blood_request):
        return None

    now = now or timezone.now()
    lifetime = timedelta(hours=settings.MATCH_PROPOSAL_LIFETIME_HOURS)

    try:
        with transaction.atomic():
            blood_request = BloodRequest.objects.select_for_update().get(pk=blood_request.pk)
            if not blood_request.is_pending:
                logger.info("Request #%s is %s, skipping", blood_request.pk, blood_request.status)
                return None

            donor = User.objects.select_for_update().get(pk=donor.pk)
            if not donor.is_eligible_donor:
                logger.info("Donor %s is no longer available, skipping", donor.pk)
                return None

            match = Match.objects.create(
                donor=donor,
                requester_id=blood_request.requester_id,
                request=blood_request,
                donor_name=donor.username,
                requester_name=blood_request.requester_name,
                blood_type=blood_request.blood_type,
                created_at=now,
                expires_at=now + lifetime,
            )
            NotificationService.notify_match_request_donor(match, blood_request)
            NotificationService.notify_match_request_requester(match, donor)
    except IntegrityError:
        logger.info(
            "Active match for donor %s and request #%s created concurrently, skipping",
            donor.pk, blood_request.pk,
        )
        return None

    logger.info("Created match #%s: %s <-> %s", match.pk, donor.username, blood_request.requester_name)
    return match


def find_and_create_matches(request_id=None, donor_id=None, now=None):
    """
    Run one detection pass.

    Args:
        request_id: a newly created request (case a)
        donor_id: a donor who just became available (case b)
        neither: full scan (case c)

    Returns:
        Number of matches created; 0 on internal failure
    """
    logger.info("Finding automatic matches (request=%s, donor=%s)", request_id, donor_id)

    try:
        requests, donors = _collect_candidates(request_id=request_id, donor_id=donor_id)
    except Exception:
        logger.exception("Match detection failed while collecting candidates")
        return 0

    matches_created = 0

    for blood_request in requests:
        compatible_types = compatible_donor_types(blood_request.blood_type)
        for donor in donors:
            if donor.blood_type not in compatible_types:
                continue
            # The requester never donates to their own request
            if donor.pk == blood_request.requester_id:
                continue
            try:
                if create_match(blood_request, donor, now=now) is not None:
                    matches_created += 1
            except Exception:
                logger.exception(
                    "Failed to create match for donor %s and request #%s",
                    donor.pk, blood_request.pk,
                )

    logger.info("Created %s new matches", matches_created)
    return matches_created
