"""
Match response resolver.

Applies one party's accept/reject decision to a match and performs the
side effects of the resulting status. Every call runs as one transaction
holding row locks on the blood request and then the match. The lock order
(request before match) is shared with request cancellation, so two
confirmations for the same request serialize instead of deadlocking.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from accounts.models import MatchStatus
from donors.models import DonationHistory
from matches.contacts import build_donor_info, build_requester_info
from matches.exceptions import Expired, InvalidState, NotFound, Unauthorized
from matches.models import DONOR, Match
from matches.reaper import expire_match
from matches.state import REJECTED, derive_status, validate_decision
from notifications.services import NotificationService
from requesters.models import BloodRequest

User = get_user_model()

logger = logging.getLogger(__name__)


def respond_to_match(match_id, user_id, decision, now=None):
    """
    Record a donor's or requester's decision on a match.

    Returns:
        The updated Match

    Raises:
        ValidationError: decision is not 'accepted' or 'rejected'
        NotFound: no such match
        InvalidState: the match is already decided, or the caller already answered
        Expired: the match passed its deadline (it is retired as a side effect)
        Unauthorized: the caller is neither the donor nor the requester
    """
    decision = validate_decision(decision)
    now = now or timezone.now()

    request_id = Match.objects.filter(pk=match_id).values_list('request_id', flat=True).first()
    if request_id is None:
        raise NotFound("Match not found")

    with transaction.atomic():
        blood_request = BloodRequest.objects.select_for_update().get(pk=request_id)
        match = Match.objects.select_for_update().get(pk=match_id)

        _check_respondable(match)

        expired = match.is_past_deadline(now)
        if expired:
            expire_match(match)
        else:
            _apply_response(match, blood_request, user_id, decision, now)

    # Raised outside the transaction so the lazy expiry is committed
    if expired:
        raise Expired("Match has expired")

    return match


def _check_respondable(match):
    if match.status == Match.Status.EXPIRED:
        raise Expired("Match has expired")
    if not match.is_terminal:
        return
    if match.status == Match.Status.BOTH_ACCEPTED:
        raise InvalidState("Match has already been confirmed by both parties")
    raise InvalidState("Match has already been declined")


def _apply_response(match, blood_request, user_id, decision, now):
    party = match.party_for(user_id)
    if party is None:
        raise Unauthorized("Unauthorized to respond to this match")

    new_status = derive_status(match.donor_response, match.requester_response, party, decision)

    if party == DONOR:
        match.donor_response = decision
        match.donor_responded_at = now
        update_fields = ['donor_response', 'donor_responded_at', 'status']
    else:
        match.requester_response = decision
        match.requester_responded_at = now
        update_fields = ['requester_response', 'requester_responded_at', 'status']

    match.status = new_status

    if new_status == Match.Status.BOTH_ACCEPTED:
        if blood_request.status != BloodRequest.STATUS_PENDING:
            raise InvalidState(f"Blood request is already {blood_request.status.lower()}")
        _confirm_match(match, blood_request, now)
        update_fields += ['donor_info', 'requester_info']

    match.save(update_fields=update_fields)

    if decision == REJECTED:
        _notify_rejection(match, party)

    if new_status == Match.Status.BOTH_ACCEPTED:
        _finish_confirmation(match, blood_request)

    logger.info("Match #%s: %s %s -> %s", match.pk, party, decision, new_status)


def _notify_rejection(match, party):
    if party == DONOR:
        NotificationService.notify_match_declined(match, match.requester_id, match.donor_name)
    else:
        NotificationService.notify_match_declined(match, match.donor_id, match.requester_name)


def _confirm_match(match, blood_request, now):
    """Contact exchange plus user and request status transitions"""
    donor = User.objects.select_for_update().get(pk=match.donor_id)
    requester = User.objects.select_for_update().get(pk=match.requester_id)

    match.donor_info = build_donor_info(donor)
    match.requester_info = build_requester_info(requester, blood_request)

    donor.is_available = False
    donor.match_status = MatchStatus.MATCHED
    donor.save(update_fields=['is_available', 'match_status'])

    requester.match_status = MatchStatus.MATCHED
    requester.save(update_fields=['match_status'])

    blood_request.status = BloodRequest.STATUS_MATCHED
    blood_request.matched_with_id = donor.pk
    blood_request.matched_at = now
    blood_request.save(update_fields=['status', 'matched_with', 'matched_at'])


def _finish_confirmation(match, blood_request):
    """Retire competing proposals, notify everyone, record history"""
    competing = (
        Match.objects.select_for_update()
        .filter(request=blood_request, status__in=Match.OPEN_STATUSES)
        .exclude(pk=match.pk)
    )
    for other in competing:
        other.status = Match.Status.EXPIRED
        other.save(update_fields=['status'])
        NotificationService.notify_request_fulfilled(other)

    NotificationService.notify_match_confirmed_donor(match)
    NotificationService.notify_match_confirmed_requester(match)

    DonationHistory.objects.create(
        donor_id=match.donor_id,
        requester_id=match.requester_id,
        match=match,
        donor_name=match.donor_name,
        requester_name=match.requester_name,
        blood_type=match.blood_type,
        status=DonationHistory.STATUS_MATCHED,
    )

    logger.info(
        "Successful match #%s: %s <-> %s, request #%s marked as Matched",
        match.pk, match.donor_name, match.requester_name, blood_request.pk,
    )
