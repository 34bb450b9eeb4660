import logging

from django.db import transaction

from accounts.models import BloodType, Role
from matches.exceptions import InvalidState, NotFound, Unauthorized, ValidationError
from matches.models import Match
from notifications.services import NotificationService
from requesters.models import BloodRequest

logger = logging.getLogger(__name__)

URGENCY_LEVELS = [value for value, _ in BloodRequest.URGENCY_CHOICES]


def create_request(requester, blood_type, urgency, description=''):
    """
    Create a Pending blood request. Match detection for the new request
    runs from the post_save signal.
    """
    if requester.role != Role.REQUESTER:
        raise Unauthorized("Only requesters can create blood requests")
    if blood_type not in BloodType.values:
        raise ValidationError("Invalid blood group")
    if urgency not in URGENCY_LEVELS:
        raise ValidationError("Invalid urgency level")

    blood_request = BloodRequest.objects.create(
        requester=requester,
        requester_name=requester.username,
        blood_type=blood_type,
        urgency=urgency,
        description=(description or '').strip(),
    )
    logger.info("Request #%s created by %s (%s, %s)", blood_request.pk, requester.username, blood_type, urgency)
    return blood_request


def cancel_request(request_id, user_id):
    """
    Cancel a Pending request owned by the caller.

    Open matches for the request are closed as requester_rejected and
    each affected donor is notified.
    """
    with transaction.atomic():
        blood_request = (
            BloodRequest.objects.select_for_update()
            .filter(pk=request_id, requester_id=user_id)
            .first()
        )
        if blood_request is None:
            raise NotFound("Request not found")

        if blood_request.status == BloodRequest.STATUS_CANCELLED:
            raise InvalidState("Request is already cancelled")

        if blood_request.status != BloodRequest.STATUS_PENDING:
            raise InvalidState("Cannot cancel a matched request. Contact the donor directly if needed.")

        blood_request.status = BloodRequest.STATUS_CANCELLED
        blood_request.save(update_fields=['status'])

        open_matches = Match.objects.select_for_update().filter(
            request=blood_request,
            status__in=Match.OPEN_STATUSES,
        )
        cancelled = 0
        for match in open_matches:
            match.status = Match.Status.REQUESTER_REJECTED
            match.save(update_fields=['status'])
            NotificationService.notify_request_cancelled(match)
            cancelled += 1

    logger.info("Request #%s cancelled, %s open matches closed", blood_request.pk, cancelled)
    return blood_request
