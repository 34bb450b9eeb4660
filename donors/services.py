import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from accounts.models import MatchStatus, Role
from matches.detection import find_and_create_matches
from matches.exceptions import NotFound, Unauthorized, ValidationError

User = get_user_model()

logger = logging.getLogger(__name__)


def set_donor_availability(donor_id, available):
    """
    Toggle a donor's availability.

    Becoming available resets the match status to Available and runs
    match detection for this donor. Becoming unavailable leaves any
    outstanding proposals untouched; they resolve or expire normally.

    Returns:
        Number of matches created (always 0 when turning unavailable)
    """
    if not isinstance(available, bool):
        raise ValidationError("isAvailable must be a boolean")

    with transaction.atomic():
        donor = User.objects.select_for_update().filter(pk=donor_id).first()
        if donor is None:
            raise NotFound("User not found")
        if donor.role != Role.DONOR:
            raise Unauthorized("Only donors can update availability")

        donor.is_available = available
        donor.match_status = MatchStatus.AVAILABLE if available else MatchStatus.UNAVAILABLE
        donor.save(update_fields=['is_available', 'match_status'])

    logger.info("Donor %s availability set to %s", donor.username, available)

    if not available:
        return 0

    return find_and_create_matches(donor_id=donor.pk)
