import logging

from django.conf import settings
from django.db import transaction

from .models import Notification

logger = logging.getLogger(__name__)


def _iso(value):
    return value.isoformat() if value else None


class NotificationService:
    """Service for creating lifecycle notifications"""

    @staticmethod
    def create_notification(user_id, notification_type, title, message, data=None, match=None):
        """Create a new notification and queue its email copy when enabled"""
        notification = Notification.objects.create(
            user_id=user_id,
            notification_type=notification_type,
            title=title,
            message=message,
            data=data or {},
            match=match,
        )
        logger.info("Notification created for user %s: %s", user_id, title)

        if settings.NOTIFICATION_EMAILS_ENABLED:
            from .tasks import send_notification_email
            transaction.on_commit(lambda: send_notification_email.delay(notification.pk))

        return notification

    # ---------------------------
    # Match detection
    # ---------------------------
    @staticmethod
    def notify_match_request_donor(match, blood_request):
        """Ask the donor whether they can help"""
        return NotificationService.create_notification(
            user_id=match.donor_id,
            notification_type='match_request',
            title="New Blood Donation Request",
            message=(
                f"{match.requester_name} needs {match.blood_type} blood "
                f"({blood_request.urgency} urgency). Would you like to help?"
            ),
            data={
                'match_id': str(match.pk),
                'requester_name': match.requester_name,
                'blood_type': match.blood_type,
                'urgency': blood_request.urgency,
                'description': blood_request.description,
                'expires_at': _iso(match.expires_at),
            },
            match=match,
        )

    @staticmethod
    def notify_match_request_requester(match, donor):
        """Tell the requester a compatible donor was found"""
        return NotificationService.create_notification(
            user_id=match.requester_id,
            notification_type='match_request',
            title="Potential Donor Found",
            message=(
                f"{match.donor_name} ({donor.blood_type}) might be able to help with "
                f"your blood request. Waiting for their response."
            ),
            data={
                'match_id': str(match.pk),
                'donor_name': match.donor_name,
                'donor_blood_type': donor.blood_type,
                'expires_at': _iso(match.expires_at),
            },
            match=match,
        )

    # ---------------------------
    # Responses
    # ---------------------------
    @staticmethod
    def notify_match_declined(match, recipient_id, declined_by_name):
        return NotificationService.create_notification(
            user_id=recipient_id,
            notification_type='match_rejected',
            title="Match Request Declined",
            message=f"{declined_by_name} has declined the blood donation match.",
            data={'match_id': str(match.pk)},
            match=match,
        )

    @staticmethod
    def notify_match_confirmed_donor(match):
        """Confirmation for the donor, carrying the requester's contact details"""
        return NotificationService.create_notification(
            user_id=match.donor_id,
            notification_type='match_accepted',
            title="Blood Match Confirmed!",
            message=(
                f"Both you and {match.requester_name} have accepted the match. "
                f"Contact details have been shared."
            ),
            data={
                'match_id': str(match.pk),
                'requester_info': match.requester_info,
                'blood_type': match.blood_type,
            },
            match=match,
        )

    @staticmethod
    def notify_match_confirmed_requester(match):
        """Confirmation for the requester, carrying the donor's contact details"""
        return NotificationService.create_notification(
            user_id=match.requester_id,
            notification_type='match_accepted',
            title="Donor Found!",
            message=(
                f"Both you and {match.donor_name} have accepted the match. Contact details "
                f"have been shared. Your request has been fulfilled!"
            ),
            data={
                'match_id': str(match.pk),
                'donor_info': match.donor_info,
                'blood_type': match.blood_type,
            },
            match=match,
        )

    @staticmethod
    def notify_request_fulfilled(match):
        """Tell a competing donor that someone else fulfilled the request"""
        return NotificationService.create_notification(
            user_id=match.donor_id,
            notification_type='request_fulfilled',
            title="Blood Request Fulfilled",
            message=f"The blood request from {match.requester_name} has been fulfilled by another donor.",
            data={'match_id': str(match.pk)},
            match=match,
        )

    @staticmethod
    def notify_request_cancelled(match):
        return NotificationService.create_notification(
            user_id=match.donor_id,
            notification_type='request_cancelled',
            title="Blood Request Cancelled",
            message=f"{match.requester_name} has cancelled their {match.blood_type} blood request.",
            data={
                'match_id': str(match.pk),
                'requester_name': match.requester_name,
            },
            match=match,
        )

    # ---------------------------
    # Reaper
    # ---------------------------
    @staticmethod
    def notify_match_expired(match):
        """Notify both parties; returns the two notifications"""
        donor_notification = NotificationService.create_notification(
            user_id=match.donor_id,
            notification_type='match_expired',
            title="Match Request Expired",
            message=f"The match request with {match.requester_name} has expired.",
            data={'match_id': str(match.pk)},
            match=match,
        )
        requester_notification = NotificationService.create_notification(
            user_id=match.requester_id,
            notification_type='match_expired',
            title="Match Request Expired",
            message=f"The match request with {match.donor_name} has expired.",
            data={'match_id': str(match.pk)},
            match=match,
        )
        return donor_notification, requester_notification

    @staticmethod
    def notify_reminder_donor(match, hours_remaining, urgency):
        return NotificationService.create_notification(
            user_id=match.donor_id,
            notification_type='reminder',
            title="Reminder: Blood Donation Request",
            message=(
                f"{match.requester_name} is still waiting for your response. "
                f"{hours_remaining} hours remaining."
            ),
            data={
                'match_id': str(match.pk),
                'time_remaining': hours_remaining,
                'requester_name': match.requester_name,
                'blood_type': match.blood_type,
                'urgency': urgency,
            },
            match=match,
        )

    @staticmethod
    def notify_reminder_requester(match, hours_remaining):
        return NotificationService.create_notification(
            user_id=match.requester_id,
            notification_type='reminder',
            title="Reminder: Donor Response Pending",
            message=(
                f"{match.donor_name} is considering your blood request. "
                f"{hours_remaining} hours remaining."
            ),
            data={
                'match_id': str(match.pk),
                'time_remaining': hours_remaining,
                'donor_name': match.donor_name,
            },
            match=match,
        )
