from unittest import mock

import pytest

from notifications.models import Notification
from notifications.services import NotificationService
from notifications.tasks import send_notification_email

pytestmark = pytest.mark.django_db


def test_create_notification_defaults(donor):
    notification = NotificationService.create_notification(
        user_id=donor.pk,
        notification_type='reminder',
        title="Reminder",
        message="Please respond",
    )
    assert notification.data == {}
    assert notification.is_read is False
    assert notification.match is None


def test_email_queued_after_commit_when_enabled(settings, donor, django_capture_on_commit_callbacks):
    settings.NOTIFICATION_EMAILS_ENABLED = True

    with mock.patch.object(send_notification_email, 'delay') as delay:
        with django_capture_on_commit_callbacks(execute=True):
            notification = NotificationService.create_notification(
                user_id=donor.pk,
                notification_type='reminder',
                title="Reminder",
                message="Please respond",
            )

    delay.assert_called_once_with(notification.pk)


def test_no_email_when_disabled(donor, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks() as callbacks:
        NotificationService.create_notification(
            user_id=donor.pk,
            notification_type='reminder',
            title="Reminder",
            message="Please respond",
        )
    assert callbacks == []


def test_send_notification_email(settings, donor, mailoutbox):
    settings.SITE_URL = 'https://bloodmatch.example'
    notification = NotificationService.create_notification(
        user_id=donor.pk,
        notification_type='match_request',
        title="New Blood Donation Request",
        message="Someone needs O- blood",
    )

    result = send_notification_email(notification.pk)

    assert result == f"Email sent to {donor.email}"
    assert len(mailoutbox) == 1
    email = mailoutbox[0]
    assert email.subject == "New Blood Donation Request"
    assert email.to == [donor.email]
    assert "Someone needs O- blood" in email.body
    assert "https://bloodmatch.example/dashboard" in email.body


def test_send_notification_email_missing(db, mailoutbox):
    assert send_notification_email(999999) == "Notification 999999 not found"
    assert mailoutbox == []


def test_expired_notice_reaches_both_parties(donor, requester, make_request):
    blood_request = make_request(requester=requester, blood_type='A+')
    match = blood_request.matches.get()

    donor_note, requester_note = NotificationService.notify_match_expired(match)

    assert donor_note.user_id == donor.pk
    assert requester_note.user_id == requester.pk
    assert requester_note.message == f"The match request with {donor.username} has expired."
    assert Notification.objects.filter(match=match, notification_type='match_expired').count() == 2
