from datetime import timedelta

import pytest

from matches.models import Match
from matches.queries import active_matches_for, dashboard_stats, notifications_for, pending_matches_for
from matches.resolver import respond_to_match
from requesters.services import cancel_request

pytestmark = pytest.mark.django_db


@pytest.fixture
def match(donor, requester, make_request):
    blood_request = make_request(requester=requester, blood_type='A+')
    return Match.objects.get(request=blood_request)


def test_pending_matches_follow_who_owes_an_answer(match, donor, requester):
    assert list(pending_matches_for(donor)) == [match]
    assert list(pending_matches_for(requester)) == [match]

    respond_to_match(match.pk, donor.pk, 'accepted')

    assert list(pending_matches_for(donor)) == []
    assert list(pending_matches_for(requester)) == [match]


def test_pending_matches_hide_expired_proposals(match, donor):
    assert list(pending_matches_for(donor, now=match.expires_at + timedelta(seconds=1))) == []


def test_pending_matches_for_admin_is_empty(match, admin_user):
    assert list(pending_matches_for(admin_user)) == []


def test_active_matches(match, donor, requester):
    assert list(active_matches_for(donor)) == []

    respond_to_match(match.pk, requester.pk, 'accepted')
    respond_to_match(match.pk, donor.pk, 'accepted')

    assert list(active_matches_for(donor)) == [match]
    assert list(active_matches_for(requester)) == [match]


def test_notifications_newest_first(match, donor):
    respond_to_match(match.pk, donor.pk, 'rejected')
    titles = [n.title for n in notifications_for(match.requester)]
    assert titles == ["Match Request Declined", "Potential Donor Found"]
    assert len(notifications_for(match.requester, limit=1)) == 1


def test_dashboard_stats(make_donor, requester, make_request):
    make_donor(blood_type='O-')
    make_donor(blood_type='A-', available=False)
    blood_request = make_request(requester=requester, blood_type='A+')
    cancelled = make_request(requester=requester, blood_type='O+')
    cancel_request(cancelled.pk, requester.pk)
    match = Match.objects.filter(request=blood_request).first()
    respond_to_match(match.pk, match.donor_id, 'rejected')

    stats = dashboard_stats()

    assert stats['total_users'] == 3
    assert stats['total_donors'] == 2
    assert stats['total_requesters'] == 1
    assert stats['available_donors'] == 1
    assert stats['total_requests'] == 2
    assert stats['pending_requests'] == 1
    assert stats['cancelled_requests'] == 1
    assert stats['matched_requests'] == 0
    assert stats['total_matches'] == 2
    assert stats['pending_matches'] == 0
    assert stats['rejected_matches'] == 2
    assert stats['successful_matches'] == 0
    assert stats['expired_matches'] == 0
