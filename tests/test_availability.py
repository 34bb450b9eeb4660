import pytest

from donors.services import set_donor_availability
from matches.exceptions import NotFound, Unauthorized, ValidationError
from matches.models import Match

pytestmark = pytest.mark.django_db


def test_becoming_available_runs_detection(make_donor, make_request):
    blood_request = make_request(blood_type='B+')
    donor = make_donor(blood_type='B-', available=False)

    assert set_donor_availability(donor.pk, True) == 1

    donor.refresh_from_db()
    assert donor.is_available is True
    assert donor.match_status == 'Available'
    assert Match.objects.filter(request=blood_request, donor=donor).exists()


def test_becoming_unavailable_keeps_open_proposals(donor, make_request):
    make_request(blood_type='A+')
    match = Match.objects.get(donor=donor)

    assert set_donor_availability(donor.pk, False) == 0

    donor.refresh_from_db()
    assert donor.is_available is False
    assert donor.match_status == 'Unavailable'
    match.refresh_from_db()
    assert match.status == Match.Status.PENDING


def test_unavailable_donor_is_skipped_by_new_requests(donor, make_request):
    set_donor_availability(donor.pk, False)
    make_request(blood_type='A+')
    assert not Match.objects.exists()


def test_availability_requires_a_boolean(donor):
    with pytest.raises(ValidationError):
        set_donor_availability(donor.pk, 'yes')


def test_only_donors_toggle_availability(requester):
    with pytest.raises(Unauthorized):
        set_donor_availability(requester.pk, True)


def test_unknown_user(db):
    with pytest.raises(NotFound):
        set_donor_availability(999999, True)
