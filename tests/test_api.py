from datetime import timedelta

import pytest
from django.utils import timezone

from accounts.models import Role
from matches.models import Match
from notifications.models import Notification
from requesters.models import BloodRequest

pytestmark = pytest.mark.django_db


# -----------------------------
# Accounts
# -----------------------------
def test_signup_then_pick_a_role(api_client):
    response = api_client.post('/api/auth/signup/', {
        'username': 'sita',
        'email': 'Sita@Example.com',
        'password': 'secret123',
        'blood_type': 'B+',
    }, format='json')

    assert response.status_code == 201
    assert response.data['user']['role'] == Role.UNSET
    assert response.data['user']['email'] == 'sita@example.com'

    access = response.data['tokens']['access']
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
    response = api_client.put('/api/auth/update-role/', {
        'role': 'donor',
        'phone': '9811111111',
    }, format='json')

    assert response.status_code == 200
    assert response.data['user']['role'] == 'donor'
    assert response.data['user']['is_donor'] is True
    assert response.data['user']['phone'] == '9811111111'
    assert 'access' in response.data['tokens']


def test_signup_rejects_duplicate_email(api_client, donor):
    response = api_client.post('/api/auth/signup/', {
        'username': 'another',
        'email': donor.email.upper(),
        'password': 'secret123',
        'blood_type': 'B+',
    }, format='json')
    assert response.status_code == 400
    assert 'email' in response.data


def test_login_with_email_or_username(api_client, donor):
    response = api_client.post('/api/auth/login/', {'email': donor.email, 'password': 'secret123'}, format='json')
    assert response.status_code == 200
    assert response.data['user']['username'] == donor.username

    response = api_client.post('/api/auth/login/', {'username': donor.username, 'password': 'secret123'}, format='json')
    assert response.status_code == 200

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['tokens']['access']}")
    response = api_client.get('/api/auth/profile/')
    assert response.status_code == 200
    assert response.data['email'] == donor.email


def test_login_failures(api_client, donor):
    response = api_client.post('/api/auth/login/', {'email': donor.email, 'password': 'wrong'}, format='json')
    assert response.status_code == 401

    response = api_client.post('/api/auth/login/', {'email': donor.email}, format='json')
    assert response.status_code == 400


def test_endpoints_require_authentication(api_client):
    assert api_client.get('/api/matches/pending/').status_code == 401
    assert api_client.get('/api/notifications/').status_code == 401


def test_health(api_client):
    response = api_client.get('/api/health/')
    assert response.status_code == 200
    assert response.data['database'] == 'connected'


# -----------------------------
# Requester flow
# -----------------------------
def test_requester_creates_and_lists_requests(client_for, donor, requester):
    client = client_for(requester)
    response = client.post('/api/requester/requests/', {
        'blood_type': 'A+',
        'urgency': 'critical',
        'description': 'ICU patient',
    }, format='json')

    assert response.status_code == 201
    assert response.data['matches_created'] == 1
    assert response.data['request']['status'] == 'Pending'

    response = client.get('/api/requester/requests/')
    assert response.status_code == 200
    assert [r['blood_type'] for r in response.data] == ['A+']


def test_donor_cannot_create_requests(client_for, donor):
    response = client_for(donor).post('/api/requester/requests/', {
        'blood_type': 'A+',
        'urgency': 'low',
    }, format='json')
    assert response.status_code == 403


def test_invalid_request_payload(client_for, requester):
    response = client_for(requester).post('/api/requester/requests/', {
        'blood_type': 'X+',
        'urgency': 'low',
    }, format='json')
    assert response.status_code == 400


def test_cancel_request_endpoint(client_for, donor, requester, make_request):
    blood_request = make_request(requester=requester, blood_type='A+')
    client = client_for(requester)

    response = client.put(f'/api/requester/requests/{blood_request.pk}/cancel/')
    assert response.status_code == 200
    assert Match.objects.get(request=blood_request).status == Match.Status.REQUESTER_REJECTED

    response = client.put(f'/api/requester/requests/{blood_request.pk}/cancel/')
    assert response.status_code == 409

    response = client.put('/api/requester/requests/999999/cancel/')
    assert response.status_code == 404


# -----------------------------
# Match responses
# -----------------------------
def test_full_match_flow_over_http(api_client, donor, requester, make_request):
    blood_request = make_request(requester=requester, blood_type='A+')

    api_client.force_authenticate(user=donor)
    response = api_client.get('/api/matches/pending/')
    assert response.status_code == 200
    assert len(response.data) == 1
    match_id = response.data[0]['id']
    assert response.data[0]['urgency'] == 'high'

    response = api_client.post(f'/api/matches/{match_id}/respond/', {'response': 'accepted'}, format='json')
    assert response.status_code == 200
    assert response.data['match']['status'] == 'donor_accepted'

    api_client.force_authenticate(user=requester)
    response = api_client.post(f'/api/matches/{match_id}/respond/', {'response': 'accepted'}, format='json')
    assert response.status_code == 200
    assert response.data['match']['status'] == 'both_accepted'
    assert response.data['match']['donor_info']['email'] == donor.email

    response = api_client.get('/api/matches/active/')
    assert [m['id'] for m in response.data] == [match_id]

    response = api_client.get('/api/requester/matched-requests/')
    assert response.data[0]['id'] == blood_request.pk
    assert response.data[0]['matched_with_name'] == donor.username
    # Matched requests leave the active list
    assert api_client.get('/api/requester/requests/').data == []

    api_client.force_authenticate(user=donor)
    response = api_client.get('/api/donor/history/')
    assert response.status_code == 200
    assert response.data[0]['requester_name'] == requester.username


def test_respond_error_codes(client_for, donor, requester, make_donor, make_request):
    blood_request = make_request(requester=requester, blood_type='A+')
    match = Match.objects.get(request=blood_request)

    client = client_for(make_donor())
    response = client.post(f'/api/matches/{match.pk}/respond/', {'response': 'accepted'}, format='json')
    assert response.status_code == 403

    client = client_for(donor)
    response = client.post('/api/matches/999999/respond/', {'response': 'accepted'}, format='json')
    assert response.status_code == 404

    response = client.post(f'/api/matches/{match.pk}/respond/', {'response': 'perhaps'}, format='json')
    assert response.status_code == 400

    response = client.post(f'/api/matches/{match.pk}/respond/', {'response': 'accepted'}, format='json')
    assert response.status_code == 200
    response = client.post(f'/api/matches/{match.pk}/respond/', {'response': 'accepted'}, format='json')
    assert response.status_code == 409


def test_respond_to_expired_match(client_for, donor, requester, make_request):
    blood_request = make_request(requester=requester, blood_type='A+')
    Match.objects.filter(request=blood_request).update(expires_at=timezone.now() - timedelta(minutes=5))
    match = Match.objects.get(request=blood_request)

    response = client_for(donor).post(f'/api/matches/{match.pk}/respond/', {'response': 'accepted'}, format='json')

    assert response.status_code == 410
    match.refresh_from_db()
    assert match.status == Match.Status.EXPIRED


# -----------------------------
# Donor availability
# -----------------------------
def test_availability_endpoint(client_for, make_donor, make_request):
    donor = make_donor(blood_type='O-', available=False)
    make_request(blood_type='AB-')
    client = client_for(donor)

    response = client.put('/api/donor/availability/', {'is_available': True}, format='json')
    assert response.status_code == 200
    assert response.data['matches_created'] == 1

    response = client.put('/api/donor/availability/', {'is_available': False}, format='json')
    assert response.data['matches_created'] == 0
    donor.refresh_from_db()
    assert donor.match_status == 'Unavailable'


def test_requester_cannot_toggle_availability(client_for, requester):
    response = client_for(requester).put('/api/donor/availability/', {'is_available': True}, format='json')
    assert response.status_code == 403


# -----------------------------
# Notifications
# -----------------------------
def test_notification_read_flow(client_for, donor, make_request):
    make_request(blood_type='A+')
    make_request(blood_type='B+')
    client = client_for(donor)

    response = client.get('/api/notifications/')
    assert response.status_code == 200
    assert len(response.data) == 2
    first_id = response.data[0]['id']

    response = client.post(f'/api/notifications/{first_id}/read/')
    assert response.status_code == 200
    assert response.data['is_read'] is True

    response = client.post('/api/notifications/read-all/')
    assert response.data['updated'] == 1
    assert not Notification.objects.filter(user=donor, is_read=False).exists()


def test_cannot_read_another_users_notification(client_for, donor, requester, make_request):
    make_request(requester=requester, blood_type='A+')
    note = Notification.objects.get(user=requester)

    response = client_for(donor).post(f'/api/notifications/{note.pk}/read/')
    assert response.status_code == 404


# -----------------------------
# Admin
# -----------------------------
def test_admin_stats_and_listings(client_for, admin_user, donor, make_request):
    make_request(blood_type='A+')
    client = client_for(admin_user)

    response = client.get('/api/admin/stats/')
    assert response.status_code == 200
    assert response.data['total_matches'] == 1
    assert response.data['pending_requests'] == 1

    response = client.get('/api/admin/donors/')
    assert response.status_code == 200
    assert response.data[0]['active_matches'] == 1

    response = client.get('/api/admin/requests/', {'status': 'Pending'})
    assert response.data[0]['match_count'] == 1

    response = client.get('/api/admin/matches/', {'status': 'expired'})
    assert response.data == []


def test_admin_trigger_matches(client_for, admin_user, make_donor, make_request):
    make_request(blood_type='O+')
    make_donor(blood_type='O+')

    response = client_for(admin_user).post('/api/admin/trigger-matches/', {}, format='json')

    assert response.status_code == 200
    assert response.data['matches_created'] == 1
    assert BloodRequest.objects.get().matches.count() == 1


def test_admin_endpoints_reject_other_roles(client_for, donor):
    assert client_for(donor).get('/api/admin/stats/').status_code == 403
    assert client_for(donor).post('/api/admin/trigger-matches/').status_code == 403
