import itertools

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from accounts.models import MatchStatus, Role
from requesters.models import BloodRequest

User = get_user_model()

_counter = itertools.count(1)


@pytest.fixture(autouse=True)
def _test_settings(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
    settings.NOTIFICATION_EMAILS_ENABLED = False
    settings.CELERY_TASK_ALWAYS_EAGER = True
    settings.MATCH_PROPOSAL_LIFETIME_HOURS = 12
    settings.MATCH_REMINDER_AFTER_HOURS = 4


@pytest.fixture
def make_user(db):
    def _make_user(role=Role.DONOR, blood_type='O+', password='secret123', **extra):
        n = next(_counter)
        extra.setdefault('username', f'{role}{n}')
        extra.setdefault('email', f'{role}{n}@example.com')
        return User.objects.create_user(
            password=password,
            role=role,
            blood_type=blood_type,
            **extra
        )
    return _make_user


@pytest.fixture
def make_donor(make_user):
    def _make_donor(blood_type='O+', available=True, **extra):
        if not available:
            extra.setdefault('is_available', False)
            extra.setdefault('match_status', MatchStatus.UNAVAILABLE)
        return make_user(role=Role.DONOR, blood_type=blood_type, **extra)
    return _make_donor


@pytest.fixture
def make_requester(make_user):
    def _make_requester(blood_type='A+', **extra):
        return make_user(role=Role.REQUESTER, blood_type=blood_type, **extra)
    return _make_requester


@pytest.fixture
def make_request(make_requester):
    """Create a Pending request; match detection runs from the post_save signal"""
    def _make_request(requester=None, blood_type='A+', urgency='high', description='Surgery on Monday'):
        requester = requester or make_requester(blood_type=blood_type)
        return BloodRequest.objects.create(
            requester=requester,
            requester_name=requester.username,
            blood_type=blood_type,
            urgency=urgency,
            description=description,
        )
    return _make_request


@pytest.fixture
def donor(make_donor):
    return make_donor(blood_type='O-', phone='9800000001', location='Kathmandu')


@pytest.fixture
def requester(make_requester):
    return make_requester(blood_type='A+', phone='9800000002', location='Lalitpur')


@pytest.fixture
def admin_user(make_user):
    return make_user(role=Role.ADMIN, is_staff=True)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for(api_client):
    def _client_for(user):
        api_client.force_authenticate(user=user)
        return api_client
    return _client_for
