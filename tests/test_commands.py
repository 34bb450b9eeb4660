from datetime import timedelta
from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import CommandError, call_command
from django.utils import timezone

from accounts.models import Role
from matches.models import Match

User = get_user_model()

pytestmark = pytest.mark.django_db


def run(*args, **kwargs):
    out = StringIO()
    call_command(*args, stdout=out, **kwargs)
    return out.getvalue()


def test_detect_matches_command(make_donor, make_request):
    blood_request = make_request(blood_type='B-')
    make_donor(blood_type='O-')

    output = run('detect_matches', '--request', str(blood_request.pk))

    assert '1 matches created' in output
    assert Match.objects.filter(request=blood_request).count() == 1
    assert '0 matches created' in run('detect_matches')


def test_run_reaper_command(donor, make_request):
    make_request(blood_type='A+')
    Match.objects.update(
        created_at=timezone.now() - timedelta(hours=13),
        expires_at=timezone.now() - timedelta(hours=1),
    )

    output = run('run_reaper')

    assert 'Reminders sent: 0, matches expired: 1' in output
    assert Match.objects.get().status == Match.Status.EXPIRED


def test_create_default_admin(settings):
    settings.DEFAULT_ADMIN_PASSWORD = 'admin-pass'

    output = run('create_default_admin', '--username', 'root', '--email', 'Root@Example.com')

    assert 'created successfully' in output
    admin = User.objects.get(username='root')
    assert admin.role == Role.ADMIN
    assert admin.is_superuser and admin.is_staff
    assert admin.email == 'root@example.com'
    assert admin.check_password('admin-pass')

    assert 'already exists' in run('create_default_admin', '--username', 'root')
    assert User.objects.filter(username='root').count() == 1


def test_import_users_from_csv(tmp_path, donor):
    path = tmp_path / 'users.csv'
    path.write_text(
        'username,email,blood_type,role,phone,location\n'
        'hari,Hari@Example.com,ab-,donor,98-41000000,Pokhara\n'
        'gita,gita@example.com,O+,requester,,\n'
        'bad,bad@example.com,Z+,donor,,\n'
        f'{donor.username},{donor.email},O-,donor,98-00000009,Butwal\n'
    )

    output = run('import_users', str(path), '--password', 'welcome1')

    assert 'Created: 2, Updated: 1, Skipped: 1' in output

    hari = User.objects.get(email='hari@example.com')
    assert hari.blood_type == 'AB-'
    assert hari.role == Role.DONOR
    assert hari.phone == '98-41000000'
    assert hari.check_password('welcome1')

    gita = User.objects.get(username='gita')
    assert gita.role == Role.REQUESTER
    assert gita.phone == ''

    donor.refresh_from_db()
    assert donor.location == 'Butwal'
    assert donor.check_password('secret123')
    assert not User.objects.filter(email='bad@example.com').exists()


def test_import_users_missing_columns(tmp_path):
    path = tmp_path / 'users.csv'
    path.write_text('username,email\nram,ram@example.com\n')

    with pytest.raises(CommandError, match='blood_type'):
        run('import_users', str(path))


def test_import_users_missing_file(tmp_path):
    with pytest.raises(CommandError, match='File not found'):
        run('import_users', str(tmp_path / 'nope.csv'))
