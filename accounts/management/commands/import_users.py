# accounts/management/commands/import_users.py
"""
Django management command to import donors and requesters from a spreadsheet
Usage: python manage.py import_users path/to/users.xlsx [--password ChangeMe123!]

Expected columns: username, email, blood_type, role
Optional columns: phone, location, is_available
"""

from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model
from django.db import transaction
import pandas as pd

from accounts.models import BloodType, Role

User = get_user_model()

REQUIRED_COLUMNS = ['username', 'email', 'blood_type', 'role']
IMPORTABLE_ROLES = [Role.DONOR, Role.REQUESTER]


class Command(BaseCommand):
    help = 'Import donor and requester accounts from a CSV or Excel file'

    def add_arguments(self, parser):
        parser.add_argument('path', type=str, help='Path to the .csv or .xlsx file')
        parser.add_argument(
            '--password',
            default='ChangeMe123!',
            help='Initial password for newly created accounts'
        )

    def handle(self, *args, **options):
        path = options['path']

        try:
            if path.lower().endswith('.csv'):
                df = pd.read_csv(path)
            else:
                df = pd.read_excel(path)
        except FileNotFoundError:
            raise CommandError(f'File not found: {path}')

        missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            raise CommandError(f'Missing columns: {", ".join(missing_columns)}')

        self.stdout.write(f'Found {len(df)} rows in {path}')

        df = df.dropna(subset=['username', 'email'])

        created_count = 0
        updated_count = 0
        skipped_count = 0

        with transaction.atomic():
            for index, row in df.iterrows():
                line = index + 2
                blood_type = str(row['blood_type']).strip().upper()
                role = str(row['role']).strip().lower()

                if blood_type not in BloodType.values:
                    self.stdout.write(self.style.WARNING(f'Skipping row {line}: invalid blood type {blood_type}'))
                    skipped_count += 1
                    continue

                if role not in IMPORTABLE_ROLES:
                    self.stdout.write(self.style.WARNING(f'Skipping row {line}: invalid role {role}'))
                    skipped_count += 1
                    continue

                is_available = row.get('is_available', True)
                defaults = {
                    'username': str(row['username']).strip(),
                    'blood_type': blood_type,
                    'role': role,
                    'phone': _optional_text(row.get('phone')),
                    'location': _optional_text(row.get('location')),
                    'is_available': bool(is_available) if pd.notna(is_available) else True,
                }

                user, created = User.objects.update_or_create(
                    email=str(row['email']).strip().lower(),
                    defaults=defaults,
                )

                if created:
                    user.set_password(options['password'])
                    user.save(update_fields=['password'])
                    created_count += 1
                    self.stdout.write(f'Created: {user.username} ({user.role}, {user.blood_type})')
                else:
                    updated_count += 1
                    self.stdout.write(f'Updated: {user.username}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Import complete! Created: {created_count}, '
                f'Updated: {updated_count}, Skipped: {skipped_count}'
            )
        )


def _optional_text(value):
    if value is None or pd.isna(value):
        return ''
    return str(value).strip()
