from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from django.conf import settings

from accounts.models import Role

User = get_user_model()


class Command(BaseCommand):
    help = 'Create the default admin account if it does not exist yet'

    def add_arguments(self, parser):
        parser.add_argument('--username', default=settings.DEFAULT_ADMIN_USERNAME)
        parser.add_argument('--email', default=settings.DEFAULT_ADMIN_EMAIL)

    def handle(self, *args, **options):
        username = options['username']

        if User.objects.filter(username=username).exists():
            self.stdout.write(self.style.WARNING(f'Admin user {username} already exists.'))
            return

        User.objects.create_superuser(
            username=username,
            email=options['email'].lower(),
            password=settings.DEFAULT_ADMIN_PASSWORD,
            role=Role.ADMIN,
            blood_type='O+',
        )

        self.stdout.write(self.style.SUCCESS(f'Default admin {username} created successfully!'))
