from django.core.management.base import BaseCommand

from matches.detection import find_and_create_matches


class Command(BaseCommand):
    help = 'Run match detection for one request, one donor, or a full scan'

    def add_arguments(self, parser):
        parser.add_argument('--request', type=int, dest='request_id', help='Blood request id')
        parser.add_argument('--donor', type=int, dest='donor_id', help='Donor user id')

    def handle(self, *args, **options):
        matches_created = find_and_create_matches(
            request_id=options.get('request_id'),
            donor_id=options.get('donor_id'),
        )
        self.stdout.write(self.style.SUCCESS(f'{matches_created} matches created'))
