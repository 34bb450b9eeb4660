from django.core.management.base import BaseCommand

from matches.reaper import run_reaper_sweep


class Command(BaseCommand):
    help = 'Send match reminders and expire matches past their deadline'

    def handle(self, *args, **options):
        summary = run_reaper_sweep()
        self.stdout.write(
            self.style.SUCCESS(
                f"Reminders sent: {summary['reminders_sent']}, "
                f"matches expired: {summary['matches_expired']}"
            )
        )
