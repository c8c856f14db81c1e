"""
Management command to refresh the rented flag of every car.
This command can be run from cron when Celery beat is not deployed.
"""
import logging

from django.core.management.base import BaseCommand

from apps.cars.tasks import refresh_rented_flags

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Recompute Car.is_currently_rented from the active rentals'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report the changes without saving them',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        if dry_run:
            self.stdout.write(self.style.WARNING('DRY RUN MODE - No changes will be made'))

        try:
            marked, released = refresh_rented_flags(dry_run=dry_run)
        except Exception:
            logger.exception('Error in refresh_rented_cars command')
            raise

        prefix = '[DRY RUN] Would mark' if dry_run else 'Marked'
        self.stdout.write(self.style.SUCCESS(f'{prefix} {marked} car(s) as rented'))
        prefix = '[DRY RUN] Would release' if dry_run else 'Released'
        self.stdout.write(self.style.SUCCESS(f'{prefix} {released} car(s)'))
