"""Remove bookings that were used to mark closed slots before closures existed."""

from django.core.management.base import BaseCommand

from apps.bookings.repositories import DjangoBookingRepository

LEGACY_CLOSURE_NAME = "CLOSED"


class Command(BaseCommand):
    help = 'Deletes legacy bookings whose customer name is "CLOSED"'

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only report how many bookings would be deleted",
        )

    def handle(self, *args, **options):
        repository = DjangoBookingRepository()
        legacy = repository.find_by_customer_name(LEGACY_CLOSURE_NAME)
        self.stdout.write(f"Found {len(legacy)} legacy closure booking(s)")

        if options["dry_run"] or not legacy:
            return

        deleted = repository.delete_by_ids(booking.pk for booking in legacy)
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} legacy closure booking(s)"))
