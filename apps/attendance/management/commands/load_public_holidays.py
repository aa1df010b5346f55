from datetime import date

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.attendance.models import PublicHoliday


class Command(BaseCommand):
    help = "Load PublicHoliday records from settings.PUBLIC_HOLIDAYS."

    def add_arguments(self, parser):
        parser.add_argument("--year", type=int, help="Only load holidays of this year.")
        parser.add_argument(
            "--overwrite",
            action="store_true",
            help="Update names of holidays that already exist.",
        )

    def handle(self, *args, **options):
        table = getattr(settings, "PUBLIC_HOLIDAYS", {})
        year = options["year"]
        overwrite = options["overwrite"]

        if year is not None and year not in table:
            raise CommandError(f"No public holidays configured for {year}.")

        created = 0
        updated = 0
        for table_year, entries in sorted(table.items()):
            if year is not None and table_year != year:
                continue
            for iso_date, name in entries:
                day = date.fromisoformat(iso_date)
                if overwrite:
                    _, was_created = PublicHoliday.objects.update_or_create(date=day, defaults={"name": name})
                    if was_created:
                        created += 1
                    else:
                        updated += 1
                    continue
                _, was_created = PublicHoliday.objects.get_or_create(date=day, defaults={"name": name})
                if was_created:
                    created += 1

        self.stdout.write(self.style.SUCCESS(f"Public holidays loaded. created={created}, updated={updated}"))
