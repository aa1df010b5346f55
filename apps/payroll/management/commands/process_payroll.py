from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.payroll.services import PayrollAccessDenied, PayrollService


class Command(BaseCommand):
    help = "Process payroll for a month on behalf of a user."

    def add_arguments(self, parser):
        parser.add_argument("--year", type=int, required=True)
        parser.add_argument("--month", type=int, required=True)
        parser.add_argument("--username", required=True, help="User the run is processed as.")

    def handle(self, *args, **options):
        year = options["year"]
        month = options["month"]
        if month < 1 or month > 12:
            raise CommandError("Month must be in range 1..12")

        User = get_user_model()
        actor = User.objects.select_related("role").filter(username=options["username"]).first()
        if actor is None:
            raise CommandError(f"User {options['username']!r} not found.")

        try:
            run = PayrollService.process_period(actor=actor, month=month, year=year)
        except (PayrollAccessDenied, ValueError) as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(
            self.style.SUCCESS(
                f"Payroll processed for {run.period}. employees={run.total_employees}, "
                f"gross={run.total_gross_salary}, deductions={run.total_deductions}, net={run.total_net_salary}"
            )
        )
