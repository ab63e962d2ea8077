from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Run the league site on 0.0.0.0 using the configured PORT"

    def add_arguments(self, parser):
        parser.add_argument("--port", type=int, default=None)

    def handle(self, *args, **options):
        port = options["port"] or settings.PORT
        self.stdout.write(self.style.SUCCESS(f"VIM Hub is LIVE on port {port}"))
        call_command("runserver", f"0.0.0.0:{port}", use_reloader=False)
