from django.core.management.base import BaseCommand, CommandError

from apps.store.document import default_document, get_store


class Command(BaseCommand):
    help = "Replace the league document with an empty one"

    def add_arguments(self, parser):
        parser.add_argument("--confirm", type=str, required=True)

    def handle(self, *args, **options):
        if options["confirm"] != "YES":
            raise CommandError("Confirmation required: --confirm YES")

        store = get_store()
        with store.transaction() as document:
            counts = {
                key: len(document[key])
                for key in ("players", "matches", "groups", "records", "stories")
            }
            document.clear()
            document.update(default_document())

        summary = " ".join(f"{key}={value}" for key, value in counts.items())
        self.stdout.write(self.style.SUCCESS(f"Deleted {summary} and reset {store.path}."))
