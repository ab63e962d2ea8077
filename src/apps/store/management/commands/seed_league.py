from django.core.management.base import BaseCommand

from apps.store.document import get_store
from apps.store.ids import new_id


class Command(BaseCommand):
    help = "Seed a demo league into an empty document"

    def handle(self, *args, **options):
        with get_store().transaction() as document:
            if document["groups"] or document["matches"] or document["players"]:
                self.stdout.write("League document already has data; nothing seeded.")
                return

            document["groups"].append(
                {
                    "id": new_id(),
                    "name": "Group A",
                    "teams": [
                        _team("Vim Rovers", mp=2, wins=2, pts=6),
                        _team("Vim United", mp=2, loses=2),
                    ],
                }
            )
            document["matches"].append(
                {
                    "id": new_id(),
                    "teamA": "Vim Rovers",
                    "teamB": "Vim United",
                    "date": "TBD",
                    "status": "upcoming",
                }
            )
            document["leaderboards"]["scorers"] = [
                {"name": "Demo Striker", "value": 4},
                {"name": "Demo Winger", "value": 2},
            ]
            document["stories"].append(
                {
                    "id": new_id(),
                    "title": "Season kicks off",
                    "body": "Two teams, one trophy.",
                    "date": "1/1/2025",
                }
            )

        self.stdout.write(self.style.SUCCESS("Demo league ready."))


def _team(name, mp=0, wins=0, loses=0, pts=0):
    return {
        "name": name,
        "logo": "",
        "mp": mp,
        "wins": wins,
        "loses": loses,
        "pts": pts,
        "roster": [],
    }
