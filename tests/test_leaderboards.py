from apps.leaderboards.services import update_stat
from apps.store.document import default_document


def _scorers(store):
    return store.load()["leaderboards"]["scorers"]


def test_appended_entries_are_sorted_descending(staff_client, store):
    staff_client.post("/admin/update-stat", {"type": "scorers", "playerName": "Al", "value": 5})
    staff_client.post("/admin/update-stat", {"type": "scorers", "playerName": "Bo", "value": 9})

    assert _scorers(store) == [{"name": "Bo", "value": 9}, {"name": "Al", "value": 5}]


def test_overwriting_by_index_resorts(staff_client, store):
    for name, value in (("Al", 5), ("Bo", 9), ("Cy", 7)):
        staff_client.post("/admin/update-stat", {"type": "scorers", "playerName": name, "value": value})

    staff_client.post("/admin/update-stat", {"type": "scorers", "statIndex": "2", "value": "12"})

    assert _scorers(store) == [
        {"name": "Al", "value": 12},
        {"name": "Bo", "value": 9},
        {"name": "Cy", "value": 7},
    ]


def test_out_of_range_index_appends_named_entry(staff_client, store):
    staff_client.post(
        "/admin/update-stat", {"type": "saves", "statIndex": "4", "playerName": "Al", "value": "3"}
    )
    assert store.load()["leaderboards"]["saves"] == [{"name": "Al", "value": 3}]


def test_unknown_type_is_ignored(staff_client, store):
    staff_client.post("/admin/update-stat", {"type": "fouls", "playerName": "Al", "value": 1})
    assert "fouls" not in store.load()["leaderboards"]


def test_sort_handles_legacy_string_values():
    document = default_document()
    document["leaderboards"]["assists"] = [{"name": "Al", "value": "2"}, {"name": "Bo", "value": "10"}]

    update_stat(document, "assists", None, "Cy", "4")

    assert [entry["name"] for entry in document["leaderboards"]["assists"]] == ["Bo", "Cy", "Al"]


def test_delete_stat(staff_client, store):
    for name, value in (("Al", 5), ("Bo", 9)):
        staff_client.post("/admin/update-stat", {"type": "scorers", "playerName": name, "value": value})

    staff_client.post("/admin/delete-stat", {"type": "scorers", "statIndex": "0"})
    staff_client.post("/admin/delete-stat", {"type": "scorers", "statIndex": "7"})
    staff_client.post("/admin/delete-stat", {"type": "scorers"})

    assert _scorers(store) == [{"name": "Al", "value": 5}]
