import pytest

from apps.standings.services import add_group, team_at, upsert_team
from apps.store.exceptions import EntityNotFound


@pytest.fixture
def group(store):
    with store.transaction() as document:
        group = add_group(document, "Group A")
        for name in ("Rovers", "United", "City"):
            upsert_team(document, group["id"], "", {"teamName": name, "logo": f"{name}.png"})
    return group


def _teams(store):
    return store.load()["groups"][0]["teams"]


def test_add_and_delete_group(staff_client, store):
    staff_client.post("/admin/add-group", {"name": "Group B"})
    [group] = store.load()["groups"]
    assert group["name"] == "Group B"
    assert group["teams"] == []

    staff_client.post("/admin/delete-group", {"groupId": str(group["id"])})

    assert store.load()["groups"] == []


def test_update_team_without_index_creates_team(staff_client, store, group):
    staff_client.post(
        "/admin/update-team", {"groupId": str(group["id"]), "teamIndex": "", "teamName": "Town"}
    )

    team = _teams(store)[-1]
    assert team == {
        "name": "Town",
        "logo": "",
        "mp": 0,
        "wins": 0,
        "loses": 0,
        "pts": 0,
        "roster": [],
    }


def test_update_team_with_index_edits_counters(staff_client, store, group):
    staff_client.post(
        "/admin/update-team",
        {"groupId": str(group["id"]), "teamIndex": "1", "mp": "3", "wins": "2", "loses": "1", "pts": "6"},
    )

    team = _teams(store)[1]
    assert team["name"] == "United"
    assert (team["mp"], team["wins"], team["loses"], team["pts"]) == (3, 2, 1, 6)


def test_update_team_in_missing_group(staff_client, redirect_error):
    response = staff_client.post("/admin/update-team", {"groupId": "1", "teamName": "Town"})
    assert redirect_error(response) == "Group not found"


def test_update_team_with_stale_index_and_no_name(staff_client, store, group, redirect_error):
    response = staff_client.post(
        "/admin/update-team", {"groupId": str(group["id"]), "teamIndex": "9"}
    )

    assert redirect_error(response) == "Team not found"
    assert [team["name"] for team in _teams(store)] == ["Rovers", "United", "City"]


def test_deleting_team_shifts_indices_and_stale_index_is_not_found(
    client, staff_client, store, group, redirect_error
):
    staff_client.post("/admin/delete-team", {"groupId": str(group["id"]), "teamIndex": "0"})
    assert [team["name"] for team in _teams(store)] == ["United", "City"]

    stale = staff_client.post("/admin/delete-team", {"groupId": str(group["id"]), "teamIndex": "2"})
    assert redirect_error(stale) == "Team not found"

    page = client.get(f"/team/{group['id']}/2")
    assert page.status_code == 302
    assert page.url == "/metrics"
    with pytest.raises(EntityNotFound):
        team_at(store.load(), group["id"], 2)


def test_team_detail_page(client, group):
    response = client.get(f"/team/{group['id']}/1")
    assert response.status_code == 200
    assert response.context["team"]["name"] == "United"


def test_add_to_roster_uses_registered_name(staff_client, store, group, player_factory):
    player_factory("Al")

    staff_client.post(
        "/admin/add-to-roster",
        {"groupId": str(group["id"]), "teamIndex": "0", "playerName": "aL", "isManager": "true"},
    )
    staff_client.post(
        "/admin/add-to-roster",
        {"groupId": str(group["id"]), "teamIndex": "0", "playerName": "Al", "isManager": "yes"},
    )

    assert _teams(store)[0]["roster"] == [
        {"name": "Al", "isManager": True},
        {"name": "Al", "isManager": False},
    ]


def test_add_unknown_player_to_roster(staff_client, group, redirect_error):
    response = staff_client.post(
        "/admin/add-to-roster",
        {"groupId": str(group["id"]), "teamIndex": "0", "playerName": "Ghost"},
    )
    assert redirect_error(response) == 'Player "Ghost" not found!'


def test_add_to_roster_of_missing_team(staff_client, group, player_factory, redirect_error):
    player_factory("Al")
    response = staff_client.post(
        "/admin/add-to-roster",
        {"groupId": str(group["id"]), "teamIndex": "9", "playerName": "Al"},
    )
    assert redirect_error(response) == "Team not found"


def test_delete_from_roster(staff_client, store, group, player_factory):
    player_factory("Al")
    player_factory("Bo")
    for name in ("Al", "Bo"):
        staff_client.post(
            "/admin/add-to-roster",
            {"groupId": str(group["id"]), "teamIndex": "2", "playerName": name},
        )

    staff_client.post(
        "/admin/delete-from-roster",
        {"groupId": str(group["id"]), "teamIndex": "2", "playerIndex": "0"},
    )

    assert _teams(store)[2]["roster"] == [{"name": "Bo", "isManager": False}]
