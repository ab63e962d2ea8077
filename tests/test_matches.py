from apps.matches.services import COMPLETED, UPCOMING, PlayerLine, player_lines


def _add_match(client, store, **fields):
    client.post("/admin/add-match", {"teamA": "Rovers", "teamB": "United", **fields})
    return store.load()["matches"][-1]


def test_add_match_starts_upcoming(staff_client, store):
    match = _add_match(staff_client, store, status="completed")

    assert match["status"] == UPCOMING
    assert match["teamA"] == "Rovers"
    assert "details" not in match


def test_submitting_details_completes_match(staff_client, store):
    match = _add_match(staff_client, store)

    response = staff_client.post(
        "/admin/update-match-details",
        {
            "matchId": str(match["id"]),
            "narrative": "Late winner",
            "goalsA": "2",
            "goalsB": "1",
            "teamAPlayer": ["Al", "", "Cy"],
            "teamAType": ["goals", "goals", "saves"],
            "teamAMainValue": ["2", "0", "5"],
            "teamAAssists": ["1", "0", "0"],
        },
    )

    assert response.url == "/admin"
    stored = store.load()["matches"][0]
    assert stored["status"] == COMPLETED
    details = stored["details"]
    assert details["narrative"] == "Late winner"
    assert details["goalsA"] == "2"
    assert details["teamAPlayers"] == [
        {"name": "Al", "type": "goals", "value": "2", "assists": "1"},
        {"name": "Cy", "type": "saves", "value": "5", "assists": "0"},
    ]
    assert details["teamBPlayers"] == []


def test_single_submitted_row_becomes_one_line(staff_client, store):
    match = _add_match(staff_client, store)

    staff_client.post(
        "/admin/update-match-details",
        {
            "matchId": str(match["id"]),
            "teamBPlayer": "Bo",
            "teamBType": "saves",
            "teamBMainValue": "7",
            "teamBAssists": "0",
        },
    )

    details = store.load()["matches"][0]["details"]
    assert details["teamBPlayers"] == [{"name": "Bo", "type": "saves", "value": "7", "assists": "0"}]


def test_completed_match_never_reverts(staff_client, store):
    match = _add_match(staff_client, store)
    staff_client.post("/admin/update-match-details", {"matchId": str(match["id"]), "goalsA": "1"})

    staff_client.post("/admin/update-match-details", {"matchId": str(match["id"]), "goalsA": "3"})

    stored = store.load()["matches"][0]
    assert stored["status"] == COMPLETED
    assert stored["details"]["goalsA"] == "3"


def test_details_for_missing_match(staff_client, redirect_error):
    response = staff_client.post("/admin/update-match-details", {"matchId": "42"})
    assert redirect_error(response) == "Match not found"


def test_delete_match_from_either_state(staff_client, store):
    upcoming = _add_match(staff_client, store)
    completed = _add_match(staff_client, store, teamA="City")
    staff_client.post("/admin/update-match-details", {"matchId": str(completed["id"])})

    staff_client.post("/admin/delete-match", {"matchId": str(upcoming["id"])})
    staff_client.post("/admin/delete-match", {"matchId": str(completed["id"])})

    assert store.load()["matches"] == []


def test_match_detail_page(client, staff_client, store):
    match = _add_match(staff_client, store)

    assert client.get(f"/match/{match['id']}").status_code == 200
    missing = client.get("/match/1")
    assert missing.status_code == 302
    assert missing.url == "/matches"


def test_player_lines_pads_short_columns():
    lines = player_lines(["Al", "Bo"], ["goals"], [], ["1", "2", "3"])
    assert lines == [
        PlayerLine(name="Al", type="goals", value=None, assists="1"),
        PlayerLine(name="Bo", type=None, value=None, assists="2"),
    ]
