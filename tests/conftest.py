from urllib.parse import parse_qs, urlsplit

import pytest

from apps.players.services import approve_player, register_player
from apps.store.document import get_store


@pytest.fixture(autouse=True)
def league_file(tmp_path, settings):
    path = tmp_path / "data.json"
    settings.LEAGUE_DATA_FILE = path
    return path


@pytest.fixture
def store(league_file):
    return get_store()


@pytest.fixture
def player_factory(store):
    def _create(name, password="password123", verified=False, card_image=""):
        with store.transaction() as document:
            player = register_player(document, name, password)
            if verified:
                approve_player(document, player["id"], card_image)
        return player

    return _create


@pytest.fixture
def staff_client(client, settings):
    response = client.post("/admin-login", {"password": settings.LEAGUE_ADMIN_KEY})
    assert response.status_code == 302
    return client


@pytest.fixture
def login_as():
    def _login(client, name, password="password123"):
        response = client.post("/login", {"username": name, "password": password})
        assert response.url == "/profile"
        return client

    return _login


def error_of(response):
    return parse_qs(urlsplit(response.url).query).get("error", [None])[0]


@pytest.fixture
def redirect_error():
    return error_of
