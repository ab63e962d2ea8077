from apps.store.ids import same_id

PLAYER_KEY = "playerId"
ADMIN_KEY = "isAdmin"


def current_player_id(request):
    return request.session.get(PLAYER_KEY)


def is_admin(request) -> bool:
    return bool(request.session.get(ADMIN_KEY, False))


def bind_player(request, player_id) -> None:
    request.session.cycle_key()
    request.session[PLAYER_KEY] = player_id


def grant_admin(request) -> None:
    request.session.cycle_key()
    request.session[ADMIN_KEY] = True


def end_session(request) -> None:
    request.session.flush()


def current_player(request, document):
    player_id = current_player_id(request)
    if player_id is None:
        return None
    for player in document["players"]:
        if same_id(player.get("id"), player_id):
            return player
    return None
