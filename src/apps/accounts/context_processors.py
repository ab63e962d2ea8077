from apps.store.document import get_store

from .session import current_player, is_admin


def league(request):
    document = get_store().load()
    return {
        **document,
        "is_admin": is_admin(request),
        "user": current_player(request, document),
        "page": "",
    }
