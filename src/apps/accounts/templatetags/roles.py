from django import template

from apps.store.ids import same_id

register = template.Library()


@register.filter
def view_count(player):
    return len(player.get("views") or [])


@register.filter
def is_player(player, user):
    return bool(user) and same_id(player.get("id"), user.get("id"))
