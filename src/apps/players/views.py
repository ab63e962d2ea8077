from django.contrib import messages
from django.http import HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from apps.accounts.decorators import admin_required
from apps.accounts.session import current_player_id
from apps.accounts.utils import redirect_with_error
from apps.store.document import get_store
from apps.store.exceptions import EntityNotFound

from .services import (
    approve_player,
    delete_player,
    market_players,
    record_view,
    update_market_player,
)


def market(request):
    document = get_store().load()
    return render(
        request,
        "players/market.html",
        {
            "page": "market",
            "players": market_players(document),
            "error": request.GET.get("error"),
        },
    )


@require_POST
def market_view(request, player_name: str):
    viewer_id = current_player_id(request)
    if viewer_id is None:
        return JsonResponse({"success": False})
    try:
        with get_store().transaction() as document:
            count = record_view(document, player_name, viewer_id)
    except EntityNotFound:
        return JsonResponse({"success": False})

    if request.htmx:
        return HttpResponse(str(count), content_type="text/plain")
    return JsonResponse({"success": True, "count": count})


@require_POST
@admin_required
def approve_player_view(request):
    try:
        with get_store().transaction() as document:
            player = approve_player(
                document, request.POST.get("playerId"), request.POST.get("cardImage", "")
            )
    except EntityNotFound as exc:
        return redirect_with_error("/admin", exc.message)
    messages.success(request, f"{player['name']} is now on the market.")
    return redirect("/admin")


@require_POST
@admin_required
def update_market_player_view(request):
    try:
        with get_store().transaction() as document:
            update_market_player(document, request.POST.get("username", ""), request.POST)
    except EntityNotFound as exc:
        return redirect_with_error("/admin", exc.message)
    return redirect("/admin")


@require_POST
@admin_required
def delete_player_view(request):
    with get_store().transaction() as document:
        delete_player(document, request.POST.get("playerId"))
    return redirect("/admin")
