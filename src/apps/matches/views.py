from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from apps.accounts.decorators import admin_required
from apps.accounts.utils import form_fields, redirect_with_error
from apps.store.document import get_store
from apps.store.exceptions import EntityNotFound
from apps.store.ids import find_by_id

from .services import add_match, delete_match, player_lines, submit_match_details


def _lines(post, side):
    return player_lines(
        post.getlist(f"team{side}Player"),
        post.getlist(f"team{side}Type"),
        post.getlist(f"team{side}MainValue"),
        post.getlist(f"team{side}Assists"),
    )


def match_list(request):
    return render(request, "matches/matches.html", {"page": "matches"})


def match_detail(request, match_id: str):
    document = get_store().load()
    try:
        match = find_by_id(document["matches"], match_id, "Match")
    except EntityNotFound:
        return redirect("/matches")
    return render(request, "matches/match_detail.html", {"match": match, "page": "matches"})


@require_POST
@admin_required
def add_match_view(request):
    with get_store().transaction() as document:
        add_match(document, form_fields(request, exclude=("id", "status", "details")))
    return redirect("/admin")


@require_POST
@admin_required
def delete_match_view(request):
    with get_store().transaction() as document:
        delete_match(document, request.POST.get("matchId"))
    return redirect("/admin")


@require_POST
@admin_required
def update_match_details_view(request):
    try:
        with get_store().transaction() as document:
            submit_match_details(
                document,
                request.POST.get("matchId"),
                request.POST,
                team_a=_lines(request.POST, "A"),
                team_b=_lines(request.POST, "B"),
            )
    except EntityNotFound as exc:
        return redirect_with_error("/admin", exc.message)
    return redirect("/admin")
