from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from apps.accounts.decorators import admin_required
from apps.accounts.utils import redirect_with_error
from apps.store.document import get_store
from apps.store.exceptions import EntityNotFound

from .services import (
    add_group,
    add_to_roster,
    delete_group,
    delete_team,
    remove_from_roster,
    team_at,
    upsert_team,
)


def metrics(request):
    return render(request, "standings/metrics.html", {"page": "metrics"})


def team_detail(request, group_id: str, team_index: str):
    document = get_store().load()
    try:
        group, team = team_at(document, group_id, team_index)
    except EntityNotFound:
        return redirect("/metrics")
    return render(
        request,
        "standings/team_detail.html",
        {"team": team, "group": group, "page": "metrics"},
    )


@require_POST
@admin_required
def add_group_view(request):
    with get_store().transaction() as document:
        add_group(document, request.POST.get("name", ""))
    return redirect("/admin")


@require_POST
@admin_required
def delete_group_view(request):
    with get_store().transaction() as document:
        delete_group(document, request.POST.get("groupId"))
    return redirect("/admin")


@require_POST
@admin_required
def update_team_view(request):
    try:
        with get_store().transaction() as document:
            upsert_team(
                document,
                request.POST.get("groupId"),
                request.POST.get("teamIndex"),
                request.POST,
            )
    except EntityNotFound as exc:
        return redirect_with_error("/admin", exc.message)
    return redirect("/admin")


@require_POST
@admin_required
def delete_team_view(request):
    try:
        with get_store().transaction() as document:
            delete_team(document, request.POST.get("groupId"), request.POST.get("teamIndex"))
    except EntityNotFound as exc:
        return redirect_with_error("/admin", exc.message)
    return redirect("/admin")


@require_POST
@admin_required
def add_to_roster_view(request):
    try:
        with get_store().transaction() as document:
            add_to_roster(
                document,
                request.POST.get("groupId"),
                request.POST.get("teamIndex"),
                request.POST.get("playerName", ""),
                request.POST.get("isManager") == "true",
            )
    except EntityNotFound as exc:
        return redirect_with_error("/admin", exc.message)
    return redirect("/admin")


@require_POST
@admin_required
def delete_from_roster_view(request):
    try:
        with get_store().transaction() as document:
            remove_from_roster(
                document,
                request.POST.get("groupId"),
                request.POST.get("teamIndex"),
                request.POST.get("playerIndex"),
            )
    except EntityNotFound as exc:
        return redirect_with_error("/admin", exc.message)
    return redirect("/admin")
