from django.shortcuts import redirect
from django.views.decorators.http import require_POST

from apps.accounts.decorators import admin_required
from apps.store.document import get_store

from .services import delete_stat, update_stat


@require_POST
@admin_required
def update_stat_view(request):
    with get_store().transaction() as document:
        update_stat(
            document,
            request.POST.get("type", ""),
            request.POST.get("statIndex"),
            request.POST.get("playerName", ""),
            request.POST.get("value"),
        )
    return redirect("/admin")


@require_POST
@admin_required
def delete_stat_view(request):
    with get_store().transaction() as document:
        delete_stat(document, request.POST.get("type", ""), request.POST.get("statIndex"))
    return redirect("/admin")
