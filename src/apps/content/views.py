from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from apps.accounts.decorators import admin_required
from apps.accounts.utils import form_fields
from apps.store.document import get_store

from .services import add_record, add_story, delete_record, delete_story, set_live_link


def home(request):
    document = get_store().load()
    return render(request, "content/index.html", {"page": "home", "stories": document["stories"]})


def league_records(request):
    return render(request, "content/league_records.html", {"page": "records"})


@require_POST
@admin_required
def add_story_view(request):
    with get_store().transaction() as document:
        add_story(document, form_fields(request, exclude=("id", "date")))
    return redirect("/admin")


@require_POST
@admin_required
def delete_story_view(request):
    with get_store().transaction() as document:
        delete_story(document, request.POST.get("storyIndex"))
    return redirect("/admin")


@require_POST
@admin_required
def add_record_view(request):
    with get_store().transaction() as document:
        add_record(document, form_fields(request, exclude=("id",)))
    return redirect("/admin")


@require_POST
@admin_required
def delete_record_view(request):
    with get_store().transaction() as document:
        delete_record(document, request.POST.get("recordId"))
    return redirect("/admin")


@require_POST
@admin_required
def live_link_view(request):
    with get_store().transaction() as document:
        set_live_link(document, request.POST.get("link", ""))
    return redirect("/admin")
