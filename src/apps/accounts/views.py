import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.utils.crypto import constant_time_compare
from django.views.decorators.http import require_POST
from django_ratelimit.decorators import ratelimit

from apps.players.services import authenticate, delete_player, register_player, update_profile
from apps.store.document import get_store
from apps.store.exceptions import EntityNotFound

from .decorators import player_required
from .forms import AdminLoginForm, LoginForm
from .session import bind_player, current_player, current_player_id, end_session, grant_admin, is_admin
from .utils import form_fields, redirect_with_error

logger = logging.getLogger(__name__)


def _login_rate(*args, **kwargs):
    return settings.LEAGUE_LOGIN_RATE


def _rate_limited(request):
    return HttpResponse("Rate limit exceeded. Please wait and try again.", status=429)


@require_POST
def register(request):
    fields = form_fields(request, exclude=("name", "password"))
    try:
        with get_store().transaction() as document:
            player = register_player(
                document,
                request.POST.get("name", ""),
                request.POST.get("password", ""),
                extra=fields,
            )
    except ValidationError as exc:
        return redirect_with_error("/market", exc.messages[0])

    bind_player(request, player["id"])
    return redirect("/profile")


@ratelimit(key="ip", rate=_login_rate, method="POST", block=False)
@require_POST
def login(request):
    if getattr(request, "limited", False):
        return _rate_limited(request)
    form = LoginForm(request.POST)
    player = None
    if form.is_valid():
        player = authenticate(
            get_store().load(),
            form.cleaned_data["username"],
            form.cleaned_data["password"],
        )
    if player is None:
        return redirect_with_error("/market", "Invalid username or password")

    bind_player(request, player["id"])
    return redirect("/profile")


def logout(request):
    end_session(request)
    return redirect("/")


def profile(request):
    document = get_store().load()
    if current_player(request, document) is None:
        return redirect_with_error("/market", "Please login first")
    return render(
        request,
        "accounts/profile.html",
        {"page": "profile", "error": request.GET.get("error")},
    )


@require_POST
@player_required("/profile")
def profile_update(request):
    try:
        with get_store().transaction() as document:
            update_profile(document, current_player_id(request), form_fields(request))
    except EntityNotFound:
        return redirect_with_error("/market", "Please login first")
    return redirect("/profile")


@require_POST
@player_required("/profile")
def profile_delete(request):
    with get_store().transaction() as document:
        delete_player(document, current_player_id(request))
    end_session(request)
    return redirect("/market")


@ratelimit(key="ip", rate=_login_rate, method="POST", block=False)
def admin_login(request):
    if request.method != "POST":
        return render(request, "accounts/admin_login.html", {"error": None, "page": "admin"})
    if getattr(request, "limited", False):
        return _rate_limited(request)

    form = AdminLoginForm(request.POST)
    if form.is_valid() and constant_time_compare(
        form.cleaned_data["password"], settings.LEAGUE_ADMIN_KEY
    ):
        grant_admin(request)
        return redirect("/admin")

    logger.warning("Rejected admin login from %s", request.META.get("REMOTE_ADDR"))
    return render(request, "accounts/admin_login.html", {"error": "WRONG KEY!", "page": "admin"})


def admin_dashboard(request):
    if not is_admin(request):
        return redirect("/admin-login")
    return render(
        request,
        "accounts/admin.html",
        {"page": "admin", "error": request.GET.get("error")},
    )
