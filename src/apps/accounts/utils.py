from urllib.parse import urlencode

from django.shortcuts import redirect

IGNORED_FIELDS = frozenset({"csrfmiddlewaretoken"})


def redirect_with_error(path: str, message: str):
    return redirect(f"{path}?{urlencode({'error': message})}")


def form_fields(request, *, exclude=()) -> dict:
    """Single-valued view of the submitted form, minus framework fields."""
    skip = IGNORED_FIELDS | set(exclude)
    return {key: value for key, value in request.POST.items() if key not in skip}


def client_ip(request) -> str:
    """First address in X-Forwarded-For when behind the proxy, else the socket peer."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    first = forwarded.split(",")[0].strip()
    return first or request.META.get("REMOTE_ADDR", "")
