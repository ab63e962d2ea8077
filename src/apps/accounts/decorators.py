from functools import wraps

from django.http import HttpResponseForbidden
from django.shortcuts import redirect

from .session import current_player_id, is_admin


def admin_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not is_admin(request):
            return HttpResponseForbidden("Unauthorized")
        return view_func(request, *args, **kwargs)

    return _wrapped


def player_required(redirect_to):
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            if current_player_id(request) is None:
                return redirect(redirect_to)
            return view_func(request, *args, **kwargs)

        return _wrapped

    return decorator
