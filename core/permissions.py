"""Access checks shared by the apps."""

import functools
import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def is_admin(user) -> bool:
    """
    Returns True if the user may manage course content.

    Superusers always may; other users must be listed by username in the
    LINGO_ADMIN_USERNAMES setting.
    """
    if user is None or not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    return user.get_username() in getattr(settings, "LINGO_ADMIN_USERNAMES", [])


def admin_required(view_func):
    """Rejects non-admin callers of a JSON endpoint with 401 Unauthorized."""

    @functools.wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not is_admin(request.user):
            logger.warning(
                "Rejected admin API call to %s by %s", request.path, request.user
            )
            return JsonResponse(
                {"status": "error", "message": "Unauthorized"}, status=401
            )
        return view_func(request, *args, **kwargs)

    return wrapper
