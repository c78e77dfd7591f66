"""Helpers shared by the page views of the lingo apps."""

import logging
from typing import Any, Dict, Optional

from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect

from core.constants import MAX_HEARTS
from core.models import UserProgress, UserSubscription
from core.permissions import is_admin

logger = logging.getLogger(__name__)


def htmx_redirect(request: HttpRequest, url: str) -> HttpResponse:
    """Redirects, telling HTMX to navigate the whole page when it made the request."""
    if hasattr(request, "htmx") and request.htmx:
        response = HttpResponse()
        response["HX-Redirect"] = url
        return response
    return redirect(url)


def build_sidebar_context(
    request: HttpRequest,
    user_progress: UserProgress,
    subscription: Optional[UserSubscription],
) -> Dict[str, Any]:
    """Context for the stats bar and promo shown beside every game page."""
    is_pro = bool(subscription and subscription.is_active)
    return {
        "user_progress": user_progress,
        "active_course": user_progress.active_course,
        "hearts": user_progress.hearts,
        "points": user_progress.points,
        "max_hearts": MAX_HEARTS,
        "user_subscription": subscription,
        "is_pro": is_pro,
        "show_promo": not is_pro,
        "is_admin": is_admin(request.user),
    }
