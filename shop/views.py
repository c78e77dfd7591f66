"""Views for the shop app."""

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST

from core.constants import MAX_HEARTS, POINTS_TO_REFILL
from core.exceptions import ApplicationError
from core.view_helpers import build_sidebar_context, htmx_redirect
from courses.services import get_user_progress

from .services import get_user_subscription, refill_hearts

logger = logging.getLogger(__name__)


@require_GET
@login_required
def shop(request: HttpRequest) -> HttpResponse:
    """Shows the heart refill offer and the Pro subscription state."""
    user_progress = get_user_progress(request.user)
    if not user_progress or not user_progress.active_course:
        return redirect("courses:list")

    context = {
        **build_sidebar_context(request, user_progress, get_user_subscription(request.user)),
        "points_to_refill": POINTS_TO_REFILL,
        "can_refill": user_progress.hearts < MAX_HEARTS and user_progress.points >= POINTS_TO_REFILL,
    }
    return render(request, "shop/shop.html", context)


@require_POST
@login_required
def refill(request: HttpRequest) -> HttpResponse:
    """Spends points on a full set of hearts."""
    try:
        refill_hearts(request.user)
        messages.success(request, "Hearts refilled!")
    except ApplicationError as e:
        logger.info("Refill refused for user %s: %s", request.user.pk, e)
        messages.error(request, str(e))
    return htmx_redirect(request, reverse("shop:shop"))
