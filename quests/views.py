"""Views for the quests app."""

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET

from core.view_helpers import build_sidebar_context
from courses.services import get_user_progress
from shop.services import get_user_subscription

from .services import get_quests


@require_GET
@login_required
def quests(request: HttpRequest) -> HttpResponse:
    """Shows progress towards each points milestone."""
    user_progress = get_user_progress(request.user)
    if not user_progress or not user_progress.active_course:
        return redirect("courses:list")

    context = {
        **build_sidebar_context(request, user_progress, get_user_subscription(request.user)),
        "quests": get_quests(user_progress),
    }
    return render(request, "quests/quests.html", context)
