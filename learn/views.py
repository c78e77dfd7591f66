"""Views for the learn app: the learning path of the active course."""

import logging

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET

from core.view_helpers import build_sidebar_context
from courses.services import get_user_progress
from lessons.services import get_lesson_percentage
from shop.services import get_user_subscription

from .services import build_learning_path, get_course_progress, get_units

logger = logging.getLogger(__name__)


@require_GET
@login_required
def learn(request: HttpRequest) -> HttpResponse:
    """
    Shows the units of the active course with each lesson's state and the
    progress of the active lesson. Users without an active course are sent to
    pick one.
    """
    user = request.user
    user_progress = get_user_progress(user)
    if not user_progress or not user_progress.active_course:
        return redirect("courses:list")

    course_progress = get_course_progress(user)
    if not course_progress:
        return redirect("courses:list")

    units = build_learning_path(get_units(user), course_progress["active_lesson_id"])

    context = {
        **build_sidebar_context(request, user_progress, get_user_subscription(user)),
        "units": units,
        "active_lesson": course_progress["active_lesson"],
        "active_lesson_id": course_progress["active_lesson_id"],
        "active_lesson_percentage": get_lesson_percentage(user),
    }
    return render(request, "learn/learn.html", context)
