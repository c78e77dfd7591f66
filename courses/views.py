"""Views for the courses app."""

# pylint: disable=no-member

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST

from core.exceptions import ApplicationError
from core.permissions import is_admin
from core.view_helpers import htmx_redirect

from .services import get_courses, get_user_progress, upsert_user_progress

logger = logging.getLogger(__name__)


@require_GET
@login_required
def course_list(request: HttpRequest) -> HttpResponse:
    """Lists the available courses, highlighting the user's active one."""
    user_progress = get_user_progress(request.user)
    context = {
        "courses": get_courses(),
        "active_course_id": user_progress.active_course_id if user_progress else None,
        "is_admin": is_admin(request.user),
    }
    return render(request, "courses/list.html", context)


@require_POST
@login_required
def select_course(request: HttpRequest, course_id: int) -> HttpResponse:
    """
    Makes a course the user's active course and sends them to the learn page.

    Selecting the course that is already active just navigates to learn.
    """
    user_progress = get_user_progress(request.user)
    if user_progress and user_progress.active_course_id == course_id:
        return htmx_redirect(request, reverse("learn:learn"))

    try:
        upsert_user_progress(request.user, course_id)
    except ApplicationError as e:
        logger.warning(
            "Could not select course %s for user %s: %s", course_id, request.user.pk, e
        )
        messages.error(request, f"Something went wrong: {e}")
        return htmx_redirect(request, reverse("courses:list"))

    return htmx_redirect(request, reverse("learn:learn"))
