"""Views for the lessons app."""

# pylint: disable=no-member

import logging
from typing import Optional

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from core.constants import MAX_HEARTS
from core.exceptions import ApplicationError
from courses.services import get_user_progress
from shop.services import get_user_subscription

from .services import (get_completion_percentage, get_lesson, reduce_hearts,
                       upsert_challenge_progress)

logger = logging.getLogger(__name__)


@require_GET
@login_required
def lesson_detail(request: HttpRequest, lesson_id: Optional[int] = None) -> HttpResponse:
    """
    Display a lesson for answering.

    Without `lesson_id` the active lesson is shown; with it, any lesson can be
    revisited. A lesson that is already fully completed is played as practice.
    """
    user = request.user
    lesson = get_lesson(user, lesson_id)
    user_progress = get_user_progress(user)
    if not lesson or not user_progress:
        return redirect("learn:learn")

    subscription = get_user_subscription(user)
    initial_percentage = get_completion_percentage(lesson.challenge_list)
    is_pro = bool(subscription and subscription.is_active)
    is_practice = initial_percentage == 100

    context = {
        "lesson": lesson,
        "challenges": lesson.challenge_list,
        "initial_percentage": initial_percentage,
        "initial_hearts": user_progress.hearts,
        "max_hearts": MAX_HEARTS,
        "is_practice": is_practice,
        "user_subscription": subscription,
        "is_pro": is_pro,
        # Practice lessons are playable with no hearts.
        "out_of_hearts": user_progress.hearts == 0 and not is_pro and not is_practice,
    }
    return render(request, "lessons/lesson.html", context)


def _unauthenticated_response() -> JsonResponse:
    return JsonResponse(
        {"status": "error", "message": "Authentication required"}, status=401
    )


def _progress_response(request: HttpRequest, error: Optional[str]) -> JsonResponse:
    """Reports the refusal tag, or the fresh hearts/points after a write."""
    if error:
        return JsonResponse({"status": "ok", "error": error})
    user_progress = get_user_progress(request.user)
    return JsonResponse(
        {
            "status": "ok",
            "error": None,
            "hearts": user_progress.hearts if user_progress else None,
            "points": user_progress.points if user_progress else None,
        }
    )


@require_POST
def complete_challenge(request: HttpRequest, challenge_id: int) -> JsonResponse:
    """Records a correct answer to a challenge."""
    if not request.user.is_authenticated:
        return _unauthenticated_response()
    try:
        error = upsert_challenge_progress(request.user, challenge_id)
    except ApplicationError as e:
        return JsonResponse({"status": "error", "message": str(e)}, status=e.status_code)
    except Exception as e:
        logger.error("Error in complete_challenge: %s", e, exc_info=True)
        return JsonResponse({"status": "error", "message": "Something went wrong"}, status=500)
    return _progress_response(request, error)


@require_POST
def reduce_hearts_view(request: HttpRequest, challenge_id: int) -> JsonResponse:
    """Takes a heart for a wrong answer to a challenge."""
    if not request.user.is_authenticated:
        return _unauthenticated_response()
    try:
        error = reduce_hearts(request.user, challenge_id)
    except ApplicationError as e:
        return JsonResponse({"status": "error", "message": str(e)}, status=e.status_code)
    except Exception as e:
        logger.error("Error in reduce_hearts_view: %s", e, exc_info=True)
        return JsonResponse({"status": "error", "message": "Something went wrong"}, status=500)
    return _progress_response(request, error)
