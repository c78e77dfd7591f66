"""
Read-side aggregation of a user's progress through their active course.

Completion is never stored per lesson; it is derived from the user's
ChallengeProgress rows every time it is needed:

* a challenge is completed when the user has at least one progress row for it
  and all of those rows are completed;
* a lesson is completed when it has challenges and all of them are completed;
* the active lesson is the first lesson, in unit then lesson order, with at
  least one challenge that is not completed.
"""

# pylint: disable=no-member

import logging
from typing import Any, Dict, List, Optional

from django.db.models import Prefetch

from core.models import Challenge, ChallengeProgress, Lesson, Unit
from core.request_cache import request_cache
from courses.services import get_user_progress

logger = logging.getLogger(__name__)


def user_progress_prefetch(user) -> Prefetch:
    """Attaches the user's own progress rows to each challenge as `user_progress`."""
    return Prefetch(
        "progress",
        queryset=ChallengeProgress.objects.filter(user_id=user.pk),
        to_attr="user_progress",
    )


def is_challenge_completed(challenge: Challenge) -> bool:
    """True if the prefetched progress rows exist and are all completed."""
    rows = getattr(challenge, "user_progress", None)
    return bool(rows) and all(row.completed for row in rows)


def is_lesson_completed(challenges: List[Challenge]) -> bool:
    """A lesson without challenges is never completed."""
    if not challenges:
        return False
    return all(is_challenge_completed(challenge) for challenge in challenges)


def has_pending_challenge(challenges: List[Challenge]) -> bool:
    return any(not is_challenge_completed(challenge) for challenge in challenges)


def _load_units(user, course_id: int) -> List[Unit]:
    """Units of a course with ordered lessons, challenges and the user's progress."""
    challenges = Challenge.objects.order_by("order").prefetch_related(
        user_progress_prefetch(user)
    )
    lessons = Lesson.objects.order_by("order").prefetch_related(
        Prefetch("challenges", queryset=challenges, to_attr="challenge_list")
    )
    return list(
        Unit.objects.filter(course_id=course_id)
        .order_by("order")
        .prefetch_related(Prefetch("lessons", queryset=lessons, to_attr="lesson_list"))
    )


@request_cache
def get_units(user) -> List[Unit]:
    """
    Returns the units of the user's active course, each lesson in
    `unit.lesson_list` carrying a derived `completed` flag.

    Returns an empty list for anonymous users and users without an active course.
    """
    if user is None or not user.is_authenticated:
        return []
    progress = get_user_progress(user)
    if not progress or not progress.active_course_id:
        return []

    units = _load_units(user, progress.active_course_id)
    for unit in units:
        for lesson in unit.lesson_list:
            lesson.completed = is_lesson_completed(lesson.challenge_list)
    return units


@request_cache
def get_course_progress(user) -> Optional[Dict[str, Any]]:
    """
    Finds the first lesson of the active course with unfinished challenges.

    Returns:
        {"active_lesson": Lesson | None, "active_lesson_id": int | None}, or
        None for anonymous users and users without an active course.
    """
    if user is None or not user.is_authenticated:
        return None
    progress = get_user_progress(user)
    if not progress or not progress.active_course_id:
        return None

    first_uncompleted_lesson = next(
        (
            lesson
            for unit in get_units(user)
            for lesson in unit.lesson_list
            if has_pending_challenge(lesson.challenge_list)
        ),
        None,
    )
    if first_uncompleted_lesson is None:
        logger.debug("User %s has completed every lesson of course %s.", user.pk, progress.active_course_id)

    return {
        "active_lesson": first_uncompleted_lesson,
        "active_lesson_id": first_uncompleted_lesson.pk if first_uncompleted_lesson else None,
    }


def build_learning_path(units: List[Unit], active_lesson_id: Optional[int]) -> List[Unit]:
    """
    Marks each lesson for the learning path: `is_current` for the active lesson
    and `is_locked` for lessons that are neither completed nor current.
    """
    for unit in units:
        for lesson in unit.lesson_list:
            lesson.is_current = lesson.pk == active_lesson_id
            lesson.is_locked = not getattr(lesson, "completed", False) and not lesson.is_current
    return units
