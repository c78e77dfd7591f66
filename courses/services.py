"""Service layer for courses and the user's course selection."""

# pylint: disable=no-member

import logging
from typing import List, Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Prefetch

from core.exceptions import (CourseEmptyError, NotFoundError,
                             UnauthorizedError, log_and_raise_new)
from core.models import Course, Lesson, Unit, UserProgress
from core.request_cache import invalidate_request_cache, request_cache

logger = logging.getLogger(__name__)


def _is_signed_in(user) -> bool:
    return user is not None and user.is_authenticated


@request_cache
def get_user_progress(user) -> Optional[UserProgress]:
    """Returns the user's game state with the active course loaded, or None."""
    if not _is_signed_in(user):
        return None
    return (
        UserProgress.objects.select_related("active_course")
        .filter(user_id=user.pk)
        .first()
    )


@request_cache
def get_courses() -> List[Course]:
    """Returns every course."""
    return list(Course.objects.order_by("id"))


@request_cache
def get_course_by_id(course_id: int) -> Optional[Course]:
    """
    Returns the course with its units and their lessons prefetched in order,
    or None if there is no such course.
    """
    return (
        Course.objects.prefetch_related(
            Prefetch(
                "units",
                queryset=Unit.objects.order_by("order").prefetch_related(
                    Prefetch("lessons", queryset=Lesson.objects.order_by("order"))
                ),
            )
        )
        .filter(pk=course_id)
        .first()
    )


def _display_name(user) -> str:
    return user.first_name or "User"


def _display_image(user) -> str:
    return getattr(settings, "LINGO_DEFAULT_USER_IMAGE", "/mascot.svg")


def upsert_user_progress(user, course_id: int) -> UserProgress:
    """
    Makes `course_id` the user's active course, creating their game state on
    first use.

    Raises:
        UnauthorizedError: No signed-in user.
        NotFoundError: The course does not exist.
        CourseEmptyError: The course has no units, or its first unit has no lessons.
    """
    if not _is_signed_in(user):
        log_and_raise_new(UnauthorizedError, "Unauthorized")

    course = get_course_by_id(course_id)
    if not course:
        log_and_raise_new(NotFoundError, "Course not found")

    units = list(course.units.all())
    if not units or not list(units[0].lessons.all()):
        log_and_raise_new(CourseEmptyError, "Course is empty")

    with transaction.atomic():
        progress, created = UserProgress.objects.select_for_update().update_or_create(
            user_id=user.pk,
            defaults={
                "active_course": course,
                "user_name": _display_name(user),
                "user_image_src": _display_image(user),
            },
        )

    invalidate_request_cache()
    logger.info(
        "%s UserProgress for user %s with active course %s.",
        "Created" if created else "Updated",
        user.pk,
        course.pk,
    )
    return progress
