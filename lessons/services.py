"""Service layer for lessons: loading a lesson and the heart economy of answering it."""

# pylint: disable=no-member

import logging
import math
from typing import List, Optional

from django.db import transaction
from django.db.models import Prefetch

from core.constants import (HEARTS_ERROR_HEARTS, HEARTS_ERROR_PRACTICE,
                            HEARTS_ERROR_SUBSCRIPTION, MAX_HEARTS,
                            POINTS_PER_CHALLENGE)
from core.exceptions import NotFoundError, UnauthorizedError, log_and_raise_new
from core.models import (Challenge, ChallengeOption, ChallengeProgress, Lesson,
                         UserProgress)
from core.request_cache import invalidate_request_cache, request_cache
from learn.services import (get_course_progress, is_challenge_completed,
                            user_progress_prefetch)
from shop.services import get_user_subscription

logger = logging.getLogger(__name__)


def _require_user(user) -> None:
    if user is None or not user.is_authenticated:
        log_and_raise_new(UnauthorizedError, "Unauthorized")


@request_cache
def get_lesson(user, lesson_id: Optional[int] = None) -> Optional[Lesson]:
    """
    Loads a lesson for the lesson player.

    Without `lesson_id` the user's active lesson is loaded. Challenges are in
    `lesson.challenge_list`, ordered, each with `option_list` and a derived
    `completed` flag.

    Returns None for anonymous users, when no lesson can be resolved, or when
    the lesson does not exist.
    """
    if user is None or not user.is_authenticated:
        return None

    if not lesson_id:
        course_progress = get_course_progress(user)
        lesson_id = course_progress["active_lesson_id"] if course_progress else None
    if not lesson_id:
        return None

    challenges = Challenge.objects.order_by("order").prefetch_related(
        Prefetch("options", queryset=ChallengeOption.objects.order_by("id"), to_attr="option_list"),
        user_progress_prefetch(user),
    )
    lesson = (
        Lesson.objects.select_related("unit")
        .prefetch_related(Prefetch("challenges", queryset=challenges, to_attr="challenge_list"))
        .filter(pk=lesson_id)
        .first()
    )
    if lesson is None:
        logger.warning("Lesson %s requested by user %s does not exist.", lesson_id, user.pk)
        return None

    for challenge in lesson.challenge_list:
        challenge.completed = is_challenge_completed(challenge)
    return lesson


def get_completion_percentage(challenges: List[Challenge]) -> int:
    """Share of completed challenges, 0-100, rounded half up."""
    if not challenges:
        return 0
    completed = sum(1 for challenge in challenges if challenge.completed)
    return int(math.floor(completed * 100 / len(challenges) + 0.5))


@request_cache
def get_lesson_percentage(user) -> int:
    """Percentage of the active lesson already completed; 0 when there is none."""
    course_progress = get_course_progress(user)
    if not course_progress or not course_progress["active_lesson_id"]:
        return 0

    lesson = get_lesson(user, course_progress["active_lesson_id"])
    if not lesson:
        return 0
    return get_completion_percentage(lesson.challenge_list)


def reduce_hearts(user, challenge_id: int) -> Optional[str]:
    """
    Takes one heart for a wrong answer.

    Returns:
        None when a heart was taken, otherwise the reason none was:
        "practice" (the challenge was attempted before), "subscription"
        (unlimited hearts) or "hearts" (none left).

    Raises:
        UnauthorizedError: No signed-in user.
        NotFoundError: Unknown challenge, or the user has no game state.
    """
    _require_user(user)
    subscription = get_user_subscription(user)

    with transaction.atomic():
        challenge = Challenge.objects.filter(pk=challenge_id).first()
        if not challenge:
            log_and_raise_new(NotFoundError, "Challenge not found")

        if ChallengeProgress.objects.filter(user_id=user.pk, challenge=challenge).exists():
            return HEARTS_ERROR_PRACTICE

        progress = UserProgress.objects.select_for_update().filter(user_id=user.pk).first()
        if not progress:
            log_and_raise_new(NotFoundError, "User progress not found")

        if subscription and subscription.is_active:
            return HEARTS_ERROR_SUBSCRIPTION

        if progress.hearts == 0:
            return HEARTS_ERROR_HEARTS

        progress.hearts = max(progress.hearts - 1, 0)
        progress.save(update_fields=["hearts"])

    invalidate_request_cache()
    logger.info(
        "Reduced hearts for user %s to %s after challenge %s in lesson %s.",
        user.pk,
        progress.hearts,
        challenge.pk,
        challenge.lesson_id,
    )
    return None


def upsert_challenge_progress(user, challenge_id: int) -> Optional[str]:
    """
    Records a correct answer and awards points.

    A first correct answer creates a completed progress row. Answering a
    challenge that already has a row is practice: the row is marked completed
    and one heart is refunded, up to the maximum.

    Returns:
        None on success, or "hearts" when a first attempt is made with no
        hearts left and no active subscription.

    Raises:
        UnauthorizedError: No signed-in user.
        NotFoundError: The user has no game state, or the challenge is unknown.
    """
    _require_user(user)
    subscription = get_user_subscription(user)
    has_active_subscription = bool(subscription and subscription.is_active)

    with transaction.atomic():
        progress = UserProgress.objects.select_for_update().filter(user_id=user.pk).first()
        if not progress:
            log_and_raise_new(NotFoundError, "User progress not found")

        challenge = Challenge.objects.filter(pk=challenge_id).first()
        if not challenge:
            log_and_raise_new(NotFoundError, "Challenge not found")

        is_practice = ChallengeProgress.objects.filter(
            user_id=user.pk, challenge=challenge
        ).exists()

        if progress.hearts == 0 and not is_practice and not has_active_subscription:
            return HEARTS_ERROR_HEARTS

        if is_practice:
            ChallengeProgress.objects.filter(user_id=user.pk, challenge=challenge).update(
                completed=True
            )
            progress.hearts = min(progress.hearts + 1, MAX_HEARTS)
        else:
            ChallengeProgress.objects.create(
                user_id=user.pk, challenge=challenge, completed=True
            )
        progress.points += POINTS_PER_CHALLENGE
        progress.save(update_fields=["hearts", "points"])

    invalidate_request_cache()
    logger.info(
        "Recorded %s of challenge %s for user %s (hearts=%s, points=%s).",
        "practice" if is_practice else "completion",
        challenge.pk,
        user.pk,
        progress.hearts,
        progress.points,
    )
    return None
