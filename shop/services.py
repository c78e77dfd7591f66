"""Service layer for the shop: subscription state and heart refills."""

# pylint: disable=no-member

import logging
from typing import Optional

from django.db import transaction

from core.constants import MAX_HEARTS, POINTS_TO_REFILL
from core.exceptions import (HeartsFullError, InsufficientPointsError,
                             NotFoundError, log_and_raise_new)
from core.models import UserProgress, UserSubscription
from core.request_cache import invalidate_request_cache, request_cache

logger = logging.getLogger(__name__)


@request_cache
def get_user_subscription(user) -> Optional[UserSubscription]:
    """
    Returns the user's subscription, or None for anonymous users and users
    who never subscribed. Use `subscription.is_active` to check it is current.
    """
    if user is None or not user.is_authenticated:
        return None
    return UserSubscription.objects.filter(user_id=user.pk).first()


def refill_hearts(user) -> UserProgress:
    """
    Buys a full set of hearts for POINTS_TO_REFILL points.

    Raises:
        NotFoundError: The user has no game state.
        HeartsFullError: Hearts are already at the maximum.
        InsufficientPointsError: The user cannot afford the refill.
    """
    user_id = user.pk if user is not None and user.is_authenticated else None

    with transaction.atomic():
        progress = UserProgress.objects.select_for_update().filter(user_id=user_id).first()
        if not progress:
            log_and_raise_new(NotFoundError, "User progress not found")

        if progress.hearts == MAX_HEARTS:
            log_and_raise_new(HeartsFullError, "Hearts are already full")

        if progress.points < POINTS_TO_REFILL:
            log_and_raise_new(InsufficientPointsError, "Not enough points")

        progress.hearts = MAX_HEARTS
        progress.points -= POINTS_TO_REFILL
        progress.save(update_fields=["hearts", "points"])

    invalidate_request_cache()
    logger.info("Refilled hearts for user %s; %s points left.", user_id, progress.points)
    return progress
