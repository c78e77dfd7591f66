# shop/test_services.py
"""Tests for the shop services."""
# pylint: disable=redefined-outer-name, unused-argument, no-member

from datetime import timedelta

import pytest
from django.contrib.auth.models import AnonymousUser
from django.utils import timezone

from core.constants import MAX_HEARTS, POINTS_TO_REFILL
from core.exceptions import HeartsFullError, InsufficientPointsError, NotFoundError
from core.models import UserProgress, UserSubscription

from . import services

pytestmark = [pytest.mark.django_db]


def _set(progress, **fields):
    UserProgress.objects.filter(pk=progress.pk).update(**fields)


def test_get_user_subscription(learner):
    subscription = UserSubscription.objects.create(
        user=learner,
        stripe_customer_id="cus_test",
        stripe_subscription_id="sub_test",
        stripe_price_id="price_pro",
        stripe_current_period_end=timezone.now() + timedelta(days=5),
    )

    assert services.get_user_subscription(learner) == subscription
    assert services.get_user_subscription(learner).is_active


def test_get_user_subscription_missing(learner):
    assert services.get_user_subscription(learner) is None
    assert services.get_user_subscription(AnonymousUser()) is None


def test_refill_hearts(learner, learner_progress):
    _set(learner_progress, hearts=1, points=25)

    progress = services.refill_hearts(learner)

    assert progress.hearts == MAX_HEARTS
    assert progress.points == 25 - POINTS_TO_REFILL
    learner_progress.refresh_from_db()
    assert learner_progress.hearts == MAX_HEARTS
    assert learner_progress.points == 15


def test_refill_hearts_with_exact_points(learner, learner_progress):
    _set(learner_progress, hearts=0, points=POINTS_TO_REFILL)

    progress = services.refill_hearts(learner)

    assert progress.points == 0
    assert progress.hearts == MAX_HEARTS


def test_refill_hearts_when_full_raises(learner, learner_progress):
    _set(learner_progress, points=100)

    with pytest.raises(HeartsFullError, match="Hearts are already full"):
        services.refill_hearts(learner)

    learner_progress.refresh_from_db()
    assert learner_progress.points == 100


def test_refill_hearts_without_points_raises(learner, learner_progress):
    _set(learner_progress, hearts=2, points=POINTS_TO_REFILL - 1)

    with pytest.raises(InsufficientPointsError, match="Not enough points"):
        services.refill_hearts(learner)

    learner_progress.refresh_from_db()
    assert learner_progress.hearts == 2


def test_refill_hearts_without_progress_raises(learner):
    with pytest.raises(NotFoundError, match="User progress not found"):
        services.refill_hearts(learner)


def test_refill_hearts_anonymous_raises():
    with pytest.raises(NotFoundError):
        services.refill_hearts(AnonymousUser())
