# shop/test_views.py
"""Tests for the shop page and heart refill."""
# pylint: disable=redefined-outer-name, unused-argument, no-member

from datetime import timedelta

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse
from django.utils import timezone

from core.constants import MAX_HEARTS
from core.models import UserProgress, UserSubscription

pytestmark = [pytest.mark.django_db]


def _messages(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


def test_shop_without_active_course_redirects(logged_in_client):
    response = logged_in_client.get(reverse("shop:shop"))
    assert response.status_code == 302
    assert response.url == reverse("courses:list")


def test_shop_offers_refill(logged_in_client, learner_progress):
    UserProgress.objects.filter(pk=learner_progress.pk).update(hearts=3, points=20)

    response = logged_in_client.get(reverse("shop:shop"))

    assert response.status_code == 200
    assert response.context["can_refill"] is True
    assert response.context["points_to_refill"] == 10
    assert response.context["is_pro"] is False


def test_shop_with_full_hearts_cannot_refill(logged_in_client, learner_progress):
    UserProgress.objects.filter(pk=learner_progress.pk).update(points=50)

    response = logged_in_client.get(reverse("shop:shop"))

    assert response.context["can_refill"] is False
    assert "Full" in response.content.decode()


def test_shop_for_subscriber_hides_promo(logged_in_client, learner, learner_progress):
    UserSubscription.objects.create(
        user=learner,
        stripe_customer_id="cus_test",
        stripe_subscription_id="sub_test",
        stripe_price_id="price_pro",
        stripe_current_period_end=timezone.now() + timedelta(days=30),
    )

    response = logged_in_client.get(reverse("shop:shop"))

    assert response.context["is_pro"] is True
    assert response.context["show_promo"] is False


def test_refill_success(logged_in_client, learner_progress):
    UserProgress.objects.filter(pk=learner_progress.pk).update(hearts=0, points=10)

    response = logged_in_client.post(reverse("shop:refill"))

    assert response.status_code == 302
    assert response.url == reverse("shop:shop")
    assert _messages(response) == ["Hearts refilled!"]
    learner_progress.refresh_from_db()
    assert learner_progress.hearts == MAX_HEARTS
    assert learner_progress.points == 0


def test_refill_refused_reports_reason(logged_in_client, learner_progress):
    UserProgress.objects.filter(pk=learner_progress.pk).update(hearts=2, points=5)

    response = logged_in_client.post(reverse("shop:refill"), HTTP_HX_REQUEST="true")

    assert response.status_code == 200
    assert response["HX-Redirect"] == reverse("shop:shop")
    assert _messages(response) == ["Not enough points"]


def test_refill_requires_post(logged_in_client, learner_progress):
    assert logged_in_client.get(reverse("shop:refill")).status_code == 405
