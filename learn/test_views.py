# learn/test_views.py
"""Tests for the learn page."""
# pylint: disable=redefined-outer-name, unused-argument, no-member

import pytest
from django.conf import settings
from django.urls import reverse

from core.models import ChallengeProgress, UserProgress
from core.testing import ordered_challenges

pytestmark = [pytest.mark.django_db]


def test_learn_unauthenticated_redirects_to_login(client):
    response = client.get(reverse("learn:learn"))
    assert response.status_code == 302
    assert settings.LOGIN_URL in response.url


def test_learn_without_progress_redirects_to_courses(logged_in_client, course_tree):
    response = logged_in_client.get(reverse("learn:learn"))
    assert response.status_code == 302
    assert response.url == reverse("courses:list")


def test_learn_without_active_course_redirects_to_courses(logged_in_client, learner):
    UserProgress.objects.create(user=learner)
    response = logged_in_client.get(reverse("learn:learn"))
    assert response.status_code == 302
    assert response.url == reverse("courses:list")


def test_learn_shows_learning_path(logged_in_client, learner, learner_progress, course_tree):
    _, _, lessons = course_tree
    for challenge in ordered_challenges(lessons[0]):
        ChallengeProgress.objects.create(user=learner, challenge=challenge, completed=True)
    ChallengeProgress.objects.create(
        user=learner, challenge=ordered_challenges(lessons[1])[0], completed=True
    )

    response = logged_in_client.get(reverse("learn:learn"))

    assert response.status_code == 200
    assert response.context["active_lesson_id"] == lessons[1].pk
    assert response.context["active_lesson_percentage"] == 50
    assert [u.title for u in response.context["units"]] == ["Unit 1", "Unit 2"]
    assert response.context["hearts"] == learner_progress.hearts
    assert response.context["show_promo"] is True
    assert "Unit 1 Lesson 2" in response.content.decode()


def test_learn_page_query_budget(
    logged_in_client, learner_progress, course_tree, django_assert_max_num_queries
):
    # Session, user, progress, subscription, units with prefetches and the active lesson.
    with django_assert_max_num_queries(15):
        response = logged_in_client.get(reverse("learn:learn"))
    assert response.status_code == 200
