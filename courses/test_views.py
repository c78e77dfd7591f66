# courses/test_views.py
"""Tests for the course list and course selection views."""
# pylint: disable=redefined-outer-name, unused-argument, no-member

import pytest
from django.conf import settings
from django.contrib.messages import get_messages
from django.urls import reverse

from core.models import Course, UserProgress
from core.testing import build_course

pytestmark = [pytest.mark.django_db]


def test_course_list_unauthenticated_redirects_to_login(client):
    response = client.get(reverse("courses:list"))
    assert response.status_code == 302
    assert settings.LOGIN_URL in response.url


def test_course_list_shows_courses(logged_in_client, learner_progress, course_tree):
    course, _, _ = course_tree
    build_course(title="French")

    response = logged_in_client.get(reverse("courses:list"))

    assert response.status_code == 200
    assert [c.title for c in response.context["courses"]] == ["Spanish", "French"]
    assert response.context["active_course_id"] == course.pk
    assert response.context["is_admin"] is False


def test_course_list_empty_state(logged_in_client):
    response = logged_in_client.get(reverse("courses:list"))
    assert response.status_code == 200
    assert "There are no available courses here for now." in response.content.decode()


def test_select_course_creates_progress_and_redirects(logged_in_client, learner, course_tree):
    course, _, _ = course_tree

    response = logged_in_client.post(reverse("courses:select", args=[course.pk]))

    assert response.status_code == 302
    assert response.url == reverse("learn:learn")
    assert UserProgress.objects.get(user=learner).active_course == course


def test_select_course_with_htmx_uses_hx_redirect(logged_in_client, learner, course_tree):
    course, _, _ = course_tree

    response = logged_in_client.post(
        reverse("courses:select", args=[course.pk]), HTTP_HX_REQUEST="true"
    )

    assert response.status_code == 200
    assert response["HX-Redirect"] == reverse("learn:learn")


def test_select_active_course_just_navigates(logged_in_client, learner_progress, course_tree):
    course, _, _ = course_tree

    response = logged_in_client.post(reverse("courses:select", args=[course.pk]))

    assert response.status_code == 302
    assert response.url == reverse("learn:learn")


def test_select_empty_course_reports_error(logged_in_client, learner):
    course = Course.objects.create(title="Italian", image_src="/it.svg")

    response = logged_in_client.post(reverse("courses:select", args=[course.pk]))

    assert response.status_code == 302
    assert response.url == reverse("courses:list")
    messages = [str(m) for m in get_messages(response.wsgi_request)]
    assert messages == ["Something went wrong: Course is empty"]
    assert not UserProgress.objects.filter(user=learner).exists()


def test_select_course_requires_post(logged_in_client, course_tree):
    course, _, _ = course_tree
    response = logged_in_client.get(reverse("courses:select", args=[course.pk]))
    assert response.status_code == 405
