# adminapi/test_views.py
"""Tests for the admin content API."""
# pylint: disable=redefined-outer-name, unused-argument, no-member

import json

import pytest
from django.test import override_settings
from django.urls import reverse

from core.models import Challenge, Course, Unit

pytestmark = [pytest.mark.django_db]


def _send(client, method, url, data):
    return getattr(client, method)(url, data=json.dumps(data), content_type="application/json")


def test_anonymous_is_unauthorized(client):
    response = client.get(reverse("adminapi:list", args=["courses"]))
    assert response.status_code == 401
    assert response.json() == {"status": "error", "message": "Unauthorized"}


def test_regular_user_is_unauthorized(logged_in_client):
    response = logged_in_client.post(
        reverse("adminapi:list", args=["courses"]),
        data=json.dumps({"title": "French", "image_src": "/fr.svg"}),
        content_type="application/json",
    )
    assert response.status_code == 401
    assert not Course.objects.filter(title="French").exists()


@override_settings(LINGO_ADMIN_USERNAMES=["learner"])
def test_listed_user_is_admin(logged_in_client, course_tree):
    response = logged_in_client.get(reverse("adminapi:list", args=["courses"]))
    assert response.status_code == 200


def test_list_courses(admin_client, course_tree):
    course, _, _ = course_tree

    response = admin_client.get(reverse("adminapi:list", args=["courses"]))

    assert response.status_code == 200
    assert response.json() == [{"id": course.pk, "title": "Spanish", "image_src": "/sp.svg"}]


def test_create_unit(admin_client, course_tree):
    course, _, _ = course_tree
    payload = {"course": course.pk, "title": "Unit 3", "description": "Travel", "order": 3}

    response = _send(admin_client, "post", reverse("adminapi:list", args=["units"]), payload)

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Unit 3"
    assert Unit.objects.get(pk=body["id"]).course == course


def test_create_with_missing_fields_fails_validation(admin_client):
    response = _send(admin_client, "post", reverse("adminapi:list", args=["courses"]), {"title": "French"})

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"
    assert "image_src" in response.json()["errors"]


def test_create_with_bad_challenge_type_fails_validation(admin_client, course_tree):
    _, _, lessons = course_tree
    payload = {"lesson": lessons[0].pk, "type": "ESSAY", "question": "Why?", "order": 9}

    response = _send(admin_client, "post", reverse("adminapi:list", args=["challenges"]), payload)

    assert response.status_code == 400
    assert "type" in response.json()["errors"]


def test_invalid_json_is_rejected(admin_client):
    response = admin_client.post(
        reverse("adminapi:list", args=["courses"]), data="{not json", content_type="application/json"
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid JSON payload"


def test_unknown_resource_is_404(admin_client):
    assert admin_client.get(reverse("adminapi:list", args=["planets"])).status_code == 404
    assert admin_client.get(reverse("adminapi:detail", args=["planets", 1])).status_code == 404


def test_get_detail(admin_client, course_tree):
    _, _, lessons = course_tree
    challenge = Challenge.objects.filter(lesson=lessons[0]).order_by("order").first()

    response = admin_client.get(reverse("adminapi:detail", args=["challenges", challenge.pk]))

    assert response.status_code == 200
    assert response.json() == {
        "id": challenge.pk,
        "lesson": lessons[0].pk,
        "type": "SELECT",
        "question": challenge.question,
        "order": 1,
    }


def test_get_missing_detail_is_404(admin_client):
    response = admin_client.get(reverse("adminapi:detail", args=["courses", 999999]))
    assert response.status_code == 404


def test_put_replaces(admin_client, course_tree):
    course, _, _ = course_tree
    url = reverse("adminapi:detail", args=["courses", course.pk])

    response = _send(admin_client, "put", url, {"title": "Spanish (Spain)", "image_src": "/es.svg"})

    assert response.status_code == 200
    course.refresh_from_db()
    assert course.title == "Spanish (Spain)"
    assert course.image_src == "/es.svg"


def test_put_with_partial_payload_fails(admin_client, course_tree):
    course, _, _ = course_tree
    url = reverse("adminapi:detail", args=["courses", course.pk])

    response = _send(admin_client, "put", url, {"title": "Only a title"})

    assert response.status_code == 400


def test_patch_merges(admin_client, course_tree):
    _, units, _ = course_tree
    url = reverse("adminapi:detail", args=["units", units[1].pk])

    response = _send(admin_client, "patch", url, {"description": "Food and drink"})

    assert response.status_code == 200
    units[1].refresh_from_db()
    assert units[1].description == "Food and drink"
    assert units[1].title == "Unit 2"
    assert units[1].order == 2


def test_delete_cascades(admin_client, course_tree):
    course, _, _ = course_tree
    url = reverse("adminapi:detail", args=["courses", course.pk])

    response = admin_client.delete(url)

    assert response.status_code == 200
    assert response.json()["id"] == course.pk
    assert not Course.objects.filter(pk=course.pk).exists()
    assert not Unit.objects.filter(course_id=course.pk).exists()


def test_method_not_allowed(admin_client, course_tree):
    response = admin_client.delete(reverse("adminapi:list", args=["courses"]))
    assert response.status_code == 405
