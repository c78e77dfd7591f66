"""
JSON API used by admins to manage course content.

Every resource supports listing and creating on `/api/<resource>/` and
reading, updating (PUT replaces, PATCH merges) and deleting on
`/api/<resource>/<id>/`. Validation goes through a ModelForm for the resource.
"""

# pylint: disable=no-member

import json
import logging
from typing import Any, Dict, List, Tuple, Type

from django.db import models
from django.forms import modelform_factory
from django.forms.models import model_to_dict
from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_http_methods

from core.models import Challenge, ChallengeOption, Course, Lesson, Unit
from core.permissions import admin_required
from core.request_cache import invalidate_request_cache

logger = logging.getLogger(__name__)

RESOURCES: Dict[str, Tuple[Type[models.Model], List[str]]] = {
    "courses": (Course, ["title", "image_src"]),
    "units": (Unit, ["course", "title", "description", "order"]),
    "lessons": (Lesson, ["unit", "title", "order"]),
    "challenges": (Challenge, ["lesson", "type", "question", "order"]),
    "challenge-options": (
        ChallengeOption,
        ["challenge", "text", "correct", "image_src", "audio_src"],
    ),
}


def _serialize(obj: models.Model, fields: List[str]) -> Dict[str, Any]:
    return {"id": obj.pk, **model_to_dict(obj, fields=fields)}


def _error(message: str, status: int, **extra: Any) -> JsonResponse:
    return JsonResponse({"status": "error", "message": message, **extra}, status=status)


def _parse_body(request: HttpRequest) -> Dict[str, Any]:
    """Parses a JSON object body; raises ValueError when it is not one."""
    data = json.loads(request.body or b"{}")
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    return data


@admin_required
@require_http_methods(["GET", "POST"])
def resource_list(request: HttpRequest, resource: str) -> JsonResponse:
    """Lists or creates items of a resource."""
    if resource not in RESOURCES:
        return _error(f"Unknown resource: {resource}", 404)
    model, fields = RESOURCES[resource]

    if request.method == "GET":
        items = [_serialize(obj, fields) for obj in model.objects.order_by("pk")]
        return JsonResponse(items, safe=False)

    try:
        data = _parse_body(request)
    except ValueError:
        return _error("Invalid JSON payload", 400)

    form = modelform_factory(model, fields=fields)(data)
    if not form.is_valid():
        return _error("Validation failed", 400, errors=form.errors.get_json_data())

    obj = form.save()
    invalidate_request_cache()
    logger.info("Admin %s created %s %s.", request.user, resource, obj.pk)
    return JsonResponse(_serialize(obj, fields), status=201)


@admin_required
@require_http_methods(["GET", "PUT", "PATCH", "DELETE"])
def resource_detail(request: HttpRequest, resource: str, pk: int) -> JsonResponse:
    """Reads, updates or deletes one item of a resource."""
    if resource not in RESOURCES:
        return _error(f"Unknown resource: {resource}", 404)
    model, fields = RESOURCES[resource]

    obj = model.objects.filter(pk=pk).first()
    if obj is None:
        return _error(f"{model.__name__} {pk} not found", 404)

    if request.method == "GET":
        return JsonResponse(_serialize(obj, fields))

    if request.method == "DELETE":
        payload = _serialize(obj, fields)
        obj.delete()
        invalidate_request_cache()
        logger.info("Admin %s deleted %s %s.", request.user, resource, pk)
        return JsonResponse(payload)

    try:
        data = _parse_body(request)
    except ValueError:
        return _error("Invalid JSON payload", 400)

    if request.method == "PATCH":
        data = {**model_to_dict(obj, fields=fields), **data}

    form = modelform_factory(model, fields=fields)(data, instance=obj)
    if not form.is_valid():
        return _error("Validation failed", 400, errors=form.errors.get_json_data())

    obj = form.save()
    invalidate_request_cache()
    logger.info("Admin %s updated %s %s.", request.user, resource, pk)
    return JsonResponse(_serialize(obj, fields))
