"""URL configuration for the lessons app."""

from django.urls import path, URLPattern

from . import views

app_name = "lessons"

urlpatterns: list[URLPattern] = [
    path("", views.lesson_detail, name="active"),
    path("<int:lesson_id>/", views.lesson_detail, name="detail"),
    path(
        "challenges/<int:challenge_id>/complete/",
        views.complete_challenge,
        name="complete_challenge",
    ),
    path(
        "challenges/<int:challenge_id>/reduce-hearts/",
        views.reduce_hearts_view,
        name="reduce_hearts",
    ),
]
