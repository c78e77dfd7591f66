"""URL configuration for the quests app."""

from django.urls import path, URLPattern

from . import views

app_name = "quests"

urlpatterns: list[URLPattern] = [
    path("", views.quests, name="quests"),
]
