"""URL configuration for the leaderboard app."""

from django.urls import path, URLPattern

from . import views

app_name = "leaderboard"

urlpatterns: list[URLPattern] = [
    path("", views.leaderboard, name="leaderboard"),
]
