"""URL configuration for the learn app."""

from django.urls import path, URLPattern

from . import views

app_name = "learn"

urlpatterns: list[URLPattern] = [
    path("", views.learn, name="learn"),
]
