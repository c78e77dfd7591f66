"""URL configuration for the core app."""

from django.urls import path
from . import views

urlpatterns = [
    path("", views.index, name="index"),
    # Django's auth URLs handle login/logout, but registration needs a custom view
    path("register/", views.register, name="register"),
]
