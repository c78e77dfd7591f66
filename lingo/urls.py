"""
URL configuration for the lingo project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    # Include Django's built-in authentication views (login, logout, password reset, etc.)
    path("accounts/", include("django.contrib.auth.urls")),
    path("", include("core.urls")),
    path("courses/", include("courses.urls")),
    path("learn/", include("learn.urls")),
    path("lesson/", include("lessons.urls")),
    path("shop/", include("shop.urls")),
    path("leaderboard/", include("leaderboard.urls")),
    path("quests/", include("quests.urls")),
    # Content management API for admins
    path("api/", include("adminapi.urls")),
]
