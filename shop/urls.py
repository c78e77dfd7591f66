"""URL configuration for the shop app."""

from django.urls import path, URLPattern

from . import views

app_name = "shop"

urlpatterns: list[URLPattern] = [
    path("", views.shop, name="shop"),
    path("refill/", views.refill, name="refill"),
]
