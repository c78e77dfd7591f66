"""URL configuration for the admin content API."""

from django.urls import path, URLPattern

from . import views

app_name = "adminapi"

urlpatterns: list[URLPattern] = [
    path("<slug:resource>/", views.resource_list, name="list"),
    path("<slug:resource>/<int:pk>/", views.resource_detail, name="detail"),
]
