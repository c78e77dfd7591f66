"""URL configuration for the courses app."""

from django.urls import path, URLPattern

from . import views

app_name = "courses"

urlpatterns: list[URLPattern] = [
    path("", views.course_list, name="list"),
    path("<int:course_id>/select/", views.select_course, name="select"),
]
