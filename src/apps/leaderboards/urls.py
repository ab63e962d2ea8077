from django.urls import path

from . import views

urlpatterns = [
    path("admin/update-stat", views.update_stat_view, name="update_stat"),
    path("admin/delete-stat", views.delete_stat_view, name="delete_stat"),
]
