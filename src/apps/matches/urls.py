from django.urls import path

from . import views

urlpatterns = [
    path("matches", views.match_list, name="matches"),
    path("match/<str:match_id>", views.match_detail, name="match_detail"),
    path("admin/add-match", views.add_match_view, name="add_match"),
    path("admin/delete-match", views.delete_match_view, name="delete_match"),
    path(
        "admin/update-match-details",
        views.update_match_details_view,
        name="update_match_details",
    ),
]
