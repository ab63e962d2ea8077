from django.urls import path

from . import views

urlpatterns = [
    path("metrics", views.metrics, name="metrics"),
    path("team/<str:group_id>/<str:team_index>", views.team_detail, name="team_detail"),
    path("admin/add-group", views.add_group_view, name="add_group"),
    path("admin/delete-group", views.delete_group_view, name="delete_group"),
    path("admin/update-team", views.update_team_view, name="update_team"),
    path("admin/delete-team", views.delete_team_view, name="delete_team"),
    path("admin/add-to-roster", views.add_to_roster_view, name="add_to_roster"),
    path("admin/delete-from-roster", views.delete_from_roster_view, name="delete_from_roster"),
]
