from django.urls import path

from . import views

urlpatterns = [
    path("", views.home, name="home"),
    path("league-records", views.league_records, name="league_records"),
    path("admin/add-story", views.add_story_view, name="add_story"),
    path("admin/delete-story", views.delete_story_view, name="delete_story"),
    path("admin/add-record", views.add_record_view, name="add_record"),
    path("admin/delete-record", views.delete_record_view, name="delete_record"),
    path("admin/live", views.live_link_view, name="live_link"),
]
