from django.urls import path

from . import views

urlpatterns = [
    path("market", views.market, name="market"),
    path("market/view/<str:player_name>", views.market_view, name="market_view"),
    path("admin/approve-player", views.approve_player_view, name="approve_player"),
    path(
        "admin/update-market-player",
        views.update_market_player_view,
        name="update_market_player",
    ),
    path("admin/delete-player", views.delete_player_view, name="delete_player"),
]
