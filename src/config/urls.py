from django.urls import include, path

urlpatterns = [
    path("", include("apps.content.urls")),
    path("", include("apps.accounts.urls")),
    path("", include("apps.players.urls")),
    path("", include("apps.matches.urls")),
    path("", include("apps.standings.urls")),
    path("", include("apps.leaderboards.urls")),
]
