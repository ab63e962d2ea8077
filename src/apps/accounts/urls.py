from django.urls import path

from . import views

urlpatterns = [
    path("register", views.register, name="register"),
    path("login", views.login, name="login"),
    path("logout", views.logout, name="logout"),
    path("profile", views.profile, name="profile"),
    path("profile/update", views.profile_update, name="profile_update"),
    path("profile/delete", views.profile_delete, name="profile_delete"),
    path("admin-login", views.admin_login, name="admin_login"),
    path("admin", views.admin_dashboard, name="admin"),
]
