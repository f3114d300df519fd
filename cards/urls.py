# cards/urls.py
from django.urls import path
from . import api_views

urlpatterns = [
    path("cards",  api_views.cards,        name="cards-index"),
    path("users",  api_views.users,        name="users-index"),
    path("user",   api_views.current_user, name="current-user"),

    # simple health‑check – reachable at /api/health
    path("health", api_views.health,       name="health"),
]
