# cards/api_views.py
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from .repository import CardStore, UserStore
from .sampling import make_rng, sample
from .serializers import CardSerializer, UserSerializer

log = logging.getLogger(__name__)

card_store = CardStore()
user_store = UserStore()


# ────────────────────────────────────────────────────────────────────────────
#  /api/cards  – random hand from the "Original" pool
# ────────────────────────────────────────────────────────────────────────────
@api_view(["GET"])
@permission_classes([AllowAny])
def cards(request) -> Response:
    """
    GET /api/cards
    Returns up to CARDS_SAMPLE_SIZE (25) random cards of version
    CARDS_SAMPLE_VERSION ("Original"). A smaller pool comes back whole.
    """
    pool = card_store.by_version(settings.CARDS_SAMPLE_VERSION)
    hand = sample(pool, settings.CARDS_SAMPLE_SIZE, make_rng(settings.CARDS_SAMPLE_SEED))
    log.debug("cards → %s of %s in pool", len(hand), len(pool))
    return Response(CardSerializer(hand, many=True).data, status=200)


# ────────────────────────────────────────────────────────────────────────────
#  /api/users  – every user, unfiltered
# ────────────────────────────────────────────────────────────────────────────
@api_view(["GET"])
@permission_classes([AllowAny])
def users(request) -> Response:
    return Response(UserSerializer(user_store.all(), many=True).data, status=200)


# ────────────────────────────────────────────────────────────────────────────
#  /api/user  – whoever is logged in
# ────────────────────────────────────────────────────────────────────────────
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def current_user(request) -> Response:
    return Response(UserSerializer(request.user).data)


# ────────────────────────────────────────────────────────────────────────────
#  /api/health  – simple health check
# ────────────────────────────────────────────────────────────────────────────
@api_view(["GET"])
@permission_classes([])  # public
def health(_request):
    return JsonResponse({"ok": True})
