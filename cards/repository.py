# cards/repository.py
"""
Persistence helpers for cards and users.

Views and the importer take a store instance instead of reaching for
`Model.objects` directly, so tests can hand in a double.
"""
from __future__ import annotations

from typing import List, Tuple

from django.contrib.auth import get_user_model

from .models import Card


class CardStore:
    """ORM-backed card store."""

    def upsert(self, word: str, version: str) -> Tuple[Card, bool]:
        """
        Insert the (word, version) pair unless it already exists.

        Returns the row and whether it was created. An existing row is
        located and left unsaved.
        """
        return Card.objects.get_or_create(word=word, version=version)

    def by_version(self, version: str) -> List[Card]:
        return list(Card.objects.filter(version=version))

    def count(self) -> int:
        return Card.objects.count()


class UserStore:
    """ORM-backed, read-only view of the configured user model."""

    def all(self) -> list:
        return list(get_user_model().objects.order_by("pk"))
