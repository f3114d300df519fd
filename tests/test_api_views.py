from __future__ import annotations

import pytest
from django.urls import reverse

from cards import api_views
from cards.models import ORIGINAL, Card


def _make_cards(n: int, version: str = ORIGINAL) -> None:
    Card.objects.bulk_create(Card(word=f"word{i}", version=version) for i in range(n))


@pytest.mark.django_db
def test_cards_returns_at_most_25_originals(api_client) -> None:
    _make_cards(40)
    _make_cards(10, version="Expansion")

    resp = api_client.get(reverse("cards-index"))

    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 25
    assert all(c["version"] == ORIGINAL for c in data)
    assert len({c["word"] for c in data}) == 25
    assert set(data[0]) == {"word", "version"}


@pytest.mark.django_db
def test_cards_small_pool_comes_back_whole(api_client) -> None:
    _make_cards(3)
    _make_cards(30, version="Expansion")

    data = api_client.get("/api/cards").json()

    assert sorted(c["word"] for c in data) == ["word0", "word1", "word2"]


@pytest.mark.django_db
def test_cards_empty_pool(api_client) -> None:
    resp = api_client.get("/api/cards")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.django_db
def test_cards_seeded_sample_is_repeatable(api_client, settings) -> None:
    settings.CARDS_SAMPLE_SEED = 7
    _make_cards(60)

    first = api_client.get("/api/cards").json()
    second = api_client.get("/api/cards").json()

    assert first == second


@pytest.mark.django_db
def test_cards_honours_sample_settings(api_client, settings) -> None:
    settings.CARDS_SAMPLE_SIZE = 4
    settings.CARDS_SAMPLE_VERSION = "Expansion"
    _make_cards(10)
    _make_cards(10, version="Expansion")

    data = api_client.get("/api/cards").json()

    assert len(data) == 4
    assert {c["version"] for c in data} == {"Expansion"}


@pytest.mark.django_db
def test_cards_reads_through_the_store(api_client, monkeypatch) -> None:
    class FakeStore:
        def by_version(self, version: str) -> list:
            return [Card(word="ghost", version=version)]

    monkeypatch.setattr(api_views, "card_store", FakeStore())

    assert api_client.get("/api/cards").json() == [{"word": "ghost", "version": ORIGINAL}]


@pytest.mark.django_db
def test_cards_is_read_only(api_client) -> None:
    assert api_client.post("/api/cards", {}).status_code == 405


@pytest.mark.django_db
def test_users_lists_everyone(api_client, django_user_model) -> None:
    created = [
        django_user_model.objects.create_user(username=f"user{i}", first_name=f"Name{i}")
        for i in range(5)
    ]

    resp = api_client.get(reverse("users-index"))

    assert resp.status_code == 200
    got = sorted(resp.json(), key=lambda u: u["id"])
    assert got == [{"id": u.id, "name": f"Name{i}"} for i, u in enumerate(created)]


@pytest.mark.django_db
def test_user_name_falls_back_to_username(api_client, django_user_model) -> None:
    django_user_model.objects.create_user(username="ada")
    assert api_client.get("/api/users").json()[0]["name"] == "ada"


@pytest.mark.django_db
def test_users_empty(api_client) -> None:
    assert api_client.get("/api/users").json() == []


@pytest.mark.django_db
def test_current_user_requires_auth(api_client) -> None:
    assert api_client.get(reverse("current-user")).status_code in (401, 403)


@pytest.mark.django_db
def test_current_user_returns_identity(api_client, django_user_model) -> None:
    user = django_user_model.objects.create_user(
        username="grace", first_name="Grace", last_name="Hopper"
    )
    api_client.force_authenticate(user=user)

    resp = api_client.get("/api/user")

    assert resp.status_code == 200
    assert resp.json() == {"id": user.id, "name": "Grace Hopper"}


@pytest.mark.django_db
def test_health(api_client) -> None:
    resp = api_client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
