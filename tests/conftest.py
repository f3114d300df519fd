from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a cards.json catalog under tmp_path."""

    def _factory(words: list | None = None, *, raw: str | None = None) -> Path:
        path = tmp_path / "cards.json"
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(json.dumps({"words": words or []}), encoding="utf-8")
        return path

    return _factory
