# cards/importer.py
"""
importer.py – read a cards.json catalog and upsert every entry

    {"words": [{"word": "Sparkle", "version": "Original"}, …]}

→ one Card row per distinct (lower-cased word, version) pair.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from django.db import transaction

from .repository import CardStore

log = logging.getLogger(__name__)


class CatalogError(ValueError):
    """The catalog file is missing, not JSON, or not shaped like a catalog."""


@dataclass(frozen=True)
class CardRecord:
    word: str
    version: str

    @classmethod
    def from_raw(cls, raw: Any, index: int = 0) -> "CardRecord":
        if not isinstance(raw, dict):
            raise CatalogError(f"words[{index}] is not an object")
        word, version = raw.get("word"), raw.get("version")
        if not isinstance(word, str) or not isinstance(version, str):
            raise CatalogError(f"words[{index}] needs string 'word' and 'version'")
        word = word.strip().lower()
        if not word:
            raise CatalogError(f"words[{index}] has an empty 'word'")
        return cls(word=word, version=version)


@dataclass
class ImportResult:
    created: int = 0
    existing: int = 0

    @property
    def total(self) -> int:
        return self.created + self.existing


def load_catalog(path: Path) -> List[CardRecord]:
    """
    Decode the catalog at *path*.

    Returns
    -------
    list[CardRecord]
        Normalised records in file order (duplicates kept; the upsert
        collapses them).
    Raises
    ------
    CatalogError
        If the file cannot be read, is not valid JSON, or lacks a
        ``words`` list of ``{word, version}`` objects.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise CatalogError(f"cannot decode {path}: {exc}") from exc

    words = data.get("words") if isinstance(data, dict) else None
    if not isinstance(words, list):
        raise CatalogError(f"{path}: expected an object with a 'words' list")

    return [CardRecord.from_raw(raw, i) for i, raw in enumerate(words)]


def import_cards(path: Path, store: Optional[CardStore] = None) -> ImportResult:
    """
    Load *path* and upsert every record through *store*.

    The whole batch runs in one transaction; a bad catalog writes nothing.
    """
    store = store or CardStore()
    log.info("import → reading %s", path)

    try:
        records = load_catalog(path)
    except CatalogError:
        log.exception("card import failed")
        raise

    result = ImportResult()
    with transaction.atomic():
        for rec in records:
            _, created = store.upsert(rec.word, rec.version)
            if created:
                result.created += 1
            else:
                result.existing += 1

    log.info(
        "import → %s record(s): %s created, %s already present",
        result.total, result.created, result.existing,
    )
    return result
