# cards/management/commands/import_cards.py
"""
Import cards from a .json file.

Usage:
$ python manage.py import_cards
$ python manage.py import_cards --path /srv/catalog/cards.json
"""
from __future__ import annotations

from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from cards.importer import CatalogError, import_cards


class Command(BaseCommand):
    help = "Import cards from .json file"

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--path",
            type=Path,
            default=None,
            help="catalog to read (default: CARDS_IMPORT_PATH)",
        )

    def handle(self, *args, **options) -> None:
        path = options["path"] or settings.CARDS_IMPORT_PATH
        try:
            result = import_cards(path)
        except CatalogError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(self.style.SUCCESS(
            f"Imported {result.total} card(s): "
            f"{result.created} created, {result.existing} already present."
        ))
