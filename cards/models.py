from django.db import models

# version tag of the pool served by GET /api/cards
ORIGINAL = "Original"


class Card(models.Model):
    word    = models.CharField(max_length=255)
    version = models.CharField(max_length=100, db_index=True)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["word", "version"], name="uniq_card_word_per_version"),
        ]

    def __str__(self) -> str:
        return f"{self.word} ({self.version})"
