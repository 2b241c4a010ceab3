from django.db import models

from .utils import StringProperties


class StringRecord(models.Model):
    value = models.TextField(unique=True)
    sha256_hash = models.CharField(
        max_length=64, unique=True)  # sha256 hex length = 64
    length = models.PositiveIntegerField()
    is_palindrome = models.BooleanField()
    unique_characters = models.PositiveIntegerField()
    word_count = models.PositiveIntegerField()
    character_frequency_map = models.JSONField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        # newest first, ties in insertion order
        ordering = ['-created_at', 'pk']

    def __str__(self):
        return f"{self.value[:50]} - {self.sha256_hash[:12]}"

    @property
    def properties(self) -> StringProperties:
        return StringProperties(
            length=self.length,
            is_palindrome=self.is_palindrome,
            unique_characters=self.unique_characters,
            word_count=self.word_count,
            sha256_hash=self.sha256_hash,
            character_frequency_map=dict(self.character_frequency_map),
        )
