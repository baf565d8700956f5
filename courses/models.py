"""Course catalogue models.

A `Course` is the record type listed, filtered and paged by the
catalogue views.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models


class Level(models.TextChoices):
    INTRODUCTORY = "intro", "Introductory"
    INTERMEDIATE = "intermediate", "Intermediate"
    ADVANCED = "advanced", "Advanced"


class Course(models.Model):
    """A course in the catalogue, owned by a user."""

    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="owned_courses")
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    level = models.CharField(max_length=20, choices=Level.choices, default=Level.INTRODUCTORY)
    published = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["title", "id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.title}"
