"""Filter form for the course catalogue."""
from __future__ import annotations

from django import forms
from django.contrib.auth import get_user_model

from .models import Level

User = get_user_model()


ORDERING_CHOICES = (
    ("title", "Title (A-Z)"),
    ("-title", "Title (Z-A)"),
    ("-created_at", "Newest first"),
    ("created_at", "Oldest first"),
)


class CourseFilterForm(forms.Form):
    """Search and filter options for the course list.

    Submitted by GET; every field is optional so an empty submission
    lists everything.
    """

    q = forms.CharField(label="Search", max_length=100, required=False)
    owners = forms.ModelMultipleChoiceField(
        label="Owners",
        queryset=User.objects.order_by("username"),
        required=False,
    )
    level = forms.ChoiceField(label="Level", choices=[("", "Any level"), *Level.choices], required=False)
    published_only = forms.BooleanField(label="Published only", required=False)
    ordering = forms.ChoiceField(label="Order by", choices=ORDERING_CHOICES, required=False)

    def clean_q(self) -> str:
        return (self.cleaned_data.get("q") or "").strip()
