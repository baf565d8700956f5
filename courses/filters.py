"""Session-backed filter for the course list."""
from __future__ import annotations

from django.db.models import Q

from listfilter.component import FilterComponent
from .forms import CourseFilterForm


class CourseListFilter(FilterComponent):
    form_class = CourseFilterForm
    session_key = "courses.list"

    def filter_defaults(self) -> dict:
        return {
            "q": "",
            "owners": [],
            "level": "",
            "published_only": True,
            "ordering": "title",
        }

    def filter_queryset(self, queryset):
        """Apply the stored filters to `queryset`.

        Reads the session rather than the form so detail pages and the
        API see the same list as the last rendered list page.
        """
        filters = {**self.filter_defaults(), **self.get_filters_as_dict()}
        q = filters.get("q")
        if q:
            queryset = queryset.filter(Q(title__icontains=q) | Q(description__icontains=q) | Q(owner__username__icontains=q))
        owners = filters.get("owners")
        if owners:
            queryset = queryset.filter(owner_id__in=owners)
        if filters.get("level"):
            queryset = queryset.filter(level=filters["level"])
        if filters.get("published_only"):
            queryset = queryset.filter(published=True)
        ordering = filters.get("ordering") or "title"
        return queryset.order_by(ordering, "id")
