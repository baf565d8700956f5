"""Session-backed filter form and record list helper.

A `FilterComponent` subclass ties together a filter form, the user's
session and Django's paginator so a list page can remember its filters,
paginate the filtered records, and offer previous/next navigation on
the detail pages of the same list.

Typical use in a view::

    component = CourseListFilter(request)
    form = component.create_form()
    component.update_session()
    qs = component.filter_queryset(Course.objects.all())
    component.store_result(qs)
    page_obj = component.get_pagination(qs)
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from django import forms
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.paginator import Paginator
from django.core.serializers.json import DjangoJSONEncoder
from django.db.models import Model, QuerySet
from django.http import HttpRequest
from django.utils.http import urlencode

logger = logging.getLogger(__name__)

_json_encoder = DjangoJSONEncoder()


class FilterComponent:
    """Base for a service that builds a filter form and record list.

    Subclasses must set `session_key` and implement `filter_defaults()`.
    """

    # Form prefix; also the prefix of the filter keys in `query()`.
    FORM_BLOCK_NAME = "filter"

    form_class: type[forms.BaseForm] = forms.Form
    paginator_class = Paginator
    session_key: str | None = None
    page_limit: int | None = None

    def __init__(self, request: HttpRequest | None, session=None):
        self.request = request
        if session is None and request is not None:
            session = getattr(request, "session", None)
        self.session = session
        self.form: forms.BaseForm | None = None

        if not self.session_key:
            raise ImproperlyConfigured("The session key must be set")
        if self.session is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} needs a session; enable SessionMiddleware or pass one explicitly"
            )

    def filter_defaults(self) -> dict[str, Any]:
        """Return the default filters."""
        raise NotImplementedError("Subclasses must implement filter_defaults()")

    def session_defaults(self) -> dict[str, Any]:
        return {
            "filters": {},
            "page": None,
            "ids": [],
        }

    def update_session(self) -> None:
        """Store the current filters and page in the session.

        Form values win over the defaults; keys the form does not carry
        are filled from `filter_defaults()`. Stored ids are kept.
        """
        existing = self.get_session()
        if self.form is not None:
            filters = {**self.filter_defaults(), **self.get_form_data()}
        else:
            filters = self.filter_defaults()

        current = {
            "filters": {key: _session_value(value) for key, value in filters.items()},
            "page": self.page_from_query(),
        }
        self.session[self.session_key] = {**self.session_defaults(), **existing, **current}
        logger.debug("Updated filter session %s (page %s)", self.session_key, current["page"])

    def merge_session(self, new_values: dict[str, Any]) -> None:
        """Merge `new_values` over the stored record and save it."""
        self.session[self.session_key] = {**self.get_session(), **new_values}

    def reset_session(self) -> None:
        """Forget the stored filters, page and ids."""
        self.session.pop(self.session_key, None)

    def get_session(self, key: str | None = None) -> Any:
        """Return the whole record, or a single key of it.

        Missing keys are filled from `session_defaults()`; an unknown
        `key` gives None.
        """
        data = {**self.session_defaults(), **(self.session.get(self.session_key) or {})}
        if key is None:
            return data
        return data.get(key)

    def page_from_query(self) -> int:
        """Return the `page` query parameter, or 1 when absent or invalid."""
        page = 0
        if self.request is not None:
            try:
                page = int(self.request.GET.get("page", 0))
            except (TypeError, ValueError):
                page = 0
        return page if page > 0 else 1

    def query(self) -> str:
        """Return the query string for the stored filters and page."""
        data: dict[str, Any] = {}
        for key, value in self.get_filters_as_dict().items():
            if value is None:
                continue
            data[f"{self.FORM_BLOCK_NAME}-{key}"] = value
        page = self.get_session("page")
        if page is not None:
            data["page"] = page
        return urlencode(data, doseq=True)

    def get_filters_as_dict(self) -> dict[str, Any]:
        return self._filters_as_dict()

    def _filters_as_dict(self) -> dict[str, Any]:
        # Entities (and collections of them) are reduced to their ids.
        filters = dict(self.get_session("filters") or {})
        for key, value in filters.items():
            if isinstance(value, QuerySet):
                filters[key] = [obj.pk for obj in value]
            elif isinstance(value, (list, tuple)):
                filters[key] = [v.pk if self.filter_is_entity(v) else v for v in value]
            elif self.filter_is_entity(value):
                filters[key] = value.pk
        return filters

    def filter_is_entity(self, value: Any) -> bool:
        """True when the value is a model instance."""
        return isinstance(value, Model)

    def create_form(self, **form_options) -> forms.BaseForm:
        """Create the filter form, bound to the request when submitted."""
        form_options.setdefault("prefix", self.FORM_BLOCK_NAME)
        form_options.setdefault("initial", self.filter_defaults())
        if self._is_submitted(form_options["prefix"]):
            self.form = self.form_class(self.request.GET, **form_options)
        else:
            self.form = self.form_class(**form_options)
        return self.form

    def _is_submitted(self, prefix: str | None) -> bool:
        if self.request is None:
            return False
        params = self.request.GET
        names = self.form_class.base_fields
        return any((f"{prefix}-{name}" if prefix else name) in params for name in names)

    def filter_queryset(self, queryset):
        return queryset

    def store_result(self, id_queryset: Iterable, id_field: str = "pk") -> None:
        """Store the full list of record ids in the session."""
        if isinstance(id_queryset, QuerySet):
            ids = list(id_queryset.values_list(id_field, flat=True))
        else:
            ids = [_row_id(row, id_field) for row in id_queryset]
        self.merge_session({"ids": [_session_value(i) for i in ids]})

    def get_pagination(self, queryset):
        """Return the requested page of `queryset`."""
        paginator = self.paginator_class(queryset, self.get_page_limit())
        return paginator.get_page(self.page_from_query())

    def prev_next(self, current_record_id) -> tuple[Any, Any]:
        """Find the previous and next ids around `current_record_id`.

        Either value is None when there is no neighbour or the id is not
        in the stored list.
        """
        record_ids = list(self.get_session("ids") or [])
        prev_id = next_id = None
        wanted = str(current_record_id)
        for index, record_id in enumerate(record_ids):
            if str(record_id) != wanted:
                continue
            if index > 0:
                prev_id = record_ids[index - 1]
            if index < len(record_ids) - 1:
                next_id = record_ids[index + 1]
            break
        return prev_id, next_id

    def get_form_data(self) -> dict[str, Any]:
        """Return the data from the form."""
        if self.form is None:
            raise RuntimeError("create_form() must be called before reading form data")
        form = self.form
        if not form.is_bound:
            return dict(form.initial)
        if not form.is_valid():
            logger.debug("Invalid filter submission for %s: %s", self.session_key, form.errors.as_json())
        return {**self.filter_defaults(), **form.cleaned_data}

    def get_page_limit(self) -> int:
        if self.page_limit is not None:
            return self.page_limit
        return getattr(settings, "LISTFILTER_PAGE_LIMIT", 20)


def _session_value(value: Any) -> Any:
    """Reduce a filter value to something the JSON session serializer takes."""
    if isinstance(value, Model):
        return _session_value(value.pk)
    if isinstance(value, dict):
        return {key: _session_value(v) for key, v in value.items()}
    if isinstance(value, (QuerySet, list, tuple, set, frozenset)):
        return [_session_value(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    # date, time, timedelta, Decimal, UUID and lazy strings
    return _json_encoder.default(value)


def _row_id(row: Any, id_field: str) -> Any:
    if isinstance(row, dict):
        return row[id_field]
    if isinstance(row, Model):
        return row.pk if id_field == "pk" else getattr(row, id_field)
    return row
