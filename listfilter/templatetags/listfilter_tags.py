from __future__ import annotations

from django import template

register = template.Library()


@register.simple_tag
def filter_query(component) -> str:
    """Return the stored filters and page of `component` as a query string."""
    return component.query()


@register.simple_tag(takes_context=True)
def page_query(context, page_number) -> str:
    """Return the current query string with `page` replaced.

    Keeps the submitted filter fields so pagination links do not reset
    the list.
    """
    request = context.get("request")
    if request is None:
        return f"page={page_number}"
    params = request.GET.copy()
    params["page"] = page_number
    return params.urlencode()
