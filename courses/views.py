"""Course list and detail views backed by the session filter."""
from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from .filters import CourseListFilter
from .models import Course


def course_list(request: HttpRequest) -> HttpResponse:
    """Filterable, paginated course catalogue.

    The filters and page are remembered in the session together with
    the ids of every matching course, which the detail page uses for
    previous/next links.
    """
    component = CourseListFilter(request)
    form = component.create_form()
    component.update_session()
    courses = component.filter_queryset(Course.objects.select_related("owner"))
    component.store_result(courses)
    page_obj = component.get_pagination(courses)
    ctx = {
        "form": form,
        "page_obj": page_obj,
        "courses": page_obj.object_list,
        "filter": component,
    }
    return render(request, "courses/list.html", ctx)


def course_detail(request: HttpRequest, pk: int) -> HttpResponse:
    """Course detail with previous/next links across the filtered list."""
    course = get_object_or_404(Course.objects.select_related("owner"), pk=pk)
    component = CourseListFilter(request)
    prev_id, next_id = component.prev_next(course.pk)
    query = component.query()
    back_url = reverse("courses:list")
    if query:
        back_url = f"{back_url}?{query}"
    ctx = {
        "course": course,
        "prev_id": prev_id,
        "next_id": next_id,
        "back_url": back_url,
        "breadcrumbs": [
            ("/", "Home"),
            (back_url, "Courses"),
            ("", course.title),
        ],
    }
    return render(request, "courses/detail.html", ctx)


@require_POST
def course_list_reset(request: HttpRequest) -> HttpResponse:
    """Forget the remembered filters and go back to the full list."""
    CourseListFilter(request).reset_session()
    return redirect("courses:list")
