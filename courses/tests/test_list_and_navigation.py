from __future__ import annotations

import pytest
from django.contrib.auth.models import User
from django.test import Client

from courses.models import Course, Level


@pytest.fixture
def catalogue(db):
    alice = User.objects.create_user(username="alice", password="pw")
    bob = User.objects.create_user(username="bob", password="pw")
    courses = {
        "alg1": Course.objects.create(owner=alice, title="Algebra I", level=Level.INTRODUCTORY),
        "alg2": Course.objects.create(owner=alice, title="Algebra II", level=Level.INTERMEDIATE),
        "geo": Course.objects.create(owner=bob, title="Geometry", level=Level.INTRODUCTORY),
        "top": Course.objects.create(owner=bob, title="Topology", level=Level.ADVANCED),
        "draft": Course.objects.create(owner=bob, title="Draft course", published=False),
    }
    return {"alice": alice, "bob": bob, **courses}


def _titles(response) -> list[str]:
    return [c.title for c in response.context["courses"]]


@pytest.mark.django_db
def test_default_list_hides_unpublished_and_orders_by_title(catalogue):
    c = Client()
    r = c.get("/courses/")
    assert r.status_code == 200
    assert _titles(r) == ["Algebra I", "Algebra II", "Geometry", "Topology"]
    stored = c.session["courses.list"]
    assert stored["page"] == 1
    assert stored["ids"] == [catalogue[k].pk for k in ("alg1", "alg2", "geo", "top")]


@pytest.mark.django_db
def test_filters_are_stored_and_drive_prev_next(catalogue):
    c = Client()
    r = c.get("/courses/", {"filter-q": "algebra", "filter-published_only": "on"})
    assert r.status_code == 200
    assert _titles(r) == ["Algebra I", "Algebra II"]
    assert c.session["courses.list"]["filters"]["q"] == "algebra"

    first = c.get(f"/courses/{catalogue['alg1'].pk}/")
    assert first.status_code == 200
    assert first.context["prev_id"] is None
    assert first.context["next_id"] == catalogue["alg2"].pk
    assert "filter-q=algebra" in first.context["back_url"]

    second = c.get(f"/courses/{catalogue['alg2'].pk}/")
    assert second.context["prev_id"] == catalogue["alg1"].pk
    assert second.context["next_id"] is None

    # A course outside the filtered list has no neighbours
    outside = c.get(f"/courses/{catalogue['geo'].pk}/")
    assert outside.context["prev_id"] is None and outside.context["next_id"] is None


@pytest.mark.django_db
def test_back_link_restores_the_filtered_list(catalogue):
    c = Client()
    c.get("/courses/", {"filter-owners": [str(catalogue["bob"].pk)], "filter-published_only": "on"})
    detail = c.get(f"/courses/{catalogue['geo'].pk}/")
    back = c.get(detail.context["back_url"])
    assert back.status_code == 200
    assert _titles(back) == ["Geometry", "Topology"]
    assert c.session["courses.list"]["filters"]["owners"] == [catalogue["bob"].pk]


@pytest.mark.django_db
def test_unchecked_published_only_lists_drafts(catalogue):
    c = Client()
    r = c.get("/courses/", {"filter-q": "", "filter-ordering": "-title"})
    assert _titles(r) == ["Topology", "Geometry", "Draft course", "Algebra II", "Algebra I"]


@pytest.mark.django_db
def test_invalid_level_falls_back_to_any_level(catalogue):
    c = Client()
    r = c.get("/courses/", {"filter-level": "expert", "filter-published_only": "on"})
    assert r.status_code == 200
    assert len(_titles(r)) == 4


@pytest.mark.django_db
def test_pagination_keeps_filters_and_stores_page(catalogue, settings):
    settings.LISTFILTER_PAGE_LIMIT = 2
    c = Client()
    r = c.get("/courses/", {"filter-published_only": "on", "page": "2"})
    assert r.status_code == 200
    assert _titles(r) == ["Geometry", "Topology"]
    assert r.context["page_obj"].number == 2
    assert c.session["courses.list"]["page"] == 2
    # all matching ids are kept, not only the current page
    assert len(c.session["courses.list"]["ids"]) == 4
    body = r.content.decode()
    assert "filter-published_only=on&amp;page=1" in body


@pytest.mark.django_db
def test_reset_clears_remembered_filters(catalogue):
    c = Client()
    c.get("/courses/", {"filter-q": "algebra"})
    assert "courses.list" in c.session
    r = c.post("/courses/reset/")
    assert r.status_code == 302
    assert "courses.list" not in c.session
    assert c.get("/courses/reset/").status_code == 405


@pytest.mark.django_db
def test_detail_without_session_and_missing_course(catalogue):
    c = Client()
    r = c.get(f"/courses/{catalogue['geo'].pk}/")
    assert r.status_code == 200
    assert r.context["prev_id"] is None and r.context["next_id"] is None
    assert r.context["back_url"] == "/courses/"
    assert c.get("/courses/999999/").status_code == 404
