import pytest

from sitepages.application.cms.resolve_page import resolve_page
from sitepages.domain.exceptions import NotFound
from sitepages.utils.order import next_sort_order, sort_sections


def test_resolve_returns_active_page_with_sorted_sections(make_page):
    make_page(
        slug="faq",
        title="FAQ",
        sections=[
            {"id": "s2", "type": "faq", "sortOrder": 2, "items": [{"title": "Q1", "description": "A1"}]},
            {"id": "s1", "type": "hero", "sortOrder": 1},
        ],
    )

    page = resolve_page("faq")

    assert [section["id"] for section in page["sections"]] == ["s1", "s2"]
    assert page["sections"][1]["items"][0]["title"] == "Q1"
    assert "revision" not in page


def test_resolve_is_case_insensitive(make_page):
    make_page(slug="about")

    assert resolve_page(" About ")["slug"] == "about"


def test_inactive_page_is_not_found(make_page):
    make_page(slug="draft", isActive=False)

    with pytest.raises(NotFound):
        resolve_page("draft")
    with pytest.raises(NotFound):
        resolve_page("never-created")


def test_sort_is_stable_for_equal_orders():
    sections = [
        {"id": "x", "sortOrder": 1},
        {"id": "y", "sortOrder": 0},
        {"id": "z", "sortOrder": 1},
        {"id": "w"},
    ]

    assert [s["id"] for s in sort_sections(sections)] == ["y", "w", "x", "z"]


def test_next_sort_order():
    assert next_sort_order([]) == 0
    assert next_sort_order([{"sortOrder": 4}, {"sortOrder": 1}]) == 5
