import pytest

from sitepages.domain.sections import SECTION_TYPES, validate_section
from sitepages.rendering.layout import grid_columns, section_layout
from sitepages.rendering.renderers import registered_types, render_page, render_section


def test_every_section_type_has_a_renderer():
    assert registered_types() == frozenset(SECTION_TYPES)


@pytest.mark.parametrize("section_type", SECTION_TYPES)
def test_render_minimal_section(app, section_type):
    rendered = render_section({"id": "s", "type": section_type})

    assert rendered["type"] == section_type
    assert rendered["component"] != "unknown"


def test_layout_defaults():
    layout = section_layout(validate_section({"type": "text"}))

    assert layout == {
        "spacing": "medium",
        "paddingY": "4rem",
        "align": "left",
        "backgroundColor": None,
        "textColor": None,
    }


def test_grid_layout_defaults_to_three_columns():
    layout = section_layout(validate_section({"type": "cards"}))

    assert layout["columns"] == 3
    assert layout["grid"] == {"base": 1, "md": 2, "lg": 3}


def test_layout_honours_settings():
    layout = section_layout(validate_section({
        "type": "services",
        "settings": {
            "columns": 2,
            "spacing": "large",
            "alignment": "center",
            "backgroundColor": "#111",
            "textColor": "#eee",
        },
    }))

    assert layout["columns"] == 2
    assert layout["grid"] == grid_columns(2) == {"base": 1, "md": 2}
    assert layout["paddingY"] == "6rem"
    assert layout["align"] == "center"
    assert layout["backgroundColor"] == "#111"


def test_unknown_type_renders_placeholder(app):
    rendered = render_section({"id": "old", "type": "carousel"})

    assert rendered["component"] == "unknown"
    assert rendered["message"] == "Unknown section type: carousel"


def test_invalid_section_renders_placeholder(app):
    rendered = render_section({"id": "bad", "type": "cards", "settings": {"columns": 12}})

    assert rendered["component"] == "unknown"
    assert rendered["message"].startswith("Invalid section:")


def test_faq_entries_start_collapsed(app):
    rendered = render_section({
        "type": "faq",
        "items": [{"id": "q1", "title": "How long?", "description": "Two weeks."}],
    })

    assert rendered["component"] == "accordion"
    assert rendered["entries"] == [
        {"id": "q1", "question": "How long?", "answer": "Two weeks.", "expanded": False}
    ]


def test_hero_splits_paragraphs(app):
    rendered = render_section({"type": "hero", "title": "Hi", "content": "One\nTwo"})

    assert rendered["paragraphs"] == ["One", "Two"]
    assert rendered["image"] is None


def test_text_without_image_gets_placeholder(app):
    assert render_section({"type": "text"})["image"] == {"placeholder": True}


def test_card_icons_resolve(app):
    rendered = render_section({
        "type": "cards",
        "items": [{"id": "1", "icon": "heart"}, {"id": "2", "icon": "rocket"}, {"id": "3"}],
    })

    icons = [card["icon"] for card in rendered["cards"]]
    assert icons[0]["tone"] == "green"
    assert icons[1]["tone"] == "gray"
    assert icons[2] is None


def test_projects_data_source(app):
    featured = render_section({"type": "projects"})
    everything = render_section({"type": "projects", "settings": {"featuredOnly": False, "limit": 12}})

    assert featured["dataSource"] == {"endpoint": "/api/projects/featured", "params": {"limit": 6}}
    assert everything["dataSource"] == {"endpoint": "/api/projects", "params": {"limit": 12}}


def test_services_fallback_items(app):
    rendered = render_section({
        "type": "services",
        "items": [{"id": "svc", "title": "Design", "metadata": {"features": ["Plans", "3D"]}}],
    })

    assert rendered["dataSource"]["endpoint"] == "/api/services"
    assert rendered["fallback"][0]["features"] == ["Plans", "3D"]


def test_contact_form_posts_to_consultations(app):
    form = render_section({"type": "contact_form"})["form"]

    assert form["action"] == "/api/consultations"
    assert form["method"] == "POST"


def test_render_page_meta_falls_back_to_page_fields(app):
    rendered = render_page({
        "slug": "about",
        "title": "About",
        "metaDescription": "Who we are",
        "seo": {"keywords": ["design"]},
        "sections": [{"id": "h", "type": "hero"}],
    })

    assert rendered["meta"] == {
        "title": "About",
        "description": "Who we are",
        "keywords": ["design"],
        "ogImage": None,
        "ogDescription": "Who we are",
    }
    assert rendered["sections"][0]["component"] == "headline"


def test_services_single_feature_is_not_split(app):
    rendered = render_section({
        "type": "services",
        "items": [{"id": "svc", "metadata": {"features": "Plans"}}],
    })

    assert rendered["fallback"][0]["features"] == ["Plans"]


def test_image_without_alt_renders_empty_alt(app):
    rendered = render_section({"type": "image", "image": {"url": "/a.jpg"}})

    assert rendered["image"] == {"url": "/a.jpg", "alt": ""}
