import pytest

from sitepages.domain.exceptions import (
    InvalidSectionPayload,
    InvalidSectionSettings,
    InvalidSectionType,
)
from sitepages.domain.sections import (
    SECTION_TYPES,
    CardsSection,
    FaqSection,
    validate_section,
)


def test_validate_section_picks_variant_by_type():
    section = validate_section({"type": "faq", "title": "FAQ"})

    assert isinstance(section, FaqSection)
    assert section.title == "FAQ"
    assert section.sort_order == 0


@pytest.mark.parametrize("section_type", SECTION_TYPES)
def test_every_section_type_validates(section_type):
    assert validate_section({"type": section_type}).type == section_type


@pytest.mark.parametrize("payload", [{"type": "carousel"}, {"title": "no type"}, {"type": None}])
def test_unknown_type_rejected(payload):
    with pytest.raises(InvalidSectionType):
        validate_section(payload)


def test_non_object_rejected():
    with pytest.raises(InvalidSectionPayload):
        validate_section(["hero"])


@pytest.mark.parametrize(
    "settings",
    [
        {"columns": 0},
        {"columns": 7},
        {"spacing": "huge"},
        {"alignment": "justify"},
        {"limit": 100},
    ],
)
def test_out_of_range_settings_rejected(settings):
    with pytest.raises(InvalidSectionSettings):
        validate_section({"type": "cards", "settings": settings})


def test_bad_item_shape_is_payload_error():
    with pytest.raises(InvalidSectionPayload):
        validate_section({"type": "cards", "items": [{"image": {"alt": "no url"}}]})


def test_item_metadata_allows_only_flat_values():
    section = validate_section({
        "type": "services",
        "items": [{"title": "Design", "metadata": {"features": ["a", "b"], "rank": 2}}],
    })
    assert section.items[0].metadata == {"features": ["a", "b"], "rank": 2}

    with pytest.raises(InvalidSectionPayload):
        validate_section({
            "type": "services",
            "items": [{"metadata": {"nested": {"deep": True}}}],
        })


def test_unknown_fields_are_dropped():
    section = validate_section({"type": "text", "content": "Hi", "legacyField": 1})

    assert "legacyField" not in section.to_document()


def test_document_uses_wire_names_and_omits_unset():
    section = CardsSection.model_validate({
        "id": "s1",
        "sortOrder": 4,
        "settings": {"backgroundColor": "#fff", "columns": 2},
    })

    assert section.to_document() == {
        "id": "s1",
        "type": "cards",
        "sortOrder": 4,
        "settings": {"backgroundColor": "#fff", "columns": 2},
    }


def test_paragraphs_split_on_newlines():
    section = validate_section({"type": "text", "content": "First\n\n  Second  \n"})

    assert section.paragraphs() == ["First", "Second"]


@pytest.mark.parametrize("settings", [{"columns": True}, {"columns": "2"}, {"limit": 2.5}])
def test_numeric_settings_are_strict(settings):
    with pytest.raises(InvalidSectionSettings):
        validate_section({"type": "cards", "settings": settings})


def test_image_alt_is_optional():
    section = validate_section({"type": "image", "image": {"url": "/a.jpg"}})

    assert section.to_document()["image"] == {"url": "/a.jpg"}
