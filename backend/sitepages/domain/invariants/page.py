import re

from ..exceptions import InvalidPage, InvalidSectionPayload
from ..seo import clean_seo

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")

TITLE_MAX_LENGTH = 100
META_TITLE_MAX_LENGTH = 60
META_DESCRIPTION_MAX_LENGTH = 160


def normalize_slug(value):
    if not isinstance(value, str) or not value.strip():
        raise InvalidPage("Page slug is required")

    slug = value.strip().lower()
    if not SLUG_PATTERN.match(slug):
        raise InvalidPage(
            "Slug can only contain lowercase letters, numbers, and hyphens"
        )
    return slug


def _optional_text(data, key, max_length, label):
    value = data[key]
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidPage(f"{label} must be a string")

    value = value.strip()
    if len(value) > max_length:
        raise InvalidPage(f"{label} cannot exceed {max_length} characters")
    return value or None


def clean_page_fields(data, *, partial=False):
    """
    Validate the scalar fields of a page payload.

    Returns a dict keyed by model attribute. With ``partial`` only keys present
    in ``data`` are returned and nothing is required.
    """
    cleaned = {}

    if "slug" in data or not partial:
        cleaned["slug"] = normalize_slug(data.get("slug"))

    if "title" in data or not partial:
        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            raise InvalidPage("Page title is required")
        title = title.strip()
        if len(title) > TITLE_MAX_LENGTH:
            raise InvalidPage(
                f"Title cannot exceed {TITLE_MAX_LENGTH} characters"
            )
        cleaned["title"] = title

    if "metaTitle" in data:
        cleaned["meta_title"] = _optional_text(
            data, "metaTitle", META_TITLE_MAX_LENGTH, "Meta title"
        )

    if "metaDescription" in data:
        cleaned["meta_description"] = _optional_text(
            data, "metaDescription", META_DESCRIPTION_MAX_LENGTH, "Meta description"
        )

    if "isActive" in data:
        if not isinstance(data["isActive"], bool):
            raise InvalidPage("isActive must be a boolean")
        cleaned["is_active"] = data["isActive"]

    if "seo" in data:
        cleaned["seo"] = clean_seo(data["seo"])

    return cleaned


def assert_page_sections(sections):
    """
    Section ids are unique within a page, item ids within a section.

    ``sections`` are stored documents. A violation here means an editor
    operation skipped id assignment.
    """
    seen = set()
    for section in sections:
        section_id = section.get("id")
        if not section_id or section_id in seen:
            raise InvalidSectionPayload(
                f"Duplicate or missing section id: {section_id!r}"
            )
        seen.add(section_id)

        item_ids = [item.get("id") for item in section.get("items") or []]
        if not all(item_ids) or len(set(item_ids)) != len(item_ids):
            raise InvalidSectionPayload(
                f"Duplicate or missing item id in section {section_id!r}"
            )
