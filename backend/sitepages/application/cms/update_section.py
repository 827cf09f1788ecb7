from typing import Any, Dict, Optional
from sitepages.models.page import Page
from sitepages.domain.exceptions import InvalidSectionPayload
from sitepages.domain.sections import validate_section
from sitepages.domain.invariants.page import assert_page_sections
from sitepages.utils.audit import log_action
from sitepages.utils.identifiers import ensure_item_ids
from sitepages.utils.optimistic_lock import Precondition, enforce_optimistic_lock
from sitepages.utils.transaction import transactional
from .get_page import get_page_by_id
from .section_documents import find_section_index


def update_section(
    *,
    page_id: str,
    section_id: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
    precondition: Optional[Precondition] = None,
) -> Page:
    """
    Patch one section in place.

    Top-level fields in ``data`` replace the stored ones and omitted fields
    are kept. ``items`` therefore replaces the whole list rather than being
    merged item by item, while a null ``items`` keeps the stored list. The
    section id cannot be changed.
    """
    if not isinstance(data, dict):
        raise InvalidSectionPayload("Section patch must be a JSON object")

    page = get_page_by_id(page_id)
    enforce_optimistic_lock(page, precondition)

    sections = page.section_documents()
    index = find_section_index(sections, section_id)

    patch = {key: value for key, value in data.items() if key != "id"}
    if patch.get("items") is None:
        # null items means "not provided", the stored list is kept
        patch.pop("items", None)
    section = validate_section({**sections[index], **patch})
    section.id = section_id
    ensure_item_ids(section.items)

    sections[index] = section.to_document()
    assert_page_sections(sections)

    with transactional():
        page.sections = sections
        page.touch()

        log_action(
            action="section.update",
            entity_type="section",
            entity_id=section_id,
            actor_id=actor_id,
            payload={"page_id": page.id, "fields": sorted(patch)},
        )

    return page
