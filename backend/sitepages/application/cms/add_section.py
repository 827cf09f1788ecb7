from typing import Any, Dict, Optional
from sitepages.models.page import Page
from sitepages.domain.sections import validate_section
from sitepages.domain.invariants.page import assert_page_sections
from sitepages.utils.audit import log_action
from sitepages.utils.identifiers import ensure_section_id
from sitepages.utils.optimistic_lock import Precondition, enforce_optimistic_lock
from sitepages.utils.order import next_sort_order
from sitepages.utils.transaction import transactional
from .get_page import get_page_by_id


def add_section(
    *,
    page_id: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
    precondition: Optional[Precondition] = None,
) -> Page:
    """
    Append a section to a page.

    - id is generated when missing or already used on the page
    - item ids are generated when missing or repeated
    - without an explicit sortOrder the section renders last
    """
    page = get_page_by_id(page_id)
    enforce_optimistic_lock(page, precondition)

    section = validate_section(data)
    sections = page.section_documents()

    if "sortOrder" not in data:
        section.sort_order = next_sort_order(sections)

    ensure_section_id(section, {s.get("id") for s in sections})
    sections.append(section.to_document())
    assert_page_sections(sections)

    with transactional():
        page.sections = sections
        page.touch()

        log_action(
            action="section.create",
            entity_type="section",
            entity_id=section.id,
            actor_id=actor_id,
            payload={
                "page_id": page.id,
                "type": section.type,
                "sortOrder": section.sort_order,
            },
        )

    return page
