from typing import Optional
from sitepages.models.page import Page
from sitepages.utils.audit import log_action
from sitepages.utils.optimistic_lock import Precondition, enforce_optimistic_lock
from sitepages.utils.transaction import transactional
from .get_page import get_page_by_id
from .section_documents import find_section_index


def delete_section(
    *,
    page_id: str,
    section_id: str,
    actor_id: Optional[str],
    precondition: Optional[Precondition] = None,
) -> Page:
    page = get_page_by_id(page_id)
    enforce_optimistic_lock(page, precondition)

    sections = page.section_documents()
    del sections[find_section_index(sections, section_id)]

    with transactional():
        page.sections = sections
        page.touch()

        log_action(
            action="section.delete",
            entity_type="section",
            entity_id=section_id,
            actor_id=actor_id,
            payload={"page_id": page.id},
        )

    return page
