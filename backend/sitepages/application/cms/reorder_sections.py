from typing import List, Optional
from sitepages.models.page import Page
from sitepages.domain.exceptions import InvalidSectionPayload, UnknownSectionIds
from sitepages.utils.audit import log_action
from sitepages.utils.optimistic_lock import Precondition, enforce_optimistic_lock
from sitepages.utils.transaction import transactional
from .get_page import get_page_by_id


def reorder_sections(
    *,
    page_id: str,
    actor_id: Optional[str],
    section_ids: List[str],
    strict: bool = False,
    precondition: Optional[Precondition] = None,
) -> Page:
    """
    Rewrite the section list in the order given by ``section_ids``.

    Each listed section gets its position as sortOrder. The stored list
    keeps only listed sections: ids that match nothing (or repeat) are
    skipped, and sections left out of the list are dropped. With ``strict``
    the list must name every section exactly once, else UnknownSectionIds.
    """
    if not isinstance(section_ids, list) or not all(
        isinstance(section_id, str) for section_id in section_ids
    ):
        raise InvalidSectionPayload("sections: must be a list of section ids")

    page = get_page_by_id(page_id)
    enforce_optimistic_lock(page, precondition)

    remaining = {s.get("id"): s for s in page.section_documents()}
    reordered = []
    unmatched = []

    for index, section_id in enumerate(section_ids):
        section = remaining.pop(section_id, None)
        if section is None:
            unmatched.append(section_id)
            continue
        section["sortOrder"] = index
        reordered.append(section)

    if strict and (unmatched or remaining):
        raise UnknownSectionIds(
            "Reorder must list every section exactly once "
            f"(unknown: {unmatched}, missing: {sorted(remaining)})"
        )

    with transactional():
        page.sections = reordered
        page.touch()

        log_action(
            action="section.reorder",
            entity_type="page",
            entity_id=page.id,
            actor_id=actor_id,
            payload={
                "count": len(reordered),
                "skipped": unmatched,
                "dropped": sorted(remaining),
            },
        )

    return page
