from typing import Any, Dict, Optional
from sqlalchemy.exc import IntegrityError
from sitepages.models.page import Page
from sitepages.domain.exceptions import DuplicateSlug, InvalidPage
from sitepages.domain.invariants.page import assert_page_sections, clean_page_fields
from sitepages.utils.audit import log_action
from sitepages.utils.optimistic_lock import Precondition, enforce_optimistic_lock
from sitepages.utils.transaction import transactional
from .get_page import get_page_by_id
from .section_documents import prepare_sections


ALLOWED_UPDATE_FIELDS = {
    "slug",
    "title",
    "metaTitle",
    "metaDescription",
    "isActive",
    "seo",
    "sections",
}


def update_page(
    *,
    page_id: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
    precondition: Optional[Precondition] = None,
) -> Page:
    """
    Update mutable fields on a page.

    Design rules:
    - Only whitelisted fields are mutable; omitted fields are kept
    - A request naming no mutable field is rejected
    - ``sections`` replaces the whole list, ids assigned as on create
    - Slug changes are re-checked for uniqueness against other pages
    """
    if not isinstance(data, dict) or not ALLOWED_UPDATE_FIELDS & data.keys():
        raise InvalidPage("No valid fields provided for update")

    page = get_page_by_id(page_id)
    enforce_optimistic_lock(page, precondition)

    fields = clean_page_fields(data, partial=True)
    if "sections" in data:
        fields["sections"] = prepare_sections(data["sections"])
        assert_page_sections(fields["sections"])

    if "slug" in fields and fields["slug"] != page.slug:
        exists = Page.query.filter(
            Page.slug == fields["slug"],
            Page.id != page.id,
        ).first()
        if exists:
            raise DuplicateSlug()

    changed_fields: list[str] = []

    try:
        with transactional():
            for field, value in fields.items():
                if getattr(page, field) != value:
                    setattr(page, field, value)
                    changed_fields.append(field)

            if changed_fields:
                page.touch()

                log_action(
                    action="page.update",
                    entity_type="page",
                    entity_id=page.id,
                    actor_id=actor_id,
                    payload={"fields": changed_fields},
                )
    except IntegrityError as exc:
        raise DuplicateSlug() from exc

    return page
