from typing import Any, Dict, Optional
from sqlalchemy.exc import IntegrityError
from sitepages.extensions import db
from sitepages.models.page import Page
from sitepages.domain.exceptions import DuplicateSlug, InvalidPage
from sitepages.domain.invariants.page import assert_page_sections, clean_page_fields
from sitepages.utils.audit import log_action
from sitepages.utils.transaction import transactional
from .section_documents import prepare_sections


def create_page(
    *,
    actor_id: Optional[str],
    data: Dict[str, Any],
) -> Page:
    """
    Create a new page with its initial sections.

    Edge cases handled:
    - Missing or malformed slug/title
    - Duplicate slug (checked up front and by the unique constraint)
    - Sections and items without ids
    """
    if not isinstance(data, dict):
        raise InvalidPage("Invalid request body")

    fields = clean_page_fields(data)
    sections = prepare_sections(data.get("sections", []))

    if Page.query.filter_by(slug=fields["slug"]).first():
        raise DuplicateSlug()

    page = Page()
    page.slug = fields["slug"]
    page.title = fields["title"]
    page.meta_title = fields.get("meta_title")
    page.meta_description = fields.get("meta_description")
    page.is_active = fields.get("is_active", True)
    page.seo = fields.get("seo") or {}
    page.sections = sections

    assert_page_sections(page.sections)

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            log_action(
                action="page.create",
                entity_type="page",
                entity_id=page.id,
                actor_id=actor_id,
                payload={
                    "slug": page.slug,
                    "sections": len(page.sections),
                },
            )

        return page

    except IntegrityError as exc:
        # Concurrent create with the same slug
        raise DuplicateSlug() from exc
