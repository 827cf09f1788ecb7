from typing import List
from sitepages.extensions import db
from sitepages.models.page import Page
from sitepages.domain.exceptions import NotFound


def get_page_by_id(page_id: str) -> Page:
    page = db.session.get(Page, page_id)
    if page is None:
        raise NotFound()
    return page


def get_page_by_slug(slug: str, *, include_inactive: bool = False) -> Page:
    """
    Look a page up by its public slug.

    Inactive pages are only returned with ``include_inactive``; otherwise
    they are indistinguishable from a missing slug.
    """
    query = Page.query.filter_by(slug=(slug or "").strip().lower())
    if not include_inactive:
        query = query.filter_by(is_active=True)

    page = query.first()
    if page is None:
        raise NotFound()
    return page


def list_pages() -> List[Page]:
    return (
        Page.query
        .order_by(Page.updated_at.desc(), Page.created_at.desc())
        .all()
    )
