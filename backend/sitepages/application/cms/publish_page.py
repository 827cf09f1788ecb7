from typing import Optional
from sitepages.models.page import Page
from sitepages.domain.lifecycle.page import assert_page_transition
from sitepages.utils.audit import log_action
from sitepages.utils.optimistic_lock import Precondition, enforce_optimistic_lock
from sitepages.utils.transaction import transactional
from .get_page import get_page_by_id


def set_page_active(
    *,
    page_id: str,
    actor_id: Optional[str],
    active: bool,
    precondition: Optional[Precondition] = None,
) -> Page:
    """
    Toggle public visibility of a page.

    Responsibilities:
    - lifecycle transition enforcement
    - optimistic lock check
    - audit logging
    """
    page = get_page_by_id(page_id)
    enforce_optimistic_lock(page, precondition)

    assert_page_transition(from_active=page.is_active, to_active=active)

    with transactional():
        page.is_active = active
        page.touch()

        log_action(
            action="page.publish" if active else "page.unpublish",
            entity_type="page",
            entity_id=page.id,
            actor_id=actor_id,
            payload={"slug": page.slug},
        )

    return page


def publish_page(*, page_id, actor_id, precondition=None) -> Page:
    return set_page_active(
        page_id=page_id, actor_id=actor_id, active=True, precondition=precondition
    )


def unpublish_page(*, page_id, actor_id, precondition=None) -> Page:
    return set_page_active(
        page_id=page_id, actor_id=actor_id, active=False, precondition=precondition
    )
