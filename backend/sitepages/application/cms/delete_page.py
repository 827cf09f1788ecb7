from typing import Optional
from sitepages.extensions import db
from sitepages.utils.audit import log_action
from sitepages.utils.transaction import transactional
from .get_page import get_page_by_id


def delete_page(
    *,
    page_id: str,
    actor_id: Optional[str],
) -> None:
    """
    Hard-delete a page. Sections live inside the page row, so nothing
    else needs removing.
    """
    page = get_page_by_id(page_id)

    with transactional():
        db.session.delete(page)

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            actor_id=actor_id,
            payload={"slug": page.slug},
        )
