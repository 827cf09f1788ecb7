from flask import current_app
from typing import Optional


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    actor_id: Optional[str] = None,
    payload: dict | None = None
):
    current_app.logger.info(
        "%s %s=%s actor=%s payload=%s",
        action,
        entity_type,
        entity_id,
        actor_id or "-",
        payload or {},
    )
