from typing import Optional
from storefront.extensions import db
from storefront.models.audit_log import AuditLog


def log_action(
    *,
    seller_id: str,
    actor_id: Optional[str],
    action: str,
    entity_type: str,
    entity_id: str,
    payload: dict | None = None
):
    """Stage an audit row in the current session; committed with the caller's transaction."""
    log = AuditLog()

    log.seller_id = seller_id
    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
    return log
