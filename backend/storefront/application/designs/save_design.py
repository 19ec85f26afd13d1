import copy
from typing import Any, Dict
from storefront.extensions import db
from storefront.models.store_design import StoreDesign
from storefront.domain.invariants import assert_design
from storefront.domain.lifecycle.design import DRAFT, PUBLISHED, design_status
from storefront.utils.audit import log_action
from storefront.utils.transaction import transactional


def _audit_action(from_status: str, to_status: str) -> str:
    if from_status == DRAFT and to_status == PUBLISHED:
        return "design.publish"
    if from_status == PUBLISHED and to_status == DRAFT:
        return "design.unpublish"
    return "design.save"


def save_design(*, document: Dict[str, Any]) -> Dict[str, str]:
    """
    Upsert the full store design document of a seller.

    Responsibilities:
    - insert when no row exists yet, update otherwise
    - invariant enforcement
    - audit logging

    Concurrent editors are last-write-wins: a document whose id is unknown
    falls back to the seller's existing row instead of failing.
    """
    seller_id = document.get("seller_id")
    if not seller_id:
        raise ValueError("seller_id is required")

    assert_design(document)

    design = None
    if document.get("id"):
        design = StoreDesign.query.filter_by(id=document["id"], seller_id=seller_id).first()
    if design is None:
        design = StoreDesign.query.filter_by(seller_id=seller_id).first()

    from_status = design_status(design.to_document()) if design else DRAFT
    to_status = design_status(document)

    with transactional():
        if design is None:
            design = StoreDesign()
            design.seller_id = seller_id
            db.session.add(design)

        design.is_active = bool(document.get("is_active"))
        design.theme_preset = document.get("theme_preset")
        design.global_styles = copy.deepcopy(document["global_styles"])
        design.sections = sorted(copy.deepcopy(document["sections"]), key=lambda s: s["order"])
        design.version_history = copy.deepcopy(document.get("version_history") or [])

        db.session.flush()  # ensures design.id is available

        log_action(
            seller_id=seller_id,
            actor_id=seller_id,
            action=_audit_action(from_status, to_status),
            entity_type="store_design",
            entity_id=design.id,
            payload={
                "sections": len(design.sections),
                "versions": len(design.version_history),
                "is_active": design.is_active,
            },
        )

    return {"id": design.id}
