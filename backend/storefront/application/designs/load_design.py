from typing import Any, Dict, Optional
from storefront.models.store_design import StoreDesign


def load_design(*, seller_id: str) -> Optional[Dict[str, Any]]:
    """
    Fetch the single design document owned by a seller.

    Returns None when the seller has never saved a design.
    """
    design = StoreDesign.query.filter_by(seller_id=seller_id).first()
    return design.to_document() if design else None
