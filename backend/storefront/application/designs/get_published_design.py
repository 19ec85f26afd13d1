from typing import Any, Dict, Optional
from storefront.models.seller import Seller
from storefront.models.store_design import StoreDesign


def get_published_design(*, seller_id: str) -> Optional[Dict[str, Any]]:
    """
    Fetch the live storefront of an active seller.

    Drafts (is_active = False) and disabled sellers are treated as missing.
    """
    design = (
        StoreDesign.query
        .join(Seller, Seller.id == StoreDesign.seller_id)
        .filter(
            StoreDesign.seller_id == seller_id,
            StoreDesign.is_active.is_(True),
            Seller.is_active.is_(True),
        )
        .first()
    )
    return design.to_document() if design else None
