from storefront.extensions import db


class SellerMixin:
    seller_id = db.Column(
        db.String(36),
        db.ForeignKey("sellers.id"),
        nullable=False,
        index=True
    )
