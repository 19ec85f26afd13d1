from storefront.extensions import db
from .base import BaseModel
from .seller_mixin import SellerMixin


class StoreDesign(BaseModel, SellerMixin):
    __tablename__ = "store_designs"

    is_active = db.Column(db.Boolean, nullable=False, default=False)
    theme_preset = db.Column(db.String(100), nullable=True, default="minimal-white")
    global_styles = db.Column(db.JSON, nullable=True)
    sections = db.Column(db.JSON, nullable=True)   # ordered by `order` ascending
    version_history = db.Column(db.JSON, nullable=True)   # newest first

    seller = db.relationship("Seller", back_populates="design")

    __table_args__ = (
        db.UniqueConstraint("seller_id", name="uq_store_design_seller"),
    )

    def to_document(self):
        return {
            "id": self.id,
            "seller_id": self.seller_id,
            "is_active": bool(self.is_active),
            "theme_preset": self.theme_preset or "minimal-white",
            "global_styles": self.global_styles or {},
            "sections": self.sections or [],
            "version_history": self.version_history or [],
        }
