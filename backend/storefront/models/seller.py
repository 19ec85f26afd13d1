from storefront.extensions import db
from .base import BaseModel


class Seller(BaseModel):
    __tablename__ = "sellers"

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    is_active = db.Column(db.Boolean, default=True)

    design = db.relationship(
        "StoreDesign",
        back_populates="seller",
        uselist=False,
        cascade="all, delete-orphan"
    )
