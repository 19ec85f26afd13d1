from .seller import Seller
from .store_design import StoreDesign
from .audit_log import AuditLog

__all__ = ["Seller", "StoreDesign", "AuditLog"]
