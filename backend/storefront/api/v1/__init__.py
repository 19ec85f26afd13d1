from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import stores
from .builder import builder_bp
from .audit import audit_bp

v1_bp.register_blueprint(builder_bp, url_prefix="/builder")
v1_bp.register_blueprint(audit_bp, url_prefix="/audit")
