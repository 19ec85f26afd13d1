from flask import Blueprint, request, jsonify, g
from flask_jwt_extended import jwt_required
from storefront.middleware.seller_middleware import seller_middleware
from storefront.utils.decorators import roles_required
from storefront.utils.pagination import paginate_cursor, parse_limit
from storefront.models.audit_log import AuditLog
from storefront.normalizers.audit import normalize_audit_log
from storefront.normalizers.pagination import normalize_pagination

audit_bp = Blueprint("audit", __name__)
seller_middleware(audit_bp)


@audit_bp.route("", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_audit_logs():
    """Audit trail of the seller named by X-Seller-ID; admins may read any seller."""
    seller = g.current_seller

    query = AuditLog.query.filter(
        AuditLog.seller_id == seller.id
    )

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_cursor(
        query,
        model=AuditLog,
        limit=parse_limit(request.args.get("limit")),
        cursor=request.args.get("cursor"),
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
