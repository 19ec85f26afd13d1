from flask import jsonify
from storefront.application.designs.get_published_design import get_published_design
from storefront.normalizers.design import normalize_design
from . import v1_bp


@v1_bp.route("/stores/<seller_id>/design", methods=["GET"])
def get_store_design(seller_id):
    """Public storefront: published designs only, hidden sections removed."""
    document = get_published_design(seller_id=seller_id)
    if document is None:
        return jsonify({"error": "Store design not found"}), 404

    return jsonify(normalize_design(document)), 200
