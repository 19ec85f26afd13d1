from flask import request, g, jsonify
from storefront.models.seller import Seller


def seller_middleware(bp):
    @bp.before_request
    def load_seller():
        seller_id = request.headers.get('X-Seller-ID')
        if not seller_id:
            return jsonify({"error": "X-Seller-ID header is missing"}), 400

        seller = Seller.query.filter_by(id=seller_id, is_active=True).first()
        if not seller:
            return jsonify({"error": "Invalid seller"}), 404

        # Attach seller to global context
        g.current_seller = seller
