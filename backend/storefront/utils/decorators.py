from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity


def seller_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        seller = g.get("current_seller")
        if not seller:
            return jsonify({"error": "Seller context missing"}), 400

        if get_jwt_identity() != seller.id:
            return jsonify({"error": "Seller mismatch"}), 403

        return fn(*args, **kwargs)
    return wrapper


def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if get_jwt().get("role") not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
