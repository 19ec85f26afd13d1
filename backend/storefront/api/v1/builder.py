from flask import Blueprint, current_app, g, request, jsonify
from flask_jwt_extended import jwt_required
from storefront.builder.exceptions import InvalidPatch
from storefront.domain.catalog import catalog_entries
from storefront.domain.presets import list_presets
from storefront.domain.templates import list_templates
from storefront.middleware.seller_middleware import seller_middleware
from storefront.normalizers.design import normalize_session, normalize_version_summary
from storefront.utils.decorators import seller_required

builder_bp = Blueprint("builder", __name__)
seller_middleware(builder_bp)


def _registry():
    return current_app.extensions["builder_sessions"]


def _session():
    return _registry().open(g.current_seller.id)


def _body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidPatch("Request body must be a JSON object")
    return data


def _state(session, status=200, **extra):
    payload = normalize_session(session)
    payload.update(extra)
    return jsonify(payload), status


# ------------------------
# Session
# ------------------------

@builder_bp.route("/design", methods=["GET"])
@jwt_required()
@seller_required
def get_design():
    return _state(_session())


@builder_bp.route("/session", methods=["DELETE"])
@jwt_required()
@seller_required
def close_session():
    closed = _registry().close(g.current_seller.id)
    return jsonify({"closed": closed}), 200


@builder_bp.route("/catalog", methods=["GET"])
@jwt_required()
@seller_required
def get_catalog():
    return jsonify({
        "sections": catalog_entries(),
        "templates": list_templates(),
        "presets": list_presets(),
    }), 200


# ------------------------
# Sections
# ------------------------

@builder_bp.route("/sections", methods=["POST"])
@jwt_required()
@seller_required
def add_section():
    data = _body()
    if not data.get("type"):
        return jsonify({"error": "Section type is required"}), 400

    session = _session()
    section_id = session.add_section(data["type"])
    return _state(session, 201, section_id=section_id)


@builder_bp.route("/sections/from-template", methods=["POST"])
@jwt_required()
@seller_required
def add_section_from_template():
    data = _body()
    if not data.get("template_id"):
        return jsonify({"error": "template_id is required"}), 400

    session = _session()
    section_id = session.add_from_template(data["template_id"])
    return _state(session, 201, section_id=section_id)


@builder_bp.route("/sections/<section_id>/duplicate", methods=["POST"])
@jwt_required()
@seller_required
def duplicate_section(section_id):
    session = _session()
    clone_id = session.duplicate_section(section_id)
    return _state(session, 201, section_id=clone_id)


@builder_bp.route("/sections/<section_id>", methods=["DELETE"])
@jwt_required()
@seller_required
def remove_section(section_id):
    session = _session()
    session.remove_section(section_id)
    return _state(session)


@builder_bp.route("/sections/<section_id>/visibility", methods=["POST"])
@jwt_required()
@seller_required
def toggle_visibility(section_id):
    session = _session()
    session.toggle_visibility(section_id)
    return _state(session)


@builder_bp.route("/sections/<section_id>/move", methods=["POST"])
@jwt_required()
@seller_required
def move_section(section_id):
    session = _session()
    moved = session.move_section(section_id, _body().get("direction"))
    return _state(session, moved=moved)


@builder_bp.route("/sections/<section_id>/position", methods=["POST"])
@jwt_required()
@seller_required
def move_section_to(section_id):
    session = _session()
    moved = session.move_section_to(section_id, _body().get("index"))
    return _state(session, moved=moved)


@builder_bp.route("/sections/<section_id>/settings", methods=["PATCH"])
@jwt_required()
@seller_required
def update_section_settings(section_id):
    session = _session()
    session.update_section_settings(section_id, request.get_json(silent=True))
    return _state(session)


@builder_bp.route("/sections/<section_id>/styles", methods=["PATCH"])
@jwt_required()
@seller_required
def update_section_styles(section_id):
    session = _session()
    session.update_section_styles(section_id, request.get_json(silent=True))
    return _state(session)


@builder_bp.route("/sections/<section_id>/copy", methods=["POST"])
@jwt_required()
@seller_required
def copy_section_settings(section_id):
    session = _session()
    session.copy_settings(section_id)
    return _state(session)


@builder_bp.route("/sections/<section_id>/paste", methods=["POST"])
@jwt_required()
@seller_required
def paste_section_settings(section_id):
    session = _session()
    session.paste_settings(section_id)
    return _state(session)


@builder_bp.route("/sections/<section_id>/select", methods=["POST"])
@jwt_required()
@seller_required
def select_section(section_id):
    session = _session()
    session.select_section(section_id)
    return _state(session)


# ------------------------
# Design-wide edits
# ------------------------

@builder_bp.route("/global-styles", methods=["PATCH"])
@jwt_required()
@seller_required
def update_global_styles():
    session = _session()
    session.update_global_styles(request.get_json(silent=True))
    return _state(session)


@builder_bp.route("/preset", methods=["POST"])
@jwt_required()
@seller_required
def apply_preset():
    data = _body()
    if not data.get("preset_id"):
        return jsonify({"error": "preset_id is required"}), 400

    session = _session()
    session.apply_preset(data["preset_id"])
    return _state(session)


@builder_bp.route("/undo", methods=["POST"])
@jwt_required()
@seller_required
def undo():
    session = _session()
    changed = session.undo()
    return _state(session, changed=changed)


@builder_bp.route("/redo", methods=["POST"])
@jwt_required()
@seller_required
def redo():
    session = _session()
    changed = session.redo()
    return _state(session, changed=changed)


# ------------------------
# Versions
# ------------------------

@builder_bp.route("/versions", methods=["GET"])
@jwt_required()
@seller_required
def list_versions():
    document = _session().document
    return jsonify({
        "versions": [normalize_version_summary(v) for v in document["version_history"]]
    }), 200


@builder_bp.route("/versions", methods=["POST"])
@jwt_required()
@seller_required
def save_version():
    name = _body().get("name")
    if name is not None and not isinstance(name, str):
        return jsonify({"error": "Version name must be a string"}), 400

    session = _session()
    version = session.save_version(name)
    return _state(session, 201, version=normalize_version_summary(version))


@builder_bp.route("/versions/<version_id>/restore", methods=["POST"])
@jwt_required()
@seller_required
def restore_version(version_id):
    session = _session()
    session.restore_version(version_id)
    return _state(session)


# ------------------------
# Persistence & lifecycle
# ------------------------

@builder_bp.route("/save", methods=["POST"])
@jwt_required()
@seller_required
def save_design():
    session = _session()
    saved = session.save()
    return _state(session, saved=saved)


@builder_bp.route("/publish", methods=["POST"])
@jwt_required()
@seller_required
def publish_design():
    session = _session()
    published = session.publish()
    return _state(session, published=published)


@builder_bp.route("/unpublish", methods=["POST"])
@jwt_required()
@seller_required
def unpublish_design():
    session = _session()
    session.unpublish()
    return _state(session)


# ------------------------
# Import / export
# ------------------------

@builder_bp.route("/export", methods=["GET"])
@jwt_required()
@seller_required
def export_design():
    return jsonify(_session().export_design()), 200


@builder_bp.route("/import", methods=["POST"])
@jwt_required()
@seller_required
def import_design():
    session = _session()
    session.import_design(request.get_json(silent=True))
    return _state(session)
