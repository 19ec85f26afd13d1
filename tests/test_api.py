from storefront import create_app
from storefront.builder.exceptions import PersistenceError
from storefront.extensions import db
from storefront.gateway import InMemoryDesignGateway
from storefront.models.audit_log import AuditLog
from storefront.models.seller import Seller
from storefront.models.store_design import StoreDesign
from conftest import auth_headers


def add(client, headers, section_type):
    response = client.post("/api/v1/builder/sections", json={"type": section_type}, headers=headers)
    assert response.status_code == 201
    return response.get_json()["section_id"]


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_openapi_document_is_served(client):
    response = client.get("/openapi/builder.yaml")
    assert response.status_code == 200
    assert b"Storefront Builder API" in response.data


def test_builder_requires_seller_header(client, headers):
    headers = {"Authorization": headers["Authorization"]}
    response = client.get("/api/v1/builder/design", headers=headers)
    assert response.status_code == 400


def test_builder_rejects_unknown_seller(client, headers):
    headers = dict(headers, **{"X-Seller-ID": "no-such-seller"})
    response = client.get("/api/v1/builder/design", headers=headers)
    assert response.status_code == 404


def test_builder_requires_jwt(client, seller_id):
    response = client.get("/api/v1/builder/design", headers={"X-Seller-ID": seller_id})
    assert response.status_code == 401


def test_builder_rejects_token_for_other_seller(client, seller_id, other_seller_id):
    headers = auth_headers(other_seller_id)
    headers["X-Seller-ID"] = seller_id
    response = client.get("/api/v1/builder/design", headers=headers)
    assert response.status_code == 403


def test_open_design_returns_empty_state(client, headers, seller_id):
    body = client.get("/api/v1/builder/design", headers=headers).get_json()

    assert body["design"]["seller_id"] == seller_id
    assert body["design"]["sections"] == []
    assert body["design"]["is_active"] is False
    assert body["history"] == {"index": 0, "size": 1, "can_undo": False, "can_redo": False}
    assert body["selected_section_id"] is None


def test_add_section_and_undo_redo(client, headers):
    section_id = add(client, headers, "hero")

    state = client.get("/api/v1/builder/design", headers=headers).get_json()
    assert state["selected_section_id"] == section_id
    assert state["design"]["sections"][0]["order"] == 0
    assert state["design"]["sections"][0]["visible"] is True

    undone = client.post("/api/v1/builder/undo", headers=headers).get_json()
    assert undone["changed"] is True
    assert undone["design"]["sections"] == []

    redone = client.post("/api/v1/builder/redo", headers=headers).get_json()
    assert [s["id"] for s in redone["design"]["sections"]] == [section_id]
    assert redone["history"]["can_redo"] is False


def test_unknown_section_type_is_a_validation_error(client, headers):
    response = client.post("/api/v1/builder/sections", json={"type": "hologram"}, headers=headers)

    assert response.status_code == 400
    assert response.get_json()["error"] == "UnknownSectionType"


def test_missing_section_is_not_found(client, headers):
    response = client.delete("/api/v1/builder/sections/sec_missing", headers=headers)

    assert response.status_code == 404
    assert response.get_json()["error"] == "SectionNotFound"


def test_move_and_reorder(client, headers):
    first = add(client, headers, "hero")
    second = add(client, headers, "faq")
    third = add(client, headers, "cta")

    moved = client.post(f"/api/v1/builder/sections/{second}/move", json={"direction": "up"}, headers=headers)
    assert moved.get_json()["moved"] is True
    assert [s["id"] for s in moved.get_json()["design"]["sections"]] == [second, first, third]

    noop = client.post(f"/api/v1/builder/sections/{second}/move", json={"direction": "up"}, headers=headers)
    assert noop.get_json()["moved"] is False

    bad = client.post(f"/api/v1/builder/sections/{second}/move", json={"direction": "sideways"}, headers=headers)
    assert bad.status_code == 400

    dragged = client.post(f"/api/v1/builder/sections/{third}/position", json={"index": 0}, headers=headers)
    assert [s["id"] for s in dragged.get_json()["design"]["sections"]] == [third, second, first]


def test_settings_styles_and_clipboard(client, headers):
    source = add(client, headers, "hero")
    target = add(client, headers, "hero")
    other = add(client, headers, "faq")

    client.patch(f"/api/v1/builder/sections/{source}/settings", json={"heading": "Sale"}, headers=headers)
    client.patch(f"/api/v1/builder/sections/{source}/styles", json={"customClass": "promo"}, headers=headers)

    copied = client.post(f"/api/v1/builder/sections/{source}/copy", headers=headers).get_json()
    assert copied["clipboard_type"] == "hero"

    pasted = client.post(f"/api/v1/builder/sections/{target}/paste", headers=headers).get_json()
    section = next(s for s in pasted["design"]["sections"] if s["id"] == target)
    assert section["settings"]["heading"] == "Sale"
    assert section["styles"]["customClass"] == "promo"

    mismatch = client.post(f"/api/v1/builder/sections/{other}/paste", headers=headers)
    assert mismatch.status_code == 400
    assert mismatch.get_json()["message"] == "Can only paste to a Hero Banner section"


def test_invalid_patch_body_is_rejected(client, headers):
    section_id = add(client, headers, "hero")
    response = client.patch(f"/api/v1/builder/sections/{section_id}/settings", json=["x"], headers=headers)
    assert response.status_code == 400


def test_template_preset_and_global_styles(client, headers):
    created = client.post(
        "/api/v1/builder/sections/from-template",
        json={"template_id": "tpl_pricing_comparison"},
        headers=headers,
    )
    assert created.status_code == 201

    missing = client.post("/api/v1/builder/sections/from-template", json={"template_id": "tpl_nope"}, headers=headers)
    assert missing.status_code == 404

    preset = client.post("/api/v1/builder/preset", json={"preset_id": "nature-organic"}, headers=headers).get_json()
    assert preset["design"]["theme_preset"] == "nature-organic"
    assert preset["selected_section_id"] is None

    styled = client.patch("/api/v1/builder/global-styles", json={"primaryColor": "#abcdef"}, headers=headers)
    assert styled.get_json()["design"]["global_styles"]["primaryColor"] == "#abcdef"


def test_catalog_lists_types_templates_and_presets(client, headers):
    body = client.get("/api/v1/builder/catalog", headers=headers).get_json()

    types = [entry["type"] for group in body["sections"].values() for entry in group]
    assert len(types) == 35
    assert len(body["templates"]) == 12
    assert len(body["presets"]) == 10


def test_versions_restore_and_undo(client, headers):
    add(client, headers, "hero")
    saved = client.post("/api/v1/builder/versions", json={"name": "Baseline"}, headers=headers)
    assert saved.status_code == 201
    version_id = saved.get_json()["version"]["id"]

    add(client, headers, "faq")
    restored = client.post(f"/api/v1/builder/versions/{version_id}/restore", headers=headers).get_json()
    assert [s["type"] for s in restored["design"]["sections"]] == ["hero"]

    undone = client.post("/api/v1/builder/undo", headers=headers).get_json()
    assert [s["type"] for s in undone["design"]["sections"]] == ["hero", "faq"]

    listed = client.get("/api/v1/builder/versions", headers=headers).get_json()
    assert [v["name"] for v in listed["versions"]] == ["Baseline"]

    missing = client.post("/api/v1/builder/versions/ver_missing/restore", headers=headers)
    assert missing.status_code == 404


def test_manual_save_persists_and_audits(client, headers, seller_id):
    add(client, headers, "hero")

    body = client.post("/api/v1/builder/save", headers=headers).get_json()

    assert body["saved"] is True
    assert body["dirty"] is False
    assert body["notifications"] == [{"level": "success", "message": "Saved"}]
    design = StoreDesign.query.filter_by(seller_id=seller_id).one()
    assert body["design"]["id"] == design.id
    assert AuditLog.query.filter_by(action="design.save", seller_id=seller_id).count() == 1


def test_publish_makes_design_public_without_hidden_sections(client, headers, seller_id):
    hero = add(client, headers, "hero")
    faq = add(client, headers, "faq")
    client.post(f"/api/v1/builder/sections/{faq}/visibility", headers=headers)

    assert client.get(f"/api/v1/stores/{seller_id}/design").status_code == 404

    published = client.post("/api/v1/builder/publish", headers=headers).get_json()
    assert published["published"] is True
    assert published["design"]["is_active"] is True
    assert published["design"]["versions"][0]["name"].startswith("Pre-publish ")
    assert [n["message"] for n in published["notifications"]] == ["Saved", "Store design published!"]

    public = client.get(f"/api/v1/stores/{seller_id}/design")
    assert public.status_code == 200
    body = public.get_json()
    assert [s["id"] for s in body["sections"]] == [hero]
    assert "versions" not in body

    client.post("/api/v1/builder/unpublish", headers=headers)
    client.post("/api/v1/builder/save", headers=headers)
    assert client.get(f"/api/v1/stores/{seller_id}/design").status_code == 404


def test_publish_empty_design(client, headers, seller_id):
    body = client.post("/api/v1/builder/publish", headers=headers).get_json()
    assert body["published"] is True

    public = client.get(f"/api/v1/stores/{seller_id}/design")
    assert public.status_code == 200
    assert public.get_json()["sections"] == []


def test_unpublish_draft_is_rejected(client, headers):
    response = client.post("/api/v1/builder/unpublish", headers=headers)
    assert response.status_code == 400
    assert response.get_json()["error"] == "IllegalTransition"


def test_export_and_import(client, headers):
    add(client, headers, "hero")
    exported = client.get("/api/v1/builder/export", headers=headers).get_json()
    assert set(exported) == {"globalStyles", "sections", "themePreset"}

    exported["sections"].append({"type": "newsletter"})
    imported = client.post("/api/v1/builder/import", json=exported, headers=headers).get_json()
    assert [s["type"] for s in imported["design"]["sections"]] == ["hero", "newsletter"]

    bad = client.post("/api/v1/builder/import", json={"sections": [{"type": "nope"}]}, headers=headers)
    assert bad.status_code == 400
    assert bad.get_json()["error"] == "InvalidDesignPayload"


def test_close_session_discards_unsaved_edits(client, headers, seller_id):
    add(client, headers, "hero")

    closed = client.delete("/api/v1/builder/session", headers=headers).get_json()
    assert closed["closed"] is True

    reopened = client.get("/api/v1/builder/design", headers=headers).get_json()
    assert reopened["design"]["sections"] == []


def test_audit_requires_admin_role(client, headers, admin_headers):
    add(client, headers, "hero")
    client.post("/api/v1/builder/save", headers=headers)

    assert client.get("/api/v1/audit", headers=headers).status_code == 403

    body = client.get("/api/v1/audit?limit=1", headers=admin_headers).get_json()
    assert [item["action"] for item in body["items"]] == ["design.save"]
    assert body["pagination"] == {"has_more": False, "next_cursor": None}

    bad = client.get("/api/v1/audit?cursor=garbage", headers=admin_headers)
    assert bad.status_code == 400


class UnavailableGateway(InMemoryDesignGateway):
    def load(self, seller_id):
        raise PersistenceError("Failed to load store design")


def test_load_failure_is_service_unavailable():
    app = create_app("testing", gateway=UnavailableGateway())
    with app.app_context():
        db.create_all()
        seller = Seller()
        seller.name = "Acme Goods"
        seller.slug = "acme-goods"
        db.session.add(seller)
        db.session.commit()

        response = app.test_client().get("/api/v1/builder/design", headers=auth_headers(seller.id))

        assert response.status_code == 503
        assert response.get_json()["error"] == "PersistenceError"
        db.drop_all()


def test_admin_reads_audit_of_another_seller(client, headers, seller_id, other_seller_id):
    add(client, headers, "hero")
    client.post("/api/v1/builder/save", headers=headers)

    admin = auth_headers(other_seller_id, role="admin")
    admin["X-Seller-ID"] = seller_id
    body = client.get("/api/v1/audit", headers=admin).get_json()
    assert [item["seller_id"] for item in body["items"]] == [seller_id]

    seller = auth_headers(other_seller_id)
    seller["X-Seller-ID"] = seller_id
    assert client.get("/api/v1/audit", headers=seller).status_code == 403
