from datetime import datetime, timezone

import pytest

from storefront.builder import operations, versions
from storefront.builder.exceptions import VersionNotFound
from storefront.utils.versioning import new_document


def test_save_version_prepends_camel_case_snapshot():
    document, _ = operations.add_section(new_document("seller-1"), "hero")
    document, first = versions.save_version(document, "Launch")
    document, second = versions.save_version(document)

    assert [v["name"] for v in document["version_history"]] == ["Version 2", "Launch"]
    assert set(first) == {"id", "name", "timestamp", "sections", "globalStyles", "themePreset"}
    assert first["id"].startswith("ver_")
    assert first["sections"] == document["sections"]
    assert second["themePreset"] == "minimal-white"


def test_version_snapshot_is_isolated_from_later_edits():
    document, section_id = operations.add_section(new_document("seller-1"), "hero")
    document, version = versions.save_version(document, "Before")
    document = operations.update_section_settings(document, section_id, {"heading": "After"})

    stored = versions.find_version(document, version["id"])
    assert stored["sections"][0]["settings"]["heading"] == "Welcome to Our Store"


def test_restore_version_replaces_sections_styles_and_preset():
    document, _ = operations.add_section(new_document("seller-1"), "hero")
    document, version = versions.save_version(document)
    document = operations.apply_preset(document, "neon-glow")

    restored = versions.restore_version(document, version["id"])

    assert restored["sections"] == version["sections"]
    assert restored["global_styles"] == version["globalStyles"]
    assert restored["theme_preset"] == "minimal-white"
    assert restored["version_history"] == document["version_history"]


def test_restore_unknown_version_is_rejected():
    with pytest.raises(VersionNotFound):
        versions.restore_version(new_document("seller-1"), "ver_missing")


def test_pre_publish_name_uses_iso_timestamp():
    now = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    assert versions.pre_publish_name(now) == "Pre-publish 2024-05-01T12:30:00+00:00"


def test_restore_version_compacts_stored_order_gaps():
    document = new_document("seller-1")
    document["version_history"] = [{
        "id": "ver_legacy0001",
        "name": "Imported",
        "timestamp": "2024-01-01T00:00:00+00:00",
        "sections": [
            {"id": "sec_bbbbbbb", "type": "faq", "order": 4, "visible": True, "settings": {}, "styles": None},
            {"id": "sec_aaaaaaa", "type": "hero", "order": 1, "visible": True, "settings": {}, "styles": None},
        ],
        "globalStyles": {"primaryColor": "#000000"},
        "themePreset": "minimal-white",
    }]

    restored = versions.restore_version(document, "ver_legacy0001")

    assert [(s["id"], s["order"]) for s in restored["sections"]] == [("sec_aaaaaaa", 0), ("sec_bbbbbbb", 1)]
