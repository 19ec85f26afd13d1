import copy
from datetime import datetime, timezone

from storefront.domain.catalog import DEFAULT_THEME_PRESET, default_global_styles
from storefront.utils.ids import new_version_id


def new_document(seller_id, *, theme_preset=DEFAULT_THEME_PRESET, global_styles=None, sections=None):
    return {
        "id": None,
        "seller_id": seller_id,
        "is_active": False,
        "theme_preset": theme_preset,
        "global_styles": copy.deepcopy(global_styles) if global_styles else default_global_styles(),
        "sections": copy.deepcopy(sections) if sections else [],
        "version_history": [],
    }


def snapshot_design(document):
    """History entry: the editable part of a design, deep-copied."""
    return {
        "sections": copy.deepcopy(document["sections"]),
        "global_styles": copy.deepcopy(document["global_styles"]),
        "theme_preset": document["theme_preset"],
    }


def apply_snapshot(document, snapshot):
    restored = copy.deepcopy(document)
    restored["sections"] = copy.deepcopy(snapshot["sections"])
    restored["global_styles"] = copy.deepcopy(snapshot["global_styles"])
    restored["theme_preset"] = snapshot.get("theme_preset", document["theme_preset"])
    return restored


def build_version(document, name, now=None):
    """Named, immutable checkpoint in the persisted camelCase shape."""
    now = now or datetime.now(timezone.utc)
    return {
        "id": new_version_id(),
        "name": name,
        "timestamp": now.isoformat(),
        "sections": copy.deepcopy(document["sections"]),
        "globalStyles": copy.deepcopy(document["global_styles"]),
        "themePreset": document["theme_preset"],
    }


def next_version_name(document):
    return f"Version {len(document.get('version_history') or []) + 1}"


def to_record(document):
    """Persisted shape: sections ascending by order, versions newest first."""
    record = copy.deepcopy(document)
    record["sections"] = sorted(record["sections"], key=lambda s: s["order"])
    return record
