import copy
from datetime import datetime, timezone

from storefront.utils.order import compact_order
from storefront.utils.versioning import build_version, next_version_name
from .exceptions import VersionNotFound

PRE_PUBLISH_PREFIX = "Pre-publish"


def pre_publish_name(now=None):
    now = now or datetime.now(timezone.utc)
    return f"{PRE_PUBLISH_PREFIX} {now.isoformat(timespec='seconds')}"


def save_version(document, name=None, now=None):
    """Prepend a named checkpoint of the live design. Returns (document, version)."""
    name = (name or "").strip() or next_version_name(document)
    version = build_version(document, name, now=now)

    updated = copy.deepcopy(document)
    updated["version_history"] = [version] + list(updated.get("version_history") or [])
    return updated, copy.deepcopy(version)


def find_version(document, version_id):
    for version in document.get("version_history") or []:
        if version["id"] == version_id:
            return version
    raise VersionNotFound(f"Version {version_id} not found")


def restore_version(document, version_id):
    """Replace sections, global styles and theme preset wholesale."""
    version = find_version(document, version_id)

    updated = copy.deepcopy(document)
    updated["sections"] = compact_order(copy.deepcopy(version["sections"]))
    updated["global_styles"] = copy.deepcopy(version["globalStyles"])
    updated["theme_preset"] = version["themePreset"]
    return updated
