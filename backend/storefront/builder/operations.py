"""
Pure section operations.

Every function takes a design document and returns a new one; the input is
never mutated. Operations that insert, remove or reorder sections leave
`order` dense (0..N-1). Operations that turn out to change nothing return
the input document itself so callers can skip recording history.
"""
import copy
from typing import Any, Dict, Tuple

from storefront.domain.catalog import (
    SECTION_LABELS,
    default_settings,
    default_styles,
    is_section_type,
)
from storefront.domain.invariants import InvariantViolation, assert_section
from storefront.domain.presets import get_preset, preset_sections
from storefront.domain.templates import get_template, template_section
from storefront.utils.ids import new_section_id
from storefront.utils.order import compact_order
from .exceptions import (
    InvalidDesignPayload,
    InvalidDirection,
    InvalidPatch,
    SectionNotFound,
    UnknownPreset,
    UnknownSectionType,
    UnknownTemplate,
)

Document = Dict[str, Any]

MOVE_DIRECTIONS = ("up", "down")


def _find_index(sections, section_id):
    for index, section in enumerate(sections):
        if section["id"] == section_id:
            return index
    raise SectionNotFound(f"Section {section_id} not found")


def find_section(document: Document, section_id: str) -> Dict[str, Any]:
    sections = document["sections"]
    return sections[_find_index(sections, section_id)]


def section_label(section_type: str) -> str:
    info = SECTION_LABELS.get(section_type)
    return info["label"] if info else section_type


def build_section(section_type, *, settings, styles=None, visible=True, order=0):
    return {
        "id": new_section_id(),
        "type": section_type,
        "order": order,
        "visible": visible,
        "settings": settings,
        "styles": styles,
    }


def _append(document, section):
    updated = copy.deepcopy(document)
    sections = compact_order(updated["sections"])
    section["order"] = len(sections)
    sections.append(section)
    return updated


def add_section(document: Document, section_type: str) -> Tuple[Document, str]:
    if not is_section_type(section_type):
        raise UnknownSectionType(f"Unknown section type: {section_type!r}")

    section = build_section(
        section_type,
        settings=default_settings(section_type),
        styles=default_styles(),
    )
    return _append(document, section), section["id"]


def add_from_template(document: Document, template_id: str) -> Tuple[Document, str]:
    template = get_template(template_id)
    if template is None:
        raise UnknownTemplate(f"Unknown section template: {template_id!r}")

    payload = template_section(template)
    section = build_section(
        payload["type"],
        settings=payload["settings"],
        styles=payload.get("styles"),
        visible=payload.get("visible", True),
    )
    return _append(document, section), section["id"]


def duplicate_section(document: Document, section_id: str) -> Tuple[Document, str]:
    updated = copy.deepcopy(document)
    sections = compact_order(updated["sections"])
    source = sections[_find_index(sections, section_id)]

    clone = copy.deepcopy(source)
    clone["id"] = new_section_id()
    clone["order"] = source["order"] + 1

    for section in sections:
        if section["order"] > source["order"]:
            section["order"] += 1

    sections.append(clone)
    compact_order(sections)
    return updated, clone["id"]


def remove_section(document: Document, section_id: str) -> Document:
    _find_index(document["sections"], section_id)

    updated = copy.deepcopy(document)
    updated["sections"] = [s for s in updated["sections"] if s["id"] != section_id]
    compact_order(updated["sections"])
    return updated


def toggle_visibility(document: Document, section_id: str) -> Document:
    updated = copy.deepcopy(document)
    section = find_section(updated, section_id)
    section["visible"] = not section["visible"]
    return updated


def move_section(document: Document, section_id: str, direction: str) -> Document:
    """Swap with the neighbour above/below. No-op at either boundary."""
    if direction not in MOVE_DIRECTIONS:
        raise InvalidDirection(f"Direction must be one of {', '.join(MOVE_DIRECTIONS)}")

    updated = copy.deepcopy(document)
    sections = compact_order(updated["sections"])
    index = _find_index(sections, section_id)
    target = index - 1 if direction == "up" else index + 1

    if target < 0 or target >= len(sections):
        return document

    sections[index]["order"], sections[target]["order"] = (
        sections[target]["order"],
        sections[index]["order"],
    )
    compact_order(sections)
    return updated


def move_section_to(document: Document, section_id: str, index: int) -> Document:
    """Drag-and-drop reorder: take the section out and reinsert it at `index`."""
    if not isinstance(index, int) or isinstance(index, bool):
        raise InvalidPatch("Target index must be an integer")

    updated = copy.deepcopy(document)
    sections = compact_order(updated["sections"])
    current = _find_index(sections, section_id)
    target = max(0, min(index, len(sections) - 1))

    if target == current:
        return document

    moved = sections.pop(current)
    sections.insert(target, moved)
    for position, section in enumerate(sections):
        section["order"] = position
    return updated


def _require_patch(patch):
    if not isinstance(patch, dict):
        raise InvalidPatch("Patch must be an object")


def update_section_settings(document: Document, section_id: str, patch: Dict[str, Any]) -> Document:
    _require_patch(patch)
    updated = copy.deepcopy(document)
    section = find_section(updated, section_id)
    section["settings"] = {**section["settings"], **copy.deepcopy(patch)}
    return updated


def update_section_styles(document: Document, section_id: str, patch: Dict[str, Any]) -> Document:
    _require_patch(patch)
    updated = copy.deepcopy(document)
    section = find_section(updated, section_id)
    section["styles"] = {**(section.get("styles") or default_styles()), **copy.deepcopy(patch)}
    return updated


def update_global_styles(document: Document, patch: Dict[str, Any]) -> Document:
    _require_patch(patch)
    updated = copy.deepcopy(document)
    updated["global_styles"] = {**updated["global_styles"], **copy.deepcopy(patch)}
    return updated


def apply_preset(document: Document, preset_id: str) -> Document:
    preset = get_preset(preset_id)
    if preset is None:
        raise UnknownPreset(f"Unknown theme preset: {preset_id!r}")

    updated = copy.deepcopy(document)
    updated["global_styles"] = copy.deepcopy(preset["globalStyles"])
    updated["sections"] = [
        build_section(
            entry["type"],
            settings=entry["settings"],
            styles=entry.get("styles"),
            visible=entry.get("visible", True),
            order=position,
        )
        for position, entry in enumerate(preset_sections(preset))
    ]
    updated["theme_preset"] = preset["id"]
    return updated


def export_design(document: Document) -> Dict[str, Any]:
    return {
        "globalStyles": copy.deepcopy(document["global_styles"]),
        "sections": sorted(copy.deepcopy(document["sections"]), key=lambda s: s["order"]),
        "themePreset": document["theme_preset"],
    }


def _import_sections(entries):
    if not isinstance(entries, list):
        raise InvalidDesignPayload("sections must be a list")

    sections, seen = [], set()
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise InvalidDesignPayload(f"Section #{position} must be an object")

        section_type = entry.get("type")
        if not is_section_type(section_type):
            raise InvalidDesignPayload(f"Section #{position} has unknown type {section_type!r}")

        section_id = entry.get("id")
        if not isinstance(section_id, str) or not section_id or section_id in seen:
            section_id = new_section_id()
        seen.add(section_id)

        order = entry.get("order")
        if not isinstance(order, int) or isinstance(order, bool):
            order = position

        section = {
            "id": section_id,
            "type": section_type,
            "order": order,
            "visible": bool(entry.get("visible", True)),
            "settings": copy.deepcopy(entry["settings"]) if "settings" in entry else default_settings(section_type),
            "styles": copy.deepcopy(entry.get("styles")),
        }
        try:
            assert_section(section)
        except InvariantViolation as exc:
            raise InvalidDesignPayload(str(exc)) from exc
        sections.append(section)

    return compact_order(sections)


def import_design(document: Document, payload: Any) -> Document:
    """Load an exported design: any of sections/globalStyles/themePreset present replaces the live value."""
    if not isinstance(payload, dict):
        raise InvalidDesignPayload("Invalid design file")

    known = {"sections", "globalStyles", "themePreset"}
    if not known & payload.keys():
        raise InvalidDesignPayload("Design file contains no sections, globalStyles or themePreset")

    updated = copy.deepcopy(document)

    if "sections" in payload:
        updated["sections"] = _import_sections(payload["sections"])

    if "globalStyles" in payload:
        if not isinstance(payload["globalStyles"], dict):
            raise InvalidDesignPayload("globalStyles must be an object")
        updated["global_styles"] = copy.deepcopy(payload["globalStyles"])

    if "themePreset" in payload:
        if not isinstance(payload["themePreset"], str) or not payload["themePreset"]:
            raise InvalidDesignPayload("themePreset must be a non-empty string")
        updated["theme_preset"] = payload["themePreset"]

    return updated
