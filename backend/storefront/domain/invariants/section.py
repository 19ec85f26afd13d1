from storefront.domain.catalog import is_section_type
from .exceptions import InvariantViolation


def assert_section(section):
    if not isinstance(section, dict):
        raise InvariantViolation(f"Section must be an object, got {type(section).__name__}.")

    if not section.get("id") or not isinstance(section["id"], str):
        raise InvariantViolation("Section must have a string id.")

    if not is_section_type(section.get("type")):
        raise InvariantViolation(f"Unknown section type: {section.get('type')!r}")

    if not isinstance(section.get("visible"), bool):
        raise InvariantViolation(f"Section {section['id']} visibility must be a boolean.")

    if not isinstance(section.get("settings"), dict):
        raise InvariantViolation(f"Section {section['id']} settings must be an object.")

    styles = section.get("styles")
    if styles is not None and not isinstance(styles, dict):
        raise InvariantViolation(f"Section {section['id']} styles must be an object.")
