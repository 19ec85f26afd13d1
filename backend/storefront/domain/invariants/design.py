from .section import assert_section
from .exceptions import InvariantViolation


def assert_section_order(sections):
    orders = [section.get("order") for section in sections]
    if not orders:
        return

    expected = list(range(len(orders)))
    if any(not isinstance(o, int) or isinstance(o, bool) for o in orders) or sorted(orders) != expected:
        raise InvariantViolation(
            f"Section orders are not consecutive starting from 0: {orders}"
        )


def assert_design(document):
    sections = document.get("sections") or []

    for section in sections:
        assert_section(section)

    ids = [section["id"] for section in sections]
    if len(ids) != len(set(ids)):
        raise InvariantViolation("Section ids must be unique within a design.")

    assert_section_order(sections)

    if not isinstance(document.get("global_styles"), dict):
        raise InvariantViolation("Global styles must be an object.")
