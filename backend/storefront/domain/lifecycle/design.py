from typing import Set

DRAFT = "draft"
PUBLISHED = "published"

# Explicit allowed state transitions
ALLOWED_DESIGN_TRANSITIONS: dict[str, Set[str]] = {
    DRAFT: {PUBLISHED},
    PUBLISHED: {PUBLISHED, DRAFT},  # re-publish pushes the latest edits live
}


class IllegalTransition(ValueError):
    pass


def design_status(document) -> str:
    return PUBLISHED if document.get("is_active") else DRAFT


def assert_design_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards store design lifecycle transitions.
    Single source of truth for is_active changes.
    """
    allowed = ALLOWED_DESIGN_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise IllegalTransition(
            f"Illegal design transition: {from_status} → {to_status}"
        )
