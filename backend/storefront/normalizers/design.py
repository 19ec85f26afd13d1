from .section import normalize_section


def normalize_version_summary(version):
    return {
        "id": version["id"],
        "name": version["name"],
        "timestamp": version["timestamp"],
        "sections": len(version.get("sections") or []),
        "theme_preset": version.get("themePreset"),
    }


def normalize_design(document, admin=False):
    """
    Design document as served over the API.

    The public render drops hidden sections and the version history.
    """
    sections = sorted(document["sections"], key=lambda s: s["order"])
    if not admin:
        sections = [s for s in sections if s["visible"]]

    data = {
        "id": document.get("id"),
        "seller_id": document["seller_id"],
        "theme_preset": document["theme_preset"],
        "global_styles": dict(document["global_styles"]),
        "sections": [normalize_section(s, admin=admin) for s in sections],
    }

    if admin:
        data["is_active"] = document["is_active"]
        data["versions"] = [
            normalize_version_summary(v) for v in document.get("version_history") or []
        ]

    return data


def normalize_session(session):
    """Editor state: document plus history, selection and clipboard flags."""
    history = session.history
    return {
        "design": normalize_design(session.document, admin=True),
        "selected_section_id": session.selected_section_id,
        "clipboard_type": session.clipboard_type,
        "dirty": session.dirty,
        "autosave_pending": session.autosave_pending,
        "history": {
            "index": history.index,
            "size": len(history),
            "can_undo": history.can_undo,
            "can_redo": history.can_redo,
        },
        "notifications": [
            {"level": n.level, "message": n.message}
            for n in session.drain_notifications()
        ],
    }
