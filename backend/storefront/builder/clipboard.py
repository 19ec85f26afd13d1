import copy

from .exceptions import ClipboardEmpty, ClipboardTypeMismatch
from .operations import find_section, section_label


class SettingsClipboard:
    """
    Single-slot, session-local copy buffer for section settings and styles.

    Never persisted: it lives and dies with the editing session.
    """

    def __init__(self):
        self._slot = None

    @property
    def is_empty(self):
        return self._slot is None

    @property
    def section_type(self):
        return self._slot["type"] if self._slot else None

    def clear(self):
        self._slot = None

    def copy_from(self, document, section_id):
        section = find_section(document, section_id)
        self._slot = {
            "type": section["type"],
            "settings": copy.deepcopy(section["settings"]),
            "styles": copy.deepcopy(section.get("styles")),
        }
        return self._slot["type"]

    def paste_into(self, document, section_id):
        if self._slot is None:
            raise ClipboardEmpty("Nothing has been copied yet")

        target = find_section(document, section_id)
        if target["type"] != self._slot["type"]:
            raise ClipboardTypeMismatch(
                f"Can only paste to a {section_label(self._slot['type'])} section"
            )

        updated = copy.deepcopy(document)
        section = find_section(updated, section_id)
        section["settings"] = copy.deepcopy(self._slot["settings"])
        section["styles"] = copy.deepcopy(self._slot["styles"])
        return updated
