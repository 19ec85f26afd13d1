import pytest

from storefront.builder import operations
from storefront.builder.clipboard import SettingsClipboard
from storefront.builder.exceptions import ClipboardEmpty, ClipboardTypeMismatch
from storefront.utils.versioning import new_document


def build():
    document = new_document("seller-1")
    document, hero_a = operations.add_section(document, "hero")
    document, hero_b = operations.add_section(document, "hero")
    document, faq = operations.add_section(document, "faq")
    document = operations.update_section_settings(document, hero_a, {"heading": "Copied"})
    document = operations.update_section_styles(document, hero_a, {"customClass": "promo"})
    return document, hero_a, hero_b, faq


def test_paste_copies_settings_and_styles_to_same_type():
    document, hero_a, hero_b, _ = build()
    clipboard = SettingsClipboard()

    assert clipboard.copy_from(document, hero_a) == "hero"
    pasted = clipboard.paste_into(document, hero_b)

    target = operations.find_section(pasted, hero_b)
    assert target["settings"]["heading"] == "Copied"
    assert target["styles"]["customClass"] == "promo"
    assert operations.find_section(document, hero_b)["settings"]["heading"] != "Copied"


def test_paste_into_other_type_is_rejected_and_changes_nothing():
    document, hero_a, _, faq = build()
    clipboard = SettingsClipboard()
    clipboard.copy_from(document, hero_a)
    before = operations.find_section(document, faq).copy()

    with pytest.raises(ClipboardTypeMismatch, match="Can only paste to a Hero Banner section"):
        clipboard.paste_into(document, faq)

    assert operations.find_section(document, faq) == before


def test_paste_with_empty_clipboard_is_rejected():
    document, _, hero_b, _ = build()
    with pytest.raises(ClipboardEmpty):
        SettingsClipboard().paste_into(document, hero_b)


def test_clipboard_holds_a_snapshot_not_a_reference():
    document, hero_a, hero_b, _ = build()
    clipboard = SettingsClipboard()
    clipboard.copy_from(document, hero_a)

    operations.find_section(document, hero_a)["settings"]["heading"] = "Changed later"

    pasted = clipboard.paste_into(document, hero_b)
    assert operations.find_section(pasted, hero_b)["settings"]["heading"] == "Copied"
