import copy


def normalize_section(section, admin=False):
    data = {
        "id": section["id"],
        "type": section["type"],
        "order": section["order"],
        "settings": copy.deepcopy(section.get("settings") or {}),
        "styles": copy.deepcopy(section.get("styles")),
    }

    if admin:
        data["visible"] = section["visible"]

    return data
