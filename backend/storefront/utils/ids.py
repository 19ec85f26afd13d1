import secrets
import string

_ALPHABET = string.ascii_lowercase + string.digits


def _token(length):
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def new_section_id() -> str:
    return f"sec_{_token(7)}"


def new_version_id() -> str:
    return f"ver_{_token(10)}"
