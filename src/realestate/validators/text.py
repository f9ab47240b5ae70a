"""Small string normalizers shared by settings and request coercion."""


def to_uppercase(value: str | None) -> str | None:
    """Uppercase `value`, passing None through."""
    if value is None:
        return None
    return value.upper()


def to_lowercase(value: str | None) -> str | None:
    """Lowercase `value`, passing None through."""
    if value is None:
        return None
    return value.lower()


def blank_to_none(value: object) -> object:
    """
    Strip strings and turn blank ones into None.

    HTML forms submit empty inputs as "" and optional columns store NULL for them.
    Non-string values are returned unchanged.
    """
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
