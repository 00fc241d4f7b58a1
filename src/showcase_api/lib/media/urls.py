"""Expansion of stored media paths into absolute public URLs."""

_ABSOLUTE_SCHEMES = ("http://", "https://")
_STORAGE_PREFIX = "storage/"


def asset_url(path: str | None, base_url: str) -> str | None:
    """Resolve a stored image/icon value to an absolute URL.

    Stored values are either a path relative to the public storage disk
    (``team-members/jane.jpg``, optionally already prefixed with
    ``storage/``) or an absolute ``http(s)://`` URL.

    Args:
        path: The stored value, possibly empty.
        base_url: Public base URL of the site, without trailing slash.

    Returns:
        None for an empty value, the value unchanged if it is already an
        absolute URL, otherwise ``{base_url}/storage/{path}``.
    """
    if not path:
        return None
    if path.startswith(_ABSOLUTE_SCHEMES):
        return path

    relative = path.lstrip("/")
    if relative.startswith(_STORAGE_PREFIX):
        relative = relative[len(_STORAGE_PREFIX) :]
    return f"{base_url.rstrip('/')}/{_STORAGE_PREFIX}{relative}"
