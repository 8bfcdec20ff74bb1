"""
URL fragment parsing for OAuth redirects.

The implicit grant returns its result in the fragment:
``#access_token=...&token_type=bearer&uid=...&account_id=...``
"""

from dropbox_http.models.http import Location


def parse_fragment(fragment: str | Location | None) -> dict[str, str]:
    """
    Parses a ``key=value&key=value`` fragment into a mapping.

    Entries without exactly one ``=`` are skipped. On duplicate keys the
    last occurrence wins. Values are returned as-is (no percent-decoding).

    Args:
        fragment: Fragment with or without the leading '#', or a Location

    Returns:
        Mapping of fragment keys to values, empty if there is no fragment
    """
    if isinstance(fragment, Location):
        fragment = fragment.hash
    if not fragment:
        return {}

    params: dict[str, str] = {}
    for entry in fragment.removeprefix("#").split("&"):
        if entry.count("=") != 1:
            continue
        key, value = entry.split("=")
        params[key] = value
    return params
