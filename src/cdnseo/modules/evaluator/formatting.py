"""Display helpers for findings."""

_SPECIAL_CASES = {
    "www-authenticate": "WWW-Authenticate",
    "etag": "ETag",
    "te": "TE",
    "nel": "NEL",
    "cf-ray": "CF-Ray",
}


def display_header(name: str) -> str:
    """Canonical display form of a lowercased header name, e.g. X-Robots-Tag."""
    lowered = name.lower()
    if lowered in _SPECIAL_CASES:
        return _SPECIAL_CASES[lowered]
    return "-".join(part.capitalize() for part in lowered.split("-"))
