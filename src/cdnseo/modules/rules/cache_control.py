"""Cache-Control parsing."""


def parse_cache_control(value: str | None) -> dict[str, str | None]:
    """Parse a Cache-Control header into lowercased directives.

    ``"public, max-age=600"`` becomes ``{"public": None, "max-age": "600"}``.
    """
    directives: dict[str, str | None] = {}
    if not value:
        return directives
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        name, sep, arg = part.partition("=")
        name = name.strip().lower()
        directives[name] = arg.strip().strip('"') if sep else None
    return directives


def directive_seconds(directives: dict[str, str | None], name: str) -> int | None:
    """Return a delta-seconds directive as int, or None when missing or invalid."""
    raw = directives.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def max_freshness(directives: dict[str, str | None]) -> int | None:
    """Largest of max-age and s-maxage, or None when neither is set."""
    ages = [
        age
        for age in (directive_seconds(directives, name) for name in ("max-age", "s-maxage"))
        if age is not None
    ]
    return max(ages) if ages else None
