from urllib.parse import urlsplit

PERMALINK_ANY = "any"    # every post URL becomes a permalink
PERMALINK_PAGE = "page"  # only top-level pages, e.g. /about/
PERMALINK_SCOPES = (PERMALINK_ANY, PERMALINK_PAGE)

def url_path(url: str) -> str:
    """Path component of an absolute http(s) URL; anything else is returned as-is."""
    if not url.startswith(("http://", "https://")):
        return url
    try:
        parts = urlsplit(url)
        if not parts.netloc:
            raise ValueError("missing host")
    except ValueError as e:
        print(f">> permalink: could not parse {url!r} ({e}), using it as-is", flush=True)
        return url
    return parts.path or "/"

def url_to_permalink(url: str, scope: str = PERMALINK_ANY) -> str | None:
    if scope not in PERMALINK_SCOPES:
        raise ValueError(f"Unknown permalink scope {scope!r}, expected one of {PERMALINK_SCOPES}.")

    path = url_path(url)
    if scope == PERMALINK_PAGE:
        segments = [s for s in path.split("/") if s]
        if len(segments) != 1:
            return None  # dated post, leave it to the site's own layout

    return path if path.endswith("/") else f"{path}/"
