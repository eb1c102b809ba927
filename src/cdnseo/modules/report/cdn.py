"""CDN and web server fingerprinting from response headers."""

from cdnseo.modules.fetcher import HeaderSnapshot


def detect_cdn(snapshot: HeaderSnapshot) -> str | None:
    """Best guess at the CDN or server that produced ``snapshot``."""
    server = (snapshot.get("server") or "").lower()
    via = (snapshot.get("via") or "").lower()
    names = snapshot.header_names()

    if "cf-ray" in names or server.startswith("cloudflare"):
        return "Cloudflare"
    if "x-vercel-id" in names or server == "vercel":
        return "Vercel"
    if "x-nf-request-id" in names or server == "netlify":
        return "Netlify"
    if "x-amz-cf-id" in names or "cloudfront" in via:
        return "CloudFront"
    if "fastly" in via or "x-fastly-request-id" in names or (
        "x-served-by" in names and "x-timer" in names
    ):
        return "Fastly"
    if server.startswith("akamaighost") or any(name.startswith("x-akamai-") for name in names):
        return "Akamai"
    if server.startswith("nginx"):
        return "Nginx"
    if server.startswith("apache"):
        return "Apache"
    return None
