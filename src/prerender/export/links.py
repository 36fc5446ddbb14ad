"""Link extraction — discover same-site pages referenced by rendered HTML.

Collects ``<a href>`` then ``<iframe src>`` values (document order within
each group) and keeps only references that stay on the current site:

    "//cdn.example.com/x"   dropped (protocol-relative)
    "https://example.com"   dropped (explicit scheme)
    "mailto:me@example.com" dropped (explicit scheme)
    "#top", ""              dropped (no path)
    "/ok"                   kept as-is
    "rel/page" from "/dir/" resolved to "/dir/rel/page"

Duplicates are returned as found; the traversal deduplicates at storage time.
"""

from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

from prerender._errors import ExtractionError


def extract_relative_links(html: str, current_path: str) -> list[str]:
    """Return crawlable site paths referenced by *html*.

    Args:
        html: Rendered page body.
        current_path: Request path the page was rendered for, used as the
            base for relative references.

    Raises:
        ExtractionError: If the document cannot be parsed at all.

    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as exc:
        msg = f"Could not parse HTML rendered for {current_path!r}: {exc}"
        raise ExtractionError(msg) from exc

    candidates = [str(a.get("href")) for a in soup.find_all("a", href=True)]
    candidates.extend(str(f.get("src")) for f in soup.find_all("iframe", src=True))

    results: list[str] = []
    for href in candidates:
        resolved = _resolve_href(href, current_path)
        if resolved is not None:
            results.append(resolved)
    return results


def _resolve_href(href: str, current_path: str) -> str | None:
    """Resolve one candidate reference, or ``None`` if it is not crawlable."""
    if href.startswith("//"):
        return None

    try:
        parts = urlsplit(href)
        if parts.scheme:
            return None

        path = parts.path
        if parts.query:
            path = f"{path}?{parts.query}"
        if not path:
            return None

        if path.startswith("/"):
            return path
        # urljoin re-parses current_path, which can itself be URL-like.
        return urljoin(current_path, path)
    except ValueError:
        return None
