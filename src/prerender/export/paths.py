"""Output path mapping: request path -> stored asset name.

Clean URL convention::

    "/"             -> "index.html"
    "about"         -> "about/index.html"
    "/about/"       -> "about/index.html"
    "/nested/page"  -> "nested/page/index.html"
    "about.html"    -> "about.html"
    "/legacy.HTM"   -> "legacy.HTM"

"""

import posixpath
import re

_HTML_SUFFIX = re.compile(r"\.html?$", re.IGNORECASE)


def map_to_asset_name(request_path: str) -> str:
    """Map a request path (or render-output key) to an asset name.

    Strips a single leading ``/`` or ``\\`` and appends ``index.html`` unless
    the path already names an ``.htm``/``.html`` file.  Total and
    deterministic: every string maps to exactly one asset name.

    """
    name = request_path[1:] if request_path[:1] in ("/", "\\") else request_path
    if _HTML_SUFFIX.search(name):
        return name
    return posixpath.normpath(posixpath.join(name, "index.html"))
