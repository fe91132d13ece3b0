from typing import Optional
from urllib.parse import SplitResult, urlsplit

ALLOWED_SCHEMES = frozenset({"http", "https"})
IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif"})

def _is_utf8(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True

def is_valid_url(value: Optional[str]) -> bool:
    """
    Check that a string is an absolute http(s) URL we are willing to fetch.
    Purely syntactic: nothing is resolved or requested.
    Examples: 'http://example.com/page' -> True, '/img/a.png' -> False,
    'http:/example.com' -> False, 'http://example.com:abc/' -> False
    """
    if not value:
        return False

    try:
        parts = urlsplit(value)
    except ValueError:
        # e.g. unbalanced IPv6 brackets
        return False

    # Only full URLs: relative ones do not parse reliably without a scheme
    if not parts.scheme:
        return False

    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        return False

    # These schemes need the two slashes
    if value[len(scheme):len(scheme) + 3] != "://":
        return False

    if not parts.netloc:
        return False

    # The best we can do for the rest is check that strings are valid UTF-8
    # and that the port is an integer.
    if parts.hostname is not None and not _is_utf8(parts.hostname):
        return False

    try:
        parts.port
    except ValueError:
        return False

    if parts.path and not _is_utf8(parts.path):
        return False

    return True

def file_ext(path: str) -> str:
    """
    Extension of the last path segment, without the dot.
    Examples: '/img/logo.png' -> 'png', '/a.b/c' -> '', '/img/photo.JPG' -> 'JPG'
    """
    basename = path.rstrip("/").rsplit("/", 1)[-1]
    if "." not in basename:
        return ""
    return basename.rsplit(".", 1)[1]

def url_host(parts: SplitResult) -> str:
    """Host as written in the URL: no user info, no port, case kept."""
    hostinfo = parts.netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        return hostinfo.partition("]")[0] + "]"
    return hostinfo.partition(":")[0]
