"""Link normalization and filtering: raw anchors → canonical in-scope links.

Every function here is pure and never raises on bad input.  A href that
cannot be resolved, points off-site, or names a non-page file is reported
as ``None`` / ``False`` and the caller skips it.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from linkcrawler.logger import get_logger
from linkcrawler.scraper.models import BaseContext, NormalizedLink, RawAnchor

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Policy tables
# ---------------------------------------------------------------------------

_DEFAULT_PORTS = {"http": 80, "https": 443}

# Non-page files. Extending this list is a code change.
EXCLUDED_EXTENSIONS: Tuple[str, ...] = (
    # images
    "jpg", "jpeg", "png", "gif", "webp", "svg", "bmp", "tiff", "ico",
    # documents
    "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
    # archives
    "zip", "rar", "7z", "tar", "gz",
    # media
    "mp3", "mp4", "avi", "mov", "wmv", "flv", "mkv",
)
_EXCLUDED_RE = re.compile(
    r"\.(?:%s)$" % "|".join(EXCLUDED_EXTENSIONS), re.IGNORECASE
)

MAX_TITLE_LENGTH = 100
ELLIPSIS = "..."

_SCHEME_PREFIX_RE = re.compile(r"^([^/?#]*)://")
_VALID_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_TAB_NEWLINE_RE = re.compile(r"[\t\n\r]")
_BEFORE_QUERY_RE = re.compile(r"[^?#]*")
_HOST_RE = re.compile(r"^[a-z0-9\-._~!$&'()*+,;=%]+$")
_WHITESPACE_RE = re.compile(r"\s+")

_PATH_SAFE = "/%:@!$&'()*+,;="
_QUERY_SAFE = _PATH_SAFE + "?"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _encode_host(host: str) -> Optional[str]:
    """Return the lowercase ASCII form of *host*, or ``None`` if it is invalid."""
    if ":" in host:
        # IPv6 literal; urlsplit has already checked the brackets.
        return host.lower()
    try:
        ascii_host = host.encode("idna").decode("ascii").lower()
    except UnicodeError:
        return None
    if not _HOST_RE.match(ascii_host):
        return None
    return ascii_host


def _remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` path segments (RFC 3986, section 5.2.4)."""
    if "." not in path:
        return path
    segments = path.split("/")
    output: List[str] = []
    last = len(segments) - 1
    for i, seg in enumerate(segments):
        if seg in (".", ".."):
            if seg == ".." and len(output) > 1:
                output.pop()
            if i == last:
                output.append("")
            continue
        output.append(seg)
    return "/".join(output)


def _canonicalize(url: str) -> Optional[Tuple[str, str]]:
    """Serialize an absolute http(s) URL in canonical form, without fragment.

    Returns ``(serialized, root)`` where *root* is ``scheme://authority/``,
    or ``None`` if *url* is not a usable http(s) URL.
    """
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS or not parts.hostname:
        return None
    host = _encode_host(parts.hostname)
    if host is None:
        return None

    netloc = f"[{host}]" if ":" in host else host
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"
    userinfo, sep, _ = parts.netloc.rpartition("@")
    if sep:
        netloc = f"{userinfo}@{netloc}"

    path = quote(_remove_dot_segments(parts.path) or "/", safe=_PATH_SAFE)
    query = quote(parts.query, safe=_QUERY_SAFE)
    serialized = urlunsplit((scheme, netloc, path, query, ""))
    return serialized, f"{scheme}://{netloc}/"


def _has_invalid_scheme(href: str) -> bool:
    """``True`` for ``xxx://...`` hrefs whose ``xxx`` is not a valid scheme.

    Relative paths that merely contain a colon (``Chapter 1: Intro.html``)
    are left alone.
    """
    match = _SCHEME_PREFIX_RE.match(href)
    return match is not None and not _VALID_SCHEME_RE.match(match.group(1))


def _host_of(url: str) -> Optional[str]:
    try:
        host = urlsplit(url).hostname
    except (ValueError, AttributeError):
        return None
    if not host:
        return None
    return _encode_host(host)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def normalize_url(href: str, base: str) -> Optional[str]:
    """Resolve *href* against *base* and return its canonical absolute form.

    The fragment is dropped and trailing slashes are stripped unless the
    result is the bare origin root (``https://example.com/``).  Returns
    ``None`` if either argument cannot be parsed or the result is not an
    http(s) URL.
    """
    if not isinstance(href, str) or not isinstance(base, str):
        return None
    href = _TAB_NEWLINE_RE.sub("", href.strip())
    # http(s) URLs treat backslashes before the query as path separators
    head = _BEFORE_QUERY_RE.match(href).group(0)
    href = head.replace("\\", "/") + href[len(head):]
    if _has_invalid_scheme(href):
        return None

    canonical_base = _canonicalize(base.strip())
    if canonical_base is None:
        return None
    try:
        joined = urljoin(canonical_base[0], href)
    except ValueError:
        return None

    canonical = _canonicalize(joined)
    if canonical is None:
        return None
    serialized, root = canonical
    while serialized != root:
        if serialized.endswith("/"):
            serialized = serialized[:-1]
        elif serialized.endswith("?") and serialized.index("?") == len(serialized) - 1:
            # an emptied query would not survive another pass
            serialized = serialized[:-1]
        else:
            break
    return serialized


def is_internal_link(candidate_url: str, base: str) -> bool:
    """Return ``True`` if both URLs parse and share the same hostname."""
    candidate_host = _host_of(candidate_url)
    return candidate_host is not None and candidate_host == _host_of(base)


def is_excluded(url: str) -> bool:
    """Return ``True`` if the URL path names a non-page file (image, PDF, ...)."""
    try:
        path = urlsplit(url).path
    except (ValueError, AttributeError):
        return False
    return _EXCLUDED_RE.search(path) is not None


def clean_title(raw_text: Optional[str]) -> str:
    """Collapse whitespace in anchor text and cap it at 100 characters."""
    text = _WHITESPACE_RE.sub(" ", (raw_text or "").strip())
    if len(text) > MAX_TITLE_LENGTH:
        text = text[:MAX_TITLE_LENGTH] + ELLIPSIS
    return text


def is_image_only_anchor(anchor: RawAnchor) -> bool:
    """Anchors whose only child element is an ``<img>`` are decorative."""
    return anchor.is_image_only


def build_link_set(
    raw_anchors: Iterable[RawAnchor], base: BaseContext
) -> List[NormalizedLink]:
    """Turn anchors into an ordered, deduplicated list of in-scope links.

    Anchors are processed in DOM order; the first anchor for a given URL
    supplies the title and later duplicates are dropped.
    """
    links: List[NormalizedLink] = []
    seen: set[str] = set()

    for anchor in raw_anchors:
        if is_image_only_anchor(anchor):
            continue
        url = normalize_url(anchor.href, base.origin_url)
        if url is None:
            logger.debug("Skipping unresolvable href %r", anchor.href)
            continue
        if not is_internal_link(url, base.origin_url):
            continue
        if is_excluded(url):
            logger.debug("Skipping non-page link %s", url)
            continue
        if url in seen:
            continue
        seen.add(url)
        links.append(NormalizedLink(url=url, title=clean_title(anchor.text)))

    return links
