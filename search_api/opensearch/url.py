"""URL composition for OpenSearch endpoints."""

from collections.abc import Mapping, Sequence
from urllib.parse import quote, urlencode, urljoin, urlsplit


def prepare_url(url: str, parts: Sequence[str]) -> str:
    """Resolve the path made of ``parts`` against the base server ``url``.

    Each part is percent-encoded as a whole, so a name containing ``/``, ``?``
    or ``#`` stays a single path segment. Resolution follows RFC 3986: a base
    ending in ``/`` keeps its path as a prefix, otherwise its last segment is
    replaced. The base query string and fragment are dropped.

    Raises:
        ValueError: If ``url`` is not absolute, or a part is empty or a dot segment
    """
    base = urlsplit(url)
    if not base.scheme or not base.netloc:
        raise ValueError(f"Server URL must be absolute, got {url!r}")
    if not parts:
        raise ValueError("At least one path segment is required")

    segments = []
    for part in parts:
        if not isinstance(part, str) or part in ("", ".", ".."):
            raise ValueError(f"Invalid path segment {part!r}")
        segments.append(quote(part, safe=""))

    return urljoin(url, "/".join(segments))


def append_query_string(url: str, params: Mapping[str, str]) -> str:
    """Append ``params`` as a percent-encoded query string."""
    return f"{url}?{urlencode(params)}"


def document_path(name: str, id: int) -> list[str]:
    """Path segments addressing document ``id`` in index ``name``."""
    if isinstance(id, bool) or not isinstance(id, int):
        raise TypeError(f"Document id must be an int, got {type(id).__name__}")
    return [name, "_doc", str(id)]
