"""URL path and query string helpers."""

from typing import Iterable, Optional
from urllib.parse import quote, urlencode


def encode_path(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment.

    Every reserved character is escaped, including ``/``, so identifiers
    reach the server unchanged after decoding.
    """
    return quote(str(value), safe="")


def build_query(pairs: Iterable[tuple[str, Optional[str]]]) -> str:
    """Build a query string from ordered (key, value) pairs.

    Pairs with an empty value are left out entirely; the remaining values
    are form-encoded and joined with ``&`` in the order given.
    """
    return urlencode([(key, value) for key, value in pairs if value])
