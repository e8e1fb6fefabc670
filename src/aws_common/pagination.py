"""
Token-driven pagination for calls botocore has no paginator for.

A page fetcher is a callable taking the current continuation token (``None``
for the first page) and returning ``(items, next_token)``. Enumeration ends
as soon as ``next_token`` is empty.
"""

from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

PageFetcher = Callable[[Optional[str]], Tuple[Sequence[Any], Optional[str]]]


def paginate(fetch_page: PageFetcher, start_token: Optional[str] = None) -> Iterator[Any]:
    """Yield every item from every page, in page order."""
    token = start_token
    while True:
        items, next_token = fetch_page(token)
        for item in items:
            yield item

        if not next_token:
            return
        token = next_token
