# src/jamfusage/core/pagination.py
from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple

from jamfusage.http.errors import PaginationError, ParseError

DEFAULT_PAGE_SIZE = 100


def _page(path: str, data: dict) -> Tuple[List[Dict[str, Any]], int]:
    total = data.get("totalCount")
    if isinstance(total, bool) or not isinstance(total, (int, str)):
        raise ParseError(path, f"Page from {path} has no usable totalCount: {total!r}")
    try:
        total = int(total)
    except ValueError as ex:
        raise ParseError(path, f"Page from {path} has non-numeric totalCount: {total!r}") from ex
    results = data.get("results")
    if results is None:
        results = []
    if not isinstance(results, list):
        raise ParseError(path, f"Page from {path} has non-list results")
    return results, total


class PageFetcher:
    """
    Reads a whole Jamf Pro API collection.

    Each response looks like {"totalCount": N, "results": [...]}. Pages are
    requested in increasing order until the accumulated results reach
    totalCount; pages of uneven size are fine.
    """
    def __init__(self, get_json: Callable[..., dict], page_size: int = DEFAULT_PAGE_SIZE):
        self._get_json = get_json
        self.page_size = page_size

    def fetch_all(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        page = 0
        while True:
            query = dict(params or {})
            query["page"] = page
            query["page-size"] = self.page_size
            data = self._get_json(path, params=query)

            results, total = _page(path, data)
            out.extend(results)
            if len(out) >= total:
                return out
            if not results:
                raise PaginationError(path, len(out), total)
            page += 1
