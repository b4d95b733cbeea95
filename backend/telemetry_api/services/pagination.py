from __future__ import annotations

import math
from typing import Dict, Tuple

PAGE_SIZE = 10


def last_page_for(total_count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages for `total_count` rows; an empty table still has one page."""
    return max(math.ceil(total_count / page_size), 1)


def clamp_page(page: int, last_page: int) -> int:
    if page < 1:
        return 1
    if page > last_page:
        return last_page
    return page


def page_window(page: int, total_count: int, page_size: int = PAGE_SIZE) -> Tuple[int, int, int]:
    """Return (clamped page, last page, row offset)."""
    last_page = last_page_for(total_count, page_size)
    page = clamp_page(page, last_page)
    return page, last_page, (page - 1) * page_size


def page_links(kind: str, page_number: int, total_pages: int) -> Dict[str, str]:
    links: Dict[str, str] = {}
    if page_number < total_pages:
        links["nextPage"] = f"/{kind}?page={page_number + 1}"
        links["lastPage"] = f"/{kind}?page={total_pages}"
    if page_number > 1:
        links["prevPage"] = f"/{kind}?page={page_number - 1}"
        links["firstPage"] = f"/{kind}?page=1"
    return links
