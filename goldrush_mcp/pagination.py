"""
Turn upstream page envelopes into tool payloads.

``single_page`` hands back the ``data`` member of one envelope untouched.
``collect_all_pages`` drains a page iterator and concatenates every page's
``data.items`` in upstream order.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Dict, List, Optional

logger = logging.getLogger(__name__)


def single_page(envelope: Dict[str, Any]) -> Any:
    return envelope.get("data")


def _page_items(page: Any) -> List[Any]:
    data = page.get("data") if isinstance(page, dict) else None
    items = data.get("items") if isinstance(data, dict) else None
    if isinstance(items, list):
        return items
    return []


async def collect_all_pages(
    pages: AsyncIterator[Dict[str, Any]], *, max_items: Optional[int] = None
) -> Dict[str, List[Any]]:
    """
    Consume ``pages`` once and return ``{"items": [...]}``.

    Pages without ``data`` or ``items`` contribute nothing. When ``max_items``
    is set and reached, the result is truncated and the iterator is closed
    so no further pages are requested. Exceptions raised by the iterator
    propagate to the caller.
    """
    items: List[Any] = []
    page_count = 0
    try:
        async for page in pages:
            page_count += 1
            items.extend(_page_items(page))
            if max_items is not None and len(items) >= max_items:
                logger.warning(
                    "Aggregation capped at %s items after %s page(s)", max_items, page_count
                )
                del items[max_items:]
                break
    finally:
        aclose = getattr(pages, "aclose", None)
        if aclose is not None:
            await aclose()
    return {"items": items}
