import logging

import structlog

from ..exceptions import PaginationError

_logger = logging.getLogger(__name__)
log = structlog.wrap_logger(_logger)


def with_page(path: str, page: int, page_size: int) -> str:
    """Both values are sent as soon as either one is set"""
    if page > 0 or page_size > 0:
        return f"{path}?page={page}&pageSize={page_size}"
    return path


async def iterate_pages(fetch_page, items_attr: str, page_size: int = 0):
    """Yield every item across pages 1..N of a paged listing.

    ``fetch_page(page, page_size)`` returns a response carrying ``page`` and ``pages``
    plus the list named by ``items_attr``. Stops after the last page or on an empty page.
    """
    page = 1
    request_log = log.new(items=items_attr, page_size=page_size)
    while True:
        response = await fetch_page(page, page_size)
        if response is None:
            break
        items = getattr(response, items_attr)
        if response.page and response.page != page:
            # Server ignored the page parameter; following it would fetch the same page forever
            request_log.error("Pagination failure: server returned a different page", requested=page, returned=response.page)
            raise PaginationError(f"Pagination failure: requested page {page} but received page {response.page}")
        for item in items:
            yield item
        request_log.debug("Fetched page", page=page, pages=response.pages, new_results=len(items))
        if not items or page >= response.pages:
            break
        page += 1
