# coworker/shared/utils/pagination.py

import math

from fastapi import Query
from fastapi_pagination import Params

MIN_PAGE_SIZE = 5
MAX_PAGE_SIZE = 10


def pagination_params(
        page_id: int = Query(..., ge=1, description="Page number, starting at 1"),
        page_size: int = Query(..., ge=MIN_PAGE_SIZE, le=MAX_PAGE_SIZE, description="Items per page"),
) -> Params:
    return Params(page=page_id, size=page_size)


def page_count(total_count: int, page_size: int) -> int:
    """Number of pages needed to hold total_count items."""
    return math.ceil(total_count / page_size)
