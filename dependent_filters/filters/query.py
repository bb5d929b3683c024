import logging
from collections.abc import Iterable
from typing import Any

from fastapi import Request

from dependent_filters.filters.base import Filter

logger = logging.getLogger(__name__)


def apply_filters(request: Request | None, query: Any, filters: Iterable[Filter], values: dict[str, Any]) -> Any:
    """
    Apply the selected filter values to a query.

    :param request: The current request.
    :param query: The original query.
    :param filters: Filters of the resource or lens being listed.
    :param values: A dictionary of filter keys and selected values.

    :return: The modified query.
    """
    for filter_ in filters:
        value = values.get(filter_.key())
        if value is None or value == "" or value == []:
            continue
        logger.debug("Applying filter %s with value %r", filter_.key(), value)
        query = filter_.apply(request, query, value)
    return query
