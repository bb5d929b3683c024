import logging
from collections.abc import Sequence
from typing import Annotated, Any

from fastapi import APIRouter, Query, Request
from starlette.concurrency import run_in_threadpool

from dependent_filters.core.dependencies import FilterValuesDep, ResourceRegistryDep
from dependent_filters.core.schemas import FilterDescriptor, OptionRecord
from dependent_filters.filters.base import Filter
from dependent_filters.resources import ResourceRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="")

FilterKeyQuery = Annotated[str | None, Query(alias="filter", description="Key of the filter to get the options of")]


async def _filter_options(
    request: Request, filters: Sequence[Filter], filter_key: str | None, values: dict[str, Any]
) -> list[dict[str, Any]]:
    if not filter_key:
        return []
    filter_ = ResourceRegistry.find_filter(filters, filter_key)
    if filter_ is None or not hasattr(filter_, "get_options"):
        logger.info("No dependent filter %s on %s, returning no options", filter_key, request.url.path)
        return []
    # the filter's own value does not constrain its options
    other_values = {key: value for key, value in values.items() if key != filter_key}
    return await run_in_threadpool(filter_.get_options, request, other_values)  # type: ignore[attr-defined]


async def _describe(request: Request, filters: Sequence[Filter]) -> list[dict[str, Any]]:
    return [await run_in_threadpool(filter_.json_serialize, request) for filter_ in filters]


@router.get(
    "/{resource}/filters/options",
    response_model=list[OptionRecord],
    response_model_exclude_unset=True,
    tags=["filters"],
)
async def get_filter_options(
    resource: str,
    request: Request,
    registry: ResourceRegistryDep,
    values: FilterValuesDep,
    filter_key: FilterKeyQuery = None,
):
    """
    Retrieve the options of a resource filter for the current values of the other filters.
    """
    filters = registry.resolve_filters(resource, request)
    return await _filter_options(request, filters, filter_key, values)


@router.get(
    "/{resource}/lens/{lens}/filters/options",
    response_model=list[OptionRecord],
    response_model_exclude_unset=True,
    tags=["filters", "lenses"],
)
async def get_lens_filter_options(
    resource: str,
    lens: str,
    request: Request,
    registry: ResourceRegistryDep,
    values: FilterValuesDep,
    filter_key: FilterKeyQuery = None,
):
    """
    Retrieve the options of a lens filter for the current values of the other filters.
    """
    filters = registry.resolve_lens_filters(resource, lens, request)
    return await _filter_options(request, filters, filter_key, values)


@router.get(
    "/{resource}/filters",
    response_model=list[FilterDescriptor],
    response_model_exclude_unset=True,
    tags=["filters"],
)
async def list_filters(resource: str, request: Request, registry: ResourceRegistryDep):
    """
    Retrieve the display descriptors of the filters of a resource.
    """
    return await _describe(request, registry.resolve_filters(resource, request))


@router.get(
    "/{resource}/lens/{lens}/filters",
    response_model=list[FilterDescriptor],
    response_model_exclude_unset=True,
    tags=["filters", "lenses"],
)
async def list_lens_filters(resource: str, lens: str, request: Request, registry: ResourceRegistryDep):
    """
    Retrieve the display descriptors of the filters of a lens.
    """
    return await _describe(request, registry.resolve_lens_filters(resource, lens, request))
