from typing import Annotated

from fastapi import Depends, Request

from dependent_filters.resources import ResourceRegistry, registry
from dependent_filters.utilities.request_utils import get_filter_values


async def get_resource_registry() -> ResourceRegistry:
    return registry


async def get_request_filter_values(request: Request) -> dict:
    return get_filter_values(request)


ResourceRegistryDep = Annotated[ResourceRegistry, Depends(get_resource_registry)]
FilterValuesDep = Annotated[dict, Depends(get_request_filter_values)]
