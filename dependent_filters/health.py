import logging

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from dependent_filters.core.dependencies import ResourceRegistryDep

router = APIRouter(prefix="/health")
logger = logging.getLogger(__name__)


class APIHealth(BaseModel):
    resources_are_registered: bool = True
    resource_count: int = 0


@router.get(
    "",
    response_model=APIHealth,
    responses={503: {"description": "No resource has been registered", "model": APIHealth}},
)
async def check_health(response: Response, registry: ResourceRegistryDep):
    """Check that resources were registered, without them every filter endpoint answers 404."""
    logger.info("Health Check")
    health = APIHealth(resource_count=len(registry))
    health.resources_are_registered = health.resource_count > 0

    if not health.resources_are_registered:
        logger.warning("No resources registered, check the RESOURCE_MODULES setting")
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return health
