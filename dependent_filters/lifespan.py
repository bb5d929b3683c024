import importlib
import logging
from contextlib import asynccontextmanager

from dependent_filters.config import get_settings
from dependent_filters.resources import registry

logger = logging.getLogger(__name__)


def load_resource_modules(module_paths: list[str]) -> None:
    """Import the modules declaring resources so they register on the default registry."""
    for module_path in module_paths:
        logger.info("Loading resources from %s", module_path)
        importlib.import_module(module_path)


@asynccontextmanager
async def lifespan(app):
    """FastAPI lifespan context manager loading the resource definitions."""
    settings = get_settings()
    load_resource_modules(settings.RESOURCE_MODULES)
    logger.info("%d resources registered", len(registry))
    yield
