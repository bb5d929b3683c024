import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from fastapi import Request

from dependent_filters.exceptions import LensNotFoundError, ResourceNotFoundError
from dependent_filters.filters.base import Filter, kebab

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Lens:
    """A named, preconfigured view of a resource with its own filter set."""

    uri_key: str | None = None

    def key(self) -> str:
        return self.uri_key or kebab(type(self).__name__)

    def filters(self, request: Request | None) -> list[Filter]:
        return []


class Resource:
    """
    An administrable entity type and the filters and lenses declared on it.

    Subclasses override ``filters`` and ``lenses``; filter instances are best built once and reused, they hold no
    per-request state.
    """

    uri_key: str | None = None

    def key(self) -> str:
        return self.uri_key or kebab(type(self).__name__)

    def filters(self, request: Request | None) -> list[Filter]:
        return []

    def lenses(self, request: Request | None) -> list[Lens]:
        return []


class ResourceRegistry:
    """Resolves resources, lenses and their filter sets by uri key."""

    def __init__(self) -> None:
        self._resources: dict[str, Resource] = {}

    def register(self, resource: R) -> R:
        """
        Register a resource class or instance.

        Returns its argument so it can decorate a resource class.
        """
        instance = resource() if isinstance(resource, type) else resource
        key = instance.key()
        if key in self._resources:
            logger.warning("Resource %s is already registered, replacing it", key)
        self._resources[key] = instance
        logger.debug("Registered resource %s", key)
        return resource

    def unregister(self, uri_key: str) -> None:
        self._resources.pop(uri_key, None)

    def clear(self) -> None:
        self._resources.clear()

    def resolve(self, uri_key: str) -> Resource:
        try:
            return self._resources[uri_key]
        except KeyError as exc:
            raise ResourceNotFoundError(uri_key) from exc

    def resolve_filters(self, uri_key: str, request: Request | None) -> list[Filter]:
        return list(self.resolve(uri_key).filters(request))

    def resolve_lens(self, uri_key: str, lens_key: str, request: Request | None) -> Lens:
        resource = self.resolve(uri_key)
        for lens in resource.lenses(request):
            if lens.key() == lens_key:
                return lens
        raise LensNotFoundError(uri_key, lens_key)

    def resolve_lens_filters(self, uri_key: str, lens_key: str, request: Request | None) -> list[Filter]:
        return list(self.resolve_lens(uri_key, lens_key, request).filters(request))

    @staticmethod
    def find_filter(filters: Iterable[Filter], key: Any) -> Filter | None:
        """Return the filter whose key matches, or ``None``."""
        return next((filter_ for filter_ in filters if filter_.key() == key), None)

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, uri_key: object) -> bool:
        return uri_key in self._resources


# default registry, populated by the modules listed in ``RESOURCE_MODULES``
registry = ResourceRegistry()
