from dependent_filters.filters import DependentFilter, Filter, apply_filters
from dependent_filters.resources import Lens, Resource, ResourceRegistry, registry

__all__ = ["DependentFilter", "Filter", "apply_filters", "Lens", "Resource", "ResourceRegistry", "registry"]
