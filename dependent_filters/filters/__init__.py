from .base import Filter
from .dependent import DependentFilter
from .options import CallableOptions, OptionsSource, StaticOptions
from .query import apply_filters

__all__ = ["Filter", "DependentFilter", "CallableOptions", "StaticOptions", "OptionsSource", "apply_filters"]
