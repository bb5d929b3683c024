import logging
from collections.abc import Callable
from typing import Any, ClassVar, TypeVar

from fastapi import Request
from sqlalchemy import ColumnElement, Select, column

from dependent_filters.exceptions import FilterMisconfiguredError
from dependent_filters.filters.base import attribute_from_name, humanize
from dependent_filters.filters.options import OptionsSource, as_options_source, normalize_options

logger = logging.getLogger(__name__)

ApplyCallback = Callable[[Request | None, Any, Any], Any]
D = TypeVar("D", bound="DependentFilter")


class DependentFilter:
    """
    A select filter whose options depend on the current values of other filters of the same resource.

    Filters are declared once, when the resource is defined, either fluently::

        DependentFilter.make("State").dependent_of("country").with_options(states_for_country)

    or as a subclass overriding the class level defaults and ``options``.
    """

    name: str | None = None
    default_attribute: ClassVar[str | None] = None
    dependencies: list[str] = []
    default_value: Any = ""
    hides_when_empty: bool = False
    component: str = "awesome-nova-dependent-filter"

    def __init__(self, name: str | None = None, attribute: str | None = None):
        """
        :param name: Display name, defaults to the class level ``name`` or the humanized class name.
        :param attribute: Key of the filtered attribute, derived from the name when omitted.
        """
        if name is None:
            name = type(self).name if type(self).name is not None else humanize(type(self).__name__)
        if attribute is None:
            attribute = type(self).default_attribute
        self.name = name
        self._attribute = attribute if attribute is not None else attribute_from_name(name)
        self.dependencies = list(type(self).dependencies)
        self.meta: dict[str, Any] = {}
        self.options_source: OptionsSource | None = None
        self.apply_callback: ApplyCallback | None = None

    @classmethod
    def make(cls: type[D], *args: Any, **kwargs: Any) -> D:
        return cls(*args, **kwargs)

    @property
    def attribute(self) -> str:
        return self._attribute

    def key(self) -> str:
        """Key used by the host to match request values with this filter."""
        return self._attribute

    def default(self) -> Any:
        return self.default_value

    def dependent_of(self: D, *filters: Any) -> D:
        """
        Set the keys of the filters whose values this filter's options depend on.

        Accepts a single key, a list of keys or several keys; replaces any previous dependencies.
        """
        if len(filters) == 1 and isinstance(filters[0], (list, tuple)):
            filters = tuple(filters[0])
        self.dependencies = list(filters)
        return self

    def with_options(self: D, source: Any, dependent_of: Any = None) -> D:
        """
        Configure where the options come from.

        :param source: A callable ``(request, filters) -> options`` or a literal options value.
        :param dependent_of: Optional dependencies to set at the same time.
        """
        self.options_source = as_options_source(source)
        if dependent_of is not None:
            self.dependent_of(dependent_of)
        return self

    def with_apply(self: D, callback: ApplyCallback) -> D:
        self.apply_callback = callback
        return self

    def with_default(self: D, value: Any) -> D:
        self.default_value = value
        return self

    def hide_when_empty(self: D, value: bool = True) -> D:
        self.hides_when_empty = value
        return self

    def with_meta(self: D, **meta: Any) -> D:
        self.meta.update(meta)
        return self

    def with_component(self: D, component: str) -> D:
        self.component = component
        return self

    def options(self, request: Request | None, filters: dict[str, Any]) -> Any:
        """
        Resolve the raw option source for the given filter values.

        Subclasses may override this instead of calling ``with_options``.
        """
        if self.options_source is None:
            raise FilterMisconfiguredError(self.key())
        return self.options_source.resolve(request, filters)

    def get_options(self, request: Request | None, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """
        Compute the option records for the current values of the other filters.

        Every dependency is present in the values handed to ``options``, unknown ones as an empty string.

        :param request: The current request.
        :param filters: Current values keyed by filter key.
        :return: A list of ``{"label": ..., "value": ..., ...}`` records in source order.
        """
        values = dict(filters or {})
        for dependency in self.dependencies:
            values.setdefault(dependency, "")
        records = normalize_options(self.options(request, values), self.key())
        logger.debug("Resolved %d options for filter %s", len(records), self.key())
        return records

    def apply(self, request: Request | None, query: Any, value: Any) -> Any:
        """
        Restrict the query to rows whose attribute is one of the selected values.

        :param request: The current request.
        :param query: A SQLAlchemy select statement.
        :param value: A single value or a list of values.
        :return: The restricted query, or whatever the custom apply callback returns.
        """
        if self.apply_callback is not None:
            return self.apply_callback(request, query, value)

        if value is None:
            values = []
        elif isinstance(value, (list, tuple, set)):
            values = list(value)
        else:
            values = [value]
        return query.where(self._column_for(query).in_(values))

    def _column_for(self, query: Any) -> ColumnElement:
        if isinstance(query, Select):
            selected = query.selected_columns
            if self._attribute in selected:
                return selected[self._attribute]
        return column(self._attribute)

    def json_serialize(self, request: Request | None) -> dict[str, Any]:
        """
        Build the descriptor the admin UI renders the filter from.

        Options are only computed eagerly for filters without dependencies, dependent ones are
        fetched from the options endpoint once the values they depend on are known.
        """
        return {
            "class": self.key(),
            "name": self.name,
            "component": self.component,
            "options": self.get_options(request, {}) if not self.dependencies else [],
            "currentValue": "" if self.default() is None else self.default(),
            "dependentOf": list(self.dependencies),
            "hideWhenEmpty": self.hides_when_empty,
            **self.meta,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, attribute={self._attribute!r})"
