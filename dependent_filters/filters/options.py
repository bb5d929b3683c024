"""
Option sources of a dependent filter.

A filter's options are configured either with a resolver callable receiving the request and the current filter
values, or with a literal value. Both are normalized at the configuration boundary into the ``OptionsSource``
tagged union so the filter never has to inspect what it was given again.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from fastapi import Request
from pydantic import BaseModel

from dependent_filters.exceptions import InvalidOptionSourceError

OptionsResolver: TypeAlias = Callable[[Request | None, dict[str, Any]], Any]

_SCALARS = (str, bytes, int, float, bool)


@dataclass(frozen=True)
class CallableOptions:
    resolver: OptionsResolver

    def resolve(self, request: Request | None, filters: dict[str, Any]) -> Any:
        return self.resolver(request, filters)


@dataclass(frozen=True)
class StaticOptions:
    value: Any

    def resolve(self, request: Request | None, filters: dict[str, Any]) -> Any:
        # the current filter values never change a literal source
        return self.value


OptionsSource: TypeAlias = CallableOptions | StaticOptions


def as_options_source(source: Any) -> OptionsSource:
    """
    Normalize what was handed to ``with_options`` into an ``OptionsSource``.

    :param source: A resolver callable, a literal value or an already built source.
    :return: The matching member of the tagged union.
    """
    if isinstance(source, (CallableOptions, StaticOptions)):
        return source
    if callable(source):
        return CallableOptions(source)
    return StaticOptions(source)


def iter_option_items(source: Any, filter_key: str) -> list[tuple[Any, Any]]:
    """
    Pair every option value with its label or record, keeping the source order.

    Sequences are keyed by position and a bare scalar counts as a one-element sequence.
    """
    if source is None:
        return []
    if isinstance(source, Mapping):
        return list(source.items())
    if isinstance(source, _SCALARS):
        return [(0, source)]
    if isinstance(source, (list, tuple)):
        return list(enumerate(source))
    raise InvalidOptionSourceError(filter_key, type(source).__name__)


def normalize_options(source: Any, filter_key: str) -> list[dict[str, Any]]:
    """
    Convert an option source into option records.

    Structured values keep their fields and get their ``value`` set to the source key, anything else becomes the
    ``label`` of the record.

    :param source: What the options resolver returned.
    :param filter_key: Key of the filter the source belongs to, used in error reporting.
    :return: A list of ``{"label": ..., "value": ..., ...}`` records.
    """
    records = []
    for key, value in iter_option_items(source, filter_key):
        if isinstance(value, BaseModel):
            value = value.model_dump()
        if isinstance(value, Mapping):
            records.append({**value, "value": key})
        else:
            records.append({"label": value, "value": key})
    return records
