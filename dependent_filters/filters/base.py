import re
from typing import Any, Protocol, runtime_checkable

from fastapi import Request

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


@runtime_checkable
class Filter(Protocol):
    """
    Capability every filter attached to a resource or lens exposes to the host.

    The registry, the option endpoints and the query helper only rely on these three operations.
    """

    def key(self) -> str: ...

    def apply(self, request: Request | None, query: Any, value: Any) -> Any: ...

    def json_serialize(self, request: Request | None) -> dict[str, Any]: ...


def humanize(class_name: str) -> str:
    """
    Turn a class name into a display label.

    >>> humanize("CountryStateFilter")
    'Country State Filter'
    """
    return " ".join(word.capitalize() for word in _WORD_BOUNDARY.sub(" ", class_name).split())


def kebab(class_name: str) -> str:
    """
    >>> kebab("ActiveUsers")
    'active-users'
    """
    return "-".join(word.lower() for word in _WORD_BOUNDARY.sub(" ", class_name).split())


def attribute_from_name(name: str) -> str:
    """Lowercase the label and replace spaces with underscores."""
    return name.lower().replace(" ", "_")
