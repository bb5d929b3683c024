import base64
import binascii
import json
import re
from typing import Any

from fastapi import Request

from dependent_filters.exceptions import InvalidFilterValuesError

FILTERS_PARAM = "filters"
# filters[country]=US or filters[tags][]=a
_BRACKET_PARAM = re.compile(r"^filters\[(?P<key>[^\]]+)\](?P<list>\[\])?$")


def decode_filters_payload(payload: str) -> dict[str, Any]:
    """
    Decode the admin panel's native encoding of the current filter values.

    The payload is base64 encoded JSON: ``[{"class": <filter key>, "value": <value>}, ...]``.
    An empty payload means no filter has a value.
    """
    if not payload:
        return {}
    try:
        entries = json.loads(base64.b64decode(payload, validate=True))
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise InvalidFilterValuesError() from exc
    if not isinstance(entries, list) or not all(
        isinstance(e, dict) and isinstance(e.get("class"), str) for e in entries
    ):
        raise InvalidFilterValuesError("Filters payload must be a list of {class, value} entries.")
    return {entry["class"]: entry.get("value", "") for entry in entries}


def get_filter_values(request: Request) -> dict[str, Any]:
    """
    Collect the current value of every filter from the request query string.

    Both ``filters[<key>]=<value>`` parameters and a base64 encoded ``filters`` parameter are understood,
    bracket parameters win when a key appears in both.
    """
    params = request.query_params
    values = decode_filters_payload(params.get(FILTERS_PARAM, ""))

    for name in params.keys():
        match = _BRACKET_PARAM.match(name)
        if match is None:
            continue
        key = match.group("key")
        items = params.getlist(name)
        if match.group("list") or len(items) > 1:
            values[key] = items
        else:
            values[key] = items[0]
    return values
