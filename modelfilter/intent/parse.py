""" Parse request parameters into a Filter Intent """

from __future__ import annotations

from collections import abc
from typing import Any, Optional, Union

from modelfilter.engine.settings import FilterSettings, DEFAULT_SETTINGS

from .intent import FilterIntent, DEFAULT_LIMIT, DEFAULT_OFFSET


# Request parameters: { key => [value, ...] } or { key => value }, or a multidict with getlist()
RequestParams = Union[abc.Mapping[str, Union[str, abc.Sequence[str]]], Any]


def parse_request_params(params: RequestParams, settings: FilterSettings = None) -> FilterIntent:
    """ Construct a Filter Intent from request parameters

    Functional parameters (see FilterSettings) control limit, offset, order, search, and projection.
    Every other parameter with a non-empty value is a field match request: `name=alice` -> match('name', 'alice').
    Only the first value of every parameter is used.

    Nothing here is validated against the model: the QueryCompiler drops what is not allowed.
    Malformed limit & offset silently fall back to defaults.

    Example:
        parse_request_params({'_order': ['-age'], '_limit': ['10'], 'name': ['alice,carol']})
    """
    settings = settings or DEFAULT_SETTINGS
    param_lists = request_param_lists(params)

    def first(key: str) -> str:
        return first_value(param_lists, key) or ''

    intent = FilterIntent(
        limit_value=parse_int(first_value(param_lists, settings.limit_key), DEFAULT_LIMIT),
        offset_value=parse_int(first_value(param_lists, settings.offset_key), DEFAULT_OFFSET),
        order_by=first(settings.order_key),
        select_fields=first(settings.fields_key),
        search_fields=first(settings.search_fields_key),
        search_value=first(settings.search_key),
    )

    # Everything else is a match
    for key, values in param_lists.items():
        if not settings.is_functional_key(key) and values and values[0] != '':
            intent.match(key, values[0])

    # Done
    return intent


def request_param_lists(params: RequestParams) -> dict[str, list[str]]:
    """ Normalize request parameters into { key => [value, ...] } """
    # Multidict: Starlette QueryParams, Werkzeug MultiDict
    if hasattr(params, 'getlist'):
        return {
            key: list(params.getlist(key))
            for key in params.keys()
        }

    # Mapping of lists or plain values
    return {
        key: _as_list(value)
        for key, value in params.items()
    }


def first_value(param_lists: abc.Mapping[str, list[str]], key: str) -> Optional[str]:
    """ Get the first value of a parameter, if any """
    values = param_lists.get(key)
    return values[0] if values else None


def parse_int(value: Optional[str], default: int) -> int:
    """ Parse an integer. Fall back to `default` when it fails """
    if value is None:
        return default

    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_list(value: Union[None, str, abc.Sequence[str]]) -> list[str]:
    if value is None:
        return []
    elif isinstance(value, str):
        return [value]
    else:
        return list(value)
