""" Filter Intent: the parsed representation of what the caller wants

These classes only accumulate the caller's wishes.
Nothing is checked against the model until the QueryCompiler runs.
"""

from .intent import FilterIntent, FilterIntentDict, RawClause, JoinSpec
from .intent import DEFAULT_LIMIT, DEFAULT_OFFSET
from .parse import parse_request_params, request_param_lists, RequestParams
