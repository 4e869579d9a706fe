from __future__ import annotations

import dataclasses
import logging
from collections import abc
from typing import Optional


logger = logging.getLogger(__name__)


# Default names of functional request parameters
DEFAULT_LIMIT_KEY = '_limit'
DEFAULT_OFFSET_KEY = '_offset'
DEFAULT_ORDER_KEY = '_order'
DEFAULT_SEARCH_FIELDS_KEY = '_search_fields'
DEFAULT_SEARCH_KEY = '_search'
DEFAULT_FIELDS_KEY = '_fields'


@dataclasses.dataclass
class FilterSettings:
    """ Settings for parsing and compiling Filter Intents

    Defines the names of "functional" request parameters: those that control limit, offset, order, search, projection.
    Every other request parameter is a field match request.

    Make one at startup and pass it around; do not change it while requests are being served.

    Example:
        settings = FilterSettings(limit_key='limit', offset_key='offset')
    """
    limit_key: str = DEFAULT_LIMIT_KEY
    offset_key: str = DEFAULT_OFFSET_KEY
    order_key: str = DEFAULT_ORDER_KEY
    search_fields_key: str = DEFAULT_SEARCH_FIELDS_KEY
    search_key: str = DEFAULT_SEARCH_KEY
    fields_key: str = DEFAULT_FIELDS_KEY

    # Separator for lists: "a,b,c" in select fields, search fields, match values
    delimiter: str = ','

    # Diagnostic hook: called with (operation, field name) for every field dropped by the allow-list
    rejected_field_callback: Optional[abc.Callable[[str, str], None]] = None

    def __post_init__(self):
        # Empty key names fall back to defaults
        self.limit_key = self.limit_key or DEFAULT_LIMIT_KEY
        self.offset_key = self.offset_key or DEFAULT_OFFSET_KEY
        self.order_key = self.order_key or DEFAULT_ORDER_KEY
        self.search_fields_key = self.search_fields_key or DEFAULT_SEARCH_FIELDS_KEY
        self.search_key = self.search_key or DEFAULT_SEARCH_KEY
        self.fields_key = self.fields_key or DEFAULT_FIELDS_KEY

    @property
    def functional_keys(self) -> frozenset[str]:
        """ Get the set of reserved parameter names """
        return frozenset((
            self.limit_key,
            self.offset_key,
            self.order_key,
            self.search_fields_key,
            self.search_key,
            self.fields_key,
        ))

    def is_functional_key(self, key: str) -> bool:
        return key in self.functional_keys

    def split_list(self, value: str) -> list[str]:
        """ Split a delimited string into a list: "a,b,c" """
        return value.split(self.delimiter)

    # ### Callbacks for QueryCompiler

    def reject_field(self, operation: str, field_name: str):
        """ Callback: a field was dropped because it does not have the capability

        Used by: operations "order", "search", "match", "select".
        Default behavior: log, then call `rejected_field_callback`.
        Rejection is never an error: the caller gets a narrower result set.
        """
        logger.debug(f'Field "{field_name}" rejected by "{operation}"')

        if self.rejected_field_callback is not None:
            self.rejected_field_callback(operation, field_name)


# Settings used when none are given
DEFAULT_SETTINGS = FilterSettings()
