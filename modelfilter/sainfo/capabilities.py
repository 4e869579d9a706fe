""" Capabilities: which fields a caller may order by, search on, and match on

Capabilities are declared per column with a tags string:

    class User(Base):
        name = sa.Column(sa.String, info={'filter': 'order;search;match'})
        userAge = sa.Column(sa.Integer, info={'filter': 'order;match;name:age'})

or explicitly, for the whole model, with the `__filter__` class attribute:

    class User(Base):
        __filter__ = {
            'name': 'order;search;match',
            'userAge': 'order;match;name:age',
        }

Field names are snake_cased attribute names, unless overridden with a `name:<alias>` token.
"""

from __future__ import annotations

import enum
import logging
from collections import abc
from dataclasses import dataclass
from functools import cache, cached_property
from types import MappingProxyType

import sqlalchemy as sa
import sqlalchemy.orm

from modelfilter.sainfo.names import model_name, snake_case
from modelfilter.sainfo.columns import resolve_column_by_name, column_filter_tags
from modelfilter.typing import SAAttribute


logger = logging.getLogger(__name__)


class Capability(enum.Flag):
    """ A permission granted to a field """
    NONE = 0
    ORDER = enum.auto()
    SEARCH = enum.auto()
    MATCH = enum.auto()


# Tag tokens that grant capabilities
CAPABILITY_TOKENS = {
    'order': Capability.ORDER,
    'search': Capability.SEARCH,
    'match': Capability.MATCH,
}

# Tag token that overrides the field name: "name:<alias>"
NAME_TOKEN_PREFIX = 'name:'

# Tags separator
TAGS_SEPARATOR = ';'


@dataclass(frozen=True)
class FieldCapabilities:
    """ Capabilities of a single field """
    # Normalized field name: the one callers use
    name: str
    # Model attribute the field is mapped to
    attribute_name: str
    # Granted capabilities
    capabilities: Capability

    __slots__ = 'name', 'attribute_name', 'capabilities'


@dataclass(frozen=True, eq=False)
class EntityDescriptor:
    """ Entity Descriptor: read-only capabilities of every field of a model

    Use describe() to get one.
    """
    Model: type

    # Normalized field name => its capabilities. In declaration order.
    fields: abc.Mapping[str, FieldCapabilities]

    def capabilities_of(self, name: str) -> Capability:
        """ Get capabilities of a field. Unknown fields have none. """
        field = self.fields.get(name)
        return field.capabilities if field is not None else Capability.NONE

    def can_order(self, name: str) -> bool:
        return Capability.ORDER in self.capabilities_of(name)

    def can_search(self, name: str) -> bool:
        return Capability.SEARCH in self.capabilities_of(name)

    def can_match(self, name: str) -> bool:
        return Capability.MATCH in self.capabilities_of(name)

    @cached_property
    def orderable(self) -> tuple[str, ...]:
        return self._names_with(Capability.ORDER)

    @cached_property
    def searchable(self) -> tuple[str, ...]:
        return self._names_with(Capability.SEARCH)

    @cached_property
    def matchable(self) -> tuple[str, ...]:
        return self._names_with(Capability.MATCH)

    def column(self, name: str) -> SAAttribute:
        """ Get the model attribute for a field name """
        return getattr(self.Model, self.fields[name].attribute_name)

    def _names_with(self, capability: Capability) -> tuple[str, ...]:
        return tuple(
            field.name
            for field in self.fields.values()
            if capability in field.capabilities
        )


@cache
def describe(Model: type) -> EntityDescriptor:
    """ Get the Entity Descriptor for a model

    The result is computed once per model and then reused: repeated calls return the same object.
    Computation is pure, so concurrent first calls are harmless.

    Raises:
        exc.InvalidColumnError: `__filter__` mentions something that is not a column
    """
    fields: dict[str, FieldCapabilities] = {}

    for attribute_name, tags in declared_filter_tags(Model):
        field = parse_filter_tags(attribute_name, tags)

        # Name collision: the last one wins
        if field.name in fields:
            logger.warning(
                f'{model_name(Model)}: field "{field.name}" is declared by both '
                f'"{fields[field.name].attribute_name}" and "{attribute_name}". Using "{attribute_name}".'
            )
            del fields[field.name]

        fields[field.name] = field

    return EntityDescriptor(Model=Model, fields=MappingProxyType(fields))


def declared_filter_tags(Model: type) -> abc.Iterator[tuple[str, str]]:
    """ Get (attribute name, tags) for every field with capability tags, in declaration order

    Uses `Model.__filter__` if the model has one; column `info` otherwise.
    """
    explicit: abc.Mapping[str, str] = getattr(Model, '__filter__', None)

    # Explicit declaration
    if explicit is not None:
        for attribute_name, tags in explicit.items():
            resolve_column_by_name(attribute_name, Model, where='__filter__')
            yield attribute_name, tags
    # Column info
    else:
        for column_property in sa.orm.class_mapper(Model).column_attrs:
            tags = column_filter_tags(column_property)
            if tags:
                yield column_property.key, tags


def parse_filter_tags(attribute_name: str, tags: str) -> FieldCapabilities:
    """ Parse a tags string: "order;search;match;name:alias"

    Unknown tokens are ignored.
    """
    name = snake_case(attribute_name)
    capabilities = Capability.NONE

    for token in tags.split(TAGS_SEPARATOR):
        token = token.strip()

        if token.startswith(NAME_TOKEN_PREFIX):
            name = token[len(NAME_TOKEN_PREFIX):] or name
        else:
            capabilities |= CAPABILITY_TOKENS.get(token, Capability.NONE)

    return FieldCapabilities(name=name, attribute_name=attribute_name, capabilities=capabilities)
