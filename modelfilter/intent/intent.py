""" Filter Intent: what the caller wants from the query """

from __future__ import annotations

from collections import abc
from dataclasses import dataclass, field
from typing import Any, Optional, Union, TypedDict, TYPE_CHECKING

import sqlalchemy as sa

from modelfilter import exc


if TYPE_CHECKING:
    from modelfilter.engine.settings import FilterSettings


# Default pagination: no limit, no offset
DEFAULT_LIMIT = -1
DEFAULT_OFFSET = 0


class FilterIntentDict(TypedDict, total=False):
    """ Dict representation of a Filter Intent: the request-derived part """
    order: str
    limit: int
    offset: int
    select: str
    search_fields: str
    search: str
    matches: dict[str, Any]


@dataclass
class RawClause:
    """ A trusted WHERE clause: SQL text with named bind parameters, or an SqlAlchemy expression """
    clause: Union[str, sa.sql.ColumnElement]
    params: dict[str, Any]

    __slots__ = 'clause', 'params'


@dataclass
class JoinSpec:
    """ A trusted JOIN: relationship name, relationship attribute, or any SqlAlchemy join target """
    target: Any
    onclause: Optional[sa.sql.ColumnElement]
    isouter: bool
    full: bool

    __slots__ = 'target', 'onclause', 'isouter', 'full'


@dataclass
class FilterIntent:
    """ Filter Intent: a per-request accumulation of desired query transformations

    It is populated from request parameters (see parse_request_params()) and/or through the chainable mutators.
    Mutators do not validate anything: the QueryCompiler does.

    The compiler cannot tell where a value came from, so it treats `order_by`, `search_fields` and `matches`
    as untrusted and checks them against the model's capabilities. The rest is applied as is:
    `where()`, `join()`, `select()` and `preload()` are meant for trusted code only.

    Example:
        intent = FilterIntent().order('-age').limit(10).match('name', 'alice,carol')
    """
    # Field to order by. A "-" prefix means descending
    order_by: str = ''

    # Pagination. Limit -1: no limit. Offset 0: no offset.
    limit_value: int = DEFAULT_LIMIT
    offset_value: int = DEFAULT_OFFSET

    # Projection: "a,b,c"
    select_fields: str = ''

    # Search: "a,b,c" fields to look for a substring in
    search_fields: str = ''
    search_value: str = ''

    # Field matches: { field name => value }
    # A value "a,b,c" matches any of the values
    matches: dict[str, Any] = field(default_factory=dict)

    # Trusted clauses
    raw_clauses: list[RawClause] = field(default_factory=list)
    joins: list[JoinSpec] = field(default_factory=list)

    # Eager loading: { relation name => extra criteria }
    preloads: dict[str, tuple[sa.sql.ColumnElement, ...]] = field(default_factory=dict)

    # region Mutators

    def order(self, value: str) -> FilterIntent:
        """ Set the field to order by: "field" or "-field" """
        self.order_by = value
        return self

    def limit(self, limit: int) -> FilterIntent:
        self.limit_value = limit
        return self

    def offset(self, offset: int) -> FilterIntent:
        self.offset_value = offset
        return self

    def select(self, fields: str) -> FilterIntent:
        """ Set the list of columns to load: "a,b,c" """
        self.select_fields = fields
        return self

    def search(self, fields: str, value: str) -> FilterIntent:
        """ Look for a substring in the given fields: "a,b,c". Empty `fields` means every searchable field """
        self.search_fields = fields
        self.search_value = value
        return self

    def match(self, field: str, value: Any) -> FilterIntent:
        """ Match a field against a value. Overwrites the previous value for the same field """
        self.matches[field] = value
        return self

    def where(self, clause: Union[str, sa.sql.ColumnElement], **params: Any) -> FilterIntent:
        """ Add a WHERE clause. All clauses are ANDed.

        Example:
            intent.where('name = :name AND age > :age', name='tom', age=12)
            intent.where(User.email.like('%@%'))
        """
        self.raw_clauses.append(RawClause(clause=clause, params=params))
        return self

    def join(self, target: Any, onclause: sa.sql.ColumnElement = None, *, isouter: bool = False, full: bool = False) -> FilterIntent:
        """ Add a JOIN

        Example:
            intent.join('articles')
            intent.join(Article, Article.user_id == User.id, isouter=True)
        """
        self.joins.append(JoinSpec(target=target, onclause=onclause, isouter=isouter, full=full))
        return self

    def preload(self, relation: str, *criteria: sa.sql.ColumnElement) -> FilterIntent:
        """ Eager-load a relation; dot-notation for nested ones.

        Example:
            intent.preload('articles', Article.published == True)
            intent.preload('articles.comments')
        """
        self.preloads[relation] = criteria
        return self

    # endregion

    @classmethod
    def from_request_params(cls, params: RequestParams, settings: FilterSettings = None) -> FilterIntent:
        """ Construct a Filter Intent from request parameters """
        return parse_request_params(params, settings)

    @classmethod
    def ensure_filter_intent(cls, input: Optional[Union[FilterIntent, RequestParams]], settings: FilterSettings = None) -> FilterIntent:
        """ Construct a Filter Intent from any valid input """
        if input is None:
            return cls()
        elif isinstance(input, FilterIntent):
            return input
        elif isinstance(input, abc.Mapping) or hasattr(input, 'getlist'):
            return cls.from_request_params(input, settings)
        else:
            raise exc.FilterIntentError(f'FilterIntent must be a mapping of request parameters, "{type(input).__name__}" given')

    def dict(self) -> FilterIntentDict:
        """ Export the request-derived part of the intent """
        return FilterIntentDict(
            order=self.order_by,
            limit=self.limit_value,
            offset=self.offset_value,
            select=self.select_fields,
            search_fields=self.search_fields,
            search=self.search_value,
            matches=dict(self.matches),
        )


from .parse import parse_request_params, RequestParams
