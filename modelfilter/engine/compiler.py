""" QueryCompiler: an object that binds operations together to compile a Filter Intent

This is low level. See ModelFilter.
"""

from __future__ import annotations

import sqlalchemy as sa

from modelfilter import operations
from modelfilter.intent.intent import FilterIntent
from modelfilter.sainfo.capabilities import EntityDescriptor
from modelfilter.sainfo.models import primary_key_columns

from .settings import FilterSettings, DEFAULT_SETTINGS


class QueryCompiler:
    """ Query Compiler: applies a Filter Intent to SqlAlchemy statements

    Every operation is a compilation stage. Stages are always applied in this order:

    1. join: explicit JOINs (trusted)
    2. sort: ORDER BY, only for an orderable field
    3. search: LIKE over searchable fields, ORed
    4. match: = or IN on matchable fields, ANDed
    5. where: custom clauses (trusted), ANDed
    6. skiplimit: LIMIT & OFFSET
    7. select: projection (trusted)
    8. preload: eager loading (trusted)

    Fields that do not have the capability are dropped silently; see FilterSettings.reject_field().

    This is a low-level interface.
    See `ModelFilter`
    """
    # The Filter Intent to compile
    intent: FilterIntent

    # Capabilities of the target model
    descriptor: EntityDescriptor

    # Settings
    settings: FilterSettings

    def __init__(self, intent: FilterIntent, descriptor: EntityDescriptor, settings: FilterSettings = None):
        """ Initialize a Query Compiler for the given Filter Intent

        Args:
            intent: The Filter Intent to compile
            descriptor: Capabilities of the model to compile it against
        """
        assert isinstance(intent, FilterIntent)
        self.intent = intent
        self.descriptor = descriptor
        self.settings = settings or self.DEFAULT_SETTINGS

        # Init operations
        self.join_op = self.JoinOperation(intent, descriptor, self.settings)
        self.sort_op = self.SortOperation(intent, descriptor, self.settings)
        self.search_op = self.SearchOperation(intent, descriptor, self.settings)
        self.match_op = self.MatchOperation(intent, descriptor, self.settings)
        self.where_op = self.WhereOperation(intent, descriptor, self.settings)
        self.skiplimit_op = self.SkipLimitOperation(intent, descriptor, self.settings)
        self.select_op = self.SelectOperation(intent, descriptor, self.settings)
        self.preload_op = self.PreloadOperation(intent, descriptor, self.settings)

    __slots__ = (
        'intent', 'descriptor', 'settings',
        'join_op', 'sort_op', 'search_op', 'match_op', 'where_op',
        'skiplimit_op', 'select_op', 'preload_op',
    )

    # Default settings object
    DEFAULT_SETTINGS = DEFAULT_SETTINGS

    # Overridable classes: operations
    # Replace to customize how stages are compiled
    JoinOperation = operations.JoinOperation
    SortOperation = operations.SortOperation
    SearchOperation = operations.SearchOperation
    MatchOperation = operations.MatchOperation
    WhereOperation = operations.WhereOperation
    SkipLimitOperation = operations.SkipLimitOperation
    SelectOperation = operations.SelectOperation
    PreloadOperation = operations.PreloadOperation

    @property
    def Model(self) -> type:
        return self.descriptor.Model

    def compile(self, stmt: sa.sql.Select) -> sa.sql.Select:
        """ Apply every stage to a Select statement """
        stmt = self.join_op.apply_to_statement(stmt)
        stmt = self.sort_op.apply_to_statement(stmt)
        stmt = self._apply_conditions(stmt)
        stmt = self.skiplimit_op.apply_to_statement(stmt)
        stmt = self.select_op.apply_to_statement(stmt)
        stmt = self.preload_op.apply_to_statement(stmt)
        return stmt

    def statement(self) -> sa.sql.Select:
        """ Build an SQL SELECT statement that loads model instances """
        return self.compile(sa.select(self.Model))

    def count_statement(self) -> sa.sql.Select:
        """ Build an SQL statement that counts matching rows

        Ordering, pagination, projection, and preloads make no difference to the count: they're not applied.
        """
        stmt = sa.select(sa.func.count()).select_from(self.Model)
        stmt = self.join_op.apply_to_statement(stmt)
        stmt = self._apply_conditions(stmt)
        return stmt

    def delete_statement(self) -> sa.sql.Delete:
        """ Build an SQL DELETE statement for matching rows

        DELETE does not support JOINs and LIMITs, so when the intent has them,
        rows are picked by primary key from a subquery.
        """
        # Simple case: conditions only
        if not self.intent.joins and not self.skiplimit_op.is_paginated:
            return self._apply_conditions(sa.delete(self.Model))

        # Pick rows by primary key
        primary_key = primary_key_columns(self.Model)
        subquery = sa.select(*primary_key).select_from(self.Model)
        subquery = self.join_op.apply_to_statement(subquery)
        subquery = self.sort_op.apply_to_statement(subquery)
        subquery = self._apply_conditions(subquery)
        subquery = self.skiplimit_op.apply_to_statement(subquery)

        target = primary_key[0] if len(primary_key) == 1 else sa.tuple_(*primary_key)
        return sa.delete(self.Model).where(target.in_(subquery))

    def _apply_conditions(self, stmt):
        """ Apply stages that produce WHERE conditions: search, match, where """
        stmt = self.search_op.apply_to_statement(stmt)
        stmt = self.match_op.apply_to_statement(stmt)
        stmt = self.where_op.apply_to_statement(stmt)
        return stmt


def compile_filter_intent(intent: FilterIntent, descriptor: EntityDescriptor, stmt: sa.sql.Select, settings: FilterSettings = None) -> sa.sql.Select:
    """ Apply a Filter Intent to a Select statement

    Example:
        stmt = compile_filter_intent(intent, describe(User), sa.select(User))
    """
    return QueryCompiler(intent, descriptor, settings).compile(stmt)
