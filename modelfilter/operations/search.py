from collections import abc

import sqlalchemy as sa

from modelfilter.typing import SAFilterableStatement

from .base import Operation


class SearchOperation(Operation):
    """ Search: look for a substring in multiple fields

    Handles: FilterIntent.search_fields, FilterIntent.search_value
    When applied to a statement:
    * Adds a WHERE clause: (a LIKE %value% OR b LIKE %value% OR ...)

    The fields are the searchable ones among `search_fields`, or every searchable field when none are given.
    When no field qualifies, no clause is added.
    The value is a bound parameter; `%` and `_` in it keep their LIKE meaning.
    """

    def apply_to_statement(self, stmt: SAFilterableStatement) -> SAFilterableStatement:
        """ Modify the statement: add the WHERE clause """
        if not self.intent.search_value:
            return stmt

        # Compile the conditions
        conditions = [
            self.compile_column(name).contains(self.intent.search_value)
            for name in self.candidate_fields()
        ]

        # Nothing to search in: no restriction
        if not conditions:
            return stmt

        # OR them together
        return stmt.where(sa.or_(*conditions))

    def compile_column(self, name: str) -> sa.sql.ColumnElement:
        """ Get the column to search in. Non-string columns are searched as text """
        column = self.descriptor.column(name)

        if not isinstance(column.type, sa.String):
            column = sa.cast(column, sa.String)

        return column

    def candidate_fields(self) -> abc.Iterator[str]:
        """ Get the names of fields to search in """
        # No fields given: every searchable field
        if not self.intent.search_fields:
            yield from self.descriptor.searchable
            return

        # Fields given: only the searchable ones, each once
        names = dict.fromkeys(self.settings.split_list(self.intent.search_fields))
        for name in names:
            if not name:
                continue
            elif self.descriptor.can_search(name):
                yield name
            else:
                self.settings.reject_field('search', name)
