from typing import Any, Optional

import sqlalchemy as sa

from modelfilter.typing import SAFilterableStatement

from .base import Operation


class MatchOperation(Operation):
    """ Match: field equality and membership

    Handles: FilterIntent.matches
    When applied to a statement:
    * Adds `field = value` for a single value
    * Adds `field IN (a, b, c)` for a value "a,b,c"
    Every matchable field gets its own WHERE clause, so they're ANDed.
    Fields that are not matchable are dropped.
    """

    def apply_to_statement(self, stmt: SAFilterableStatement) -> SAFilterableStatement:
        for name, value in self.intent.matches.items():
            # Check capability
            if not self.descriptor.can_match(name):
                self.settings.reject_field('match', name)
                continue

            stmt = stmt.where(self.compile_condition(name, value))

        return stmt

    def compile_condition(self, name: str, value: Any) -> sa.sql.ColumnElement:
        """ Generate an SQL condition for a field match """
        column = self.descriptor.column(name)
        values = self.split_value(value)

        # Scalar value
        if values is None:
            return column == value
        # One value
        elif len(values) == 1:
            return column == values[0]
        # Many values
        else:
            return column.in_(values)

    def split_value(self, value: Any) -> Optional[list]:
        """ Get the list of alternatives: "a,b,c" or a sequence. None if it's a scalar """
        if isinstance(value, str):
            return self.settings.split_list(value)
        elif isinstance(value, (list, tuple, set, frozenset)):
            return list(value)
        else:
            return None
