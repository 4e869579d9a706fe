from typing import Optional

import sqlalchemy as sa

from .base import Operation


# Order prefix that means "descending"
DESCENDING_MARKER = '-'


class SortOperation(Operation):
    """ Sort operation: define the ordering of result rows

    Handles: FilterIntent.order_by
    When applied to a statement:
    * Adds ORDER BY for the field, if it's orderable. Otherwise, the order is dropped.
    """

    def apply_to_statement(self, stmt: sa.sql.Select) -> sa.sql.Select:
        """ Modify the Select statement: add ORDER BY clause """
        expr = self.compile_column()

        if expr is not None:
            stmt = stmt.order_by(expr)

        return stmt

    def compile_column(self) -> Optional[sa.sql.ColumnElement]:
        """ Get the column to sort by, with asc()/desc(). None if there is nothing to sort by """
        if not self.intent.order_by:
            return None

        name, descending = parse_order_by(self.intent.order_by)

        # Check capability
        if not self.descriptor.can_order(name):
            self.settings.reject_field('order', name)
            return None

        # Make a sorting expression, depending on the direction
        column = self.descriptor.column(name)
        return column.desc() if descending else column.asc()


def parse_order_by(value: str) -> tuple[str, bool]:
    """ Parse an order string into (field name, descending)

    Example:
        parse_order_by('age') #-> 'age', False
        parse_order_by('-age') #-> 'age', True
    """
    if value.startswith(DESCENDING_MARKER):
        return value[len(DESCENDING_MARKER):], True
    else:
        return value, False
