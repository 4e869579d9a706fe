from collections import abc

import sqlalchemy as sa
import sqlalchemy.orm

from modelfilter.sainfo.columns import is_column

from .base import Operation


class SelectOperation(Operation):
    """ Select operation: restrict loaded columns

    Handles: FilterIntent.select_fields
    When applied to a statement:
    * Loads only the listed columns (and the primary key, which the ORM always needs)

    Names are not checked against capabilities: any column of the model may be projected.
    A name may be a field name or a model attribute name.
    Names that are not columns are dropped, like any other field the caller may not use.
    """

    def apply_to_statement(self, stmt: sa.sql.Select) -> sa.sql.Select:
        """ Modify the Select statement: load_only() the columns """
        columns = list(self.compile_columns())

        if columns:
            stmt = stmt.options(sa.orm.load_only(*columns))

        return stmt

    def compile_columns(self) -> abc.Iterator[sa.orm.QueryableAttribute]:
        """ Generate the list of columns to be loaded """
        if not self.intent.select_fields:
            return

        for name in self.settings.split_list(self.intent.select_fields):
            if not name:
                continue
            elif name in self.descriptor.fields:
                yield self.descriptor.column(name)
            elif is_column(getattr(self.Model, name, None)):
                yield getattr(self.Model, name)
            else:
                self.settings.reject_field('select', name)
