from typing import Any, Union

import sqlalchemy as sa

from modelfilter.typing import SAFilterableStatement

from .base import Operation


class WhereOperation(Operation):
    """ Where: custom conditions

    Handles: FilterIntent.raw_clauses
    Trusted input: applied as is, in order, ANDed.
    """

    def apply_to_statement(self, stmt: SAFilterableStatement) -> SAFilterableStatement:
        for raw_clause in self.intent.raw_clauses:
            stmt = stmt.where(compile_clause(raw_clause.clause, raw_clause.params))
        return stmt


def compile_clause(clause: Union[str, sa.sql.ColumnElement], params: dict[str, Any]) -> sa.sql.ColumnElement:
    """ Make an SQL expression from SQL text with named bind parameters, or from an expression

    Example:
        compile_clause('age > :age', {'age': 18})
    """
    if isinstance(clause, str):
        clause = sa.text(clause)
        return clause.bindparams(**params) if params else clause
    else:
        return clause.params(**params) if params else clause
