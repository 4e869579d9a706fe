from typing import Union

import sqlalchemy as sa
import sqlalchemy.orm

from modelfilter import ModelFilter, FilterIntent
from modelfilter.intent import RequestParams
from modelfilter.testing.stmt_text import stmt2sql, selected_columns


FilterIntentInput = Union[FilterIntent, RequestParams]


def typical_test_sql_query_text(intent: FilterIntentInput, Model: type, expected_query_lines: list[str]):
    """ Typical test helper: make a query, check SQL

    Typical test scenario:
    * Take a Filter Intent (or request params)
    * Create a query
    * Check SQL
    """
    # Query
    mf = ModelFilter(intent, Model)

    # SQL
    assert_statement_lines(mf.statement(), *expected_query_lines)


def typical_test_sql_query_lacks(intent: FilterIntentInput, Model: type, unexpected_query_lines: list[str]):
    """ Typical test helper: make a query, check that SQL does not contain something """
    mf = ModelFilter(intent, Model)
    assert_statement_lacks(mf.statement(), *unexpected_query_lines)


def typical_test_sql_selected_columns(intent: FilterIntentInput, Model: type, expected_columns: list[str]):
    """ Typical test helper: make a query, check SQL selected columns """
    mf = ModelFilter(intent, Model)
    assert selected_columns(stmt2sql(mf.statement())) == set(expected_columns)


def typical_test_query_results(session: sa.orm.Session, intent: FilterIntentInput, Model: type, expected_ids: list[int], *, ordered: bool = False):
    """ Typical test helper: execute a query, check the ids of loaded instances

    Typical test scenario:
    * Take a Filter Intent (or request params)
    * Create a query
    * Execute
    * Check loaded instances. Unless `ordered`, the order does not matter.
    """
    # Query
    mf = ModelFilter(intent, Model)

    # Results
    ids = [instance.id for instance in mf.fetchall(session)]

    if ordered:
        assert ids == expected_ids
    else:
        assert sorted(ids) == sorted(expected_ids)


def assert_statement_lines(stmt: Union[str, sa.sql.ClauseElement], *expected_lines: str, dialect: sa.engine.interfaces.Dialect = None):
    """ Find the provided lines inside a statement or fail """
    # Query?
    if isinstance(stmt, sa.sql.ClauseElement):
        stmt = stmt2sql(stmt, dialect)

    # Test
    for line in expected_lines:
        assert line.strip() in stmt, f'{line!r} not found in {stmt!r}'


def assert_statement_lacks(stmt: Union[str, sa.sql.ClauseElement], *unexpected_lines: str, dialect: sa.engine.interfaces.Dialect = None):
    """ Make sure the provided lines are not in the statement """
    if isinstance(stmt, sa.sql.ClauseElement):
        stmt = stmt2sql(stmt, dialect)

    for line in unexpected_lines:
        assert line.strip() not in stmt, f'{line!r} unexpectedly found in {stmt!r}'
