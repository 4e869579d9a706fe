import pytest
import sqlalchemy as sa
import sqlalchemy.orm

from modelfilter import FilterIntent, FilterSettings, ModelFilter, RejectedFieldCounter
from modelfilter.testing import stmt2sql

from .util.models import User
from .util.test_queries import typical_test_sql_query_text, typical_test_sql_query_lacks, typical_test_query_results


@pytest.mark.parametrize(('params', 'expected_query_lines'), [
    # Single value
    ({'name': ['alice']}, ["WHERE users.name = 'alice'"]),
    # Many values
    ({'name': ['alice,carol']}, ["WHERE users.name IN ('alice', 'carol')"]),
    (FilterIntent().match('name', ['alice', 'carol']), ["WHERE users.name IN ('alice', 'carol')"]),
    # Many fields: ANDed
    ({'name': ['alice'], 'email': ['alice@example.com']}, [
        "users.name = 'alice'",
        ' AND ',
        "users.email = 'alice@example.com'",
    ]),
])
def test_match_sql(params, expected_query_lines: list[str]):
    typical_test_sql_query_text(params, User, expected_query_lines)


@pytest.mark.parametrize('params', [
    # Not matchable
    {'password': ['1']},
    # Unknown
    {'foo': ['bar']},
])
def test_match_dropped(params):
    """ Fields without the capability are dropped silently """
    typical_test_sql_query_lacks(params, User, ['WHERE'])


@pytest.mark.parametrize(('params', 'expected_ids'), [
    ({'name': ['alice']}, [1, 5]),
    ({'name': ['alice,carol']}, [1, 3, 5]),
    ({'age': ['25']}, [2, 4]),
    ({'age': ['25,30']}, [1, 2, 4]),
    ({'name': ['alice'], 'age': ['40']}, [5]),
    (FilterIntent().match('age', 25), [2, 4]),
    (FilterIntent().match('age', (30, 40)), [1, 5]),
    # Nothing matches
    ({'name': ['nobody']}, []),
    # Dropped: no restriction
    ({'password': ['1']}, [1, 2, 3, 4, 5]),
    ({'foo': ['bar']}, [1, 2, 3, 4, 5]),
])
def test_match_results(session: sa.orm.Session, params, expected_ids: list[int]):
    typical_test_query_results(session, params, User, expected_ids)


def test_match_rejected():
    """ Rejected fields are reported """
    counter = RejectedFieldCounter()
    settings = FilterSettings(rejected_field_callback=counter)

    ModelFilter({'password': ['1'], 'foo': ['bar'], 'name': ['alice']}, User, settings).statement()
    assert counter == {('match', 'password'): 1, ('match', 'foo'): 1}
    assert counter.by_operation('match') == {'password': 1, 'foo': 1}
    assert counter.by_operation('order') == {}


def test_match_custom_delimiter():
    settings = FilterSettings(delimiter='|')
    mf = ModelFilter({'name': ['alice|carol']}, User, settings)

    assert "users.name IN ('alice', 'carol')" in stmt2sql(mf.statement())
