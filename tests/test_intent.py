import sqlalchemy as sa

from modelfilter import FilterIntent
from modelfilter.intent import RawClause, JoinSpec, DEFAULT_LIMIT, DEFAULT_OFFSET

from .util.models import User, Article


def test_defaults():
    intent = FilterIntent()

    assert intent.order_by == ''
    assert intent.limit_value == DEFAULT_LIMIT == -1
    assert intent.offset_value == DEFAULT_OFFSET == 0
    assert intent.select_fields == ''
    assert intent.search_fields == ''
    assert intent.search_value == ''
    assert intent.matches == {}
    assert intent.raw_clauses == []
    assert intent.joins == []
    assert intent.preloads == {}

    # Instances do not share state
    FilterIntent().match('name', 'alice')
    assert FilterIntent().matches == {}


def test_mutators():
    """ Mutators chain and record exactly what they're given """
    published = Article.published == True

    intent = (
        FilterIntent()
        .order('-age')
        .limit(10)
        .offset(20)
        .select('name,age')
        .search('name,email', 'bob')
        .match('name', 'alice')
        .match('age', 25)
        .where('age > :age', age=18)
        .where(User.email.like('%@example.com'))
        .join('articles')
        .join(Article, Article.user_id == User.id, isouter=True)
        .preload('articles', published)
    )

    assert intent.order_by == '-age'
    assert intent.limit_value == 10
    assert intent.offset_value == 20
    assert intent.select_fields == 'name,age'
    assert (intent.search_fields, intent.search_value) == ('name,email', 'bob')
    assert intent.matches == {'name': 'alice', 'age': 25}

    # Clauses: appended, in order
    assert intent.raw_clauses[0] == RawClause(clause='age > :age', params={'age': 18})
    assert intent.raw_clauses[1].params == {}
    assert len(intent.raw_clauses) == 2

    assert intent.joins[0] == JoinSpec(target='articles', onclause=None, isouter=False, full=False)
    assert intent.joins[1].target is Article
    assert intent.joins[1].isouter is True
    assert len(intent.joins) == 2

    assert list(intent.preloads) == ['articles']
    assert intent.preloads['articles'][0] is published


def test_mutators_overwrite():
    """ Scalar settings are overwritten by later calls """
    intent = (
        FilterIntent()
        .order('name').order('-age')
        .limit(1).limit(5)
        .match('name', 'alice').match('name', 'bob')
        .search('', 'x').search('name', 'y')
        .preload('articles', User.id == 1).preload('articles')
    )

    assert intent.order_by == '-age'
    assert intent.limit_value == 5
    assert intent.matches == {'name': 'bob'}
    assert (intent.search_fields, intent.search_value) == ('name', 'y')
    assert intent.preloads == {'articles': ()}


def test_dict():
    intent = FilterIntent().order('-age').limit(3).match('name', 'alice').where(sa.true())

    assert intent.dict() == dict(
        order='-age',
        limit=3,
        offset=0,
        select='',
        search_fields='',
        search='',
        matches={'name': 'alice'},
    )
