""" ModelFilter: applies Filter Intents to an SqlAlchemy Model class """

from __future__ import annotations

from functools import partial
from typing import Optional, Union, TYPE_CHECKING

import sqlalchemy as sa
import sqlalchemy.orm

from modelfilter.intent.intent import FilterIntent
from modelfilter.sainfo.capabilities import describe

from .compiler import QueryCompiler
from .settings import FilterSettings


if TYPE_CHECKING:
    from modelfilter.intent.parse import RequestParams


class ModelFilter(QueryCompiler):
    """ Model Filter: compiles a Filter Intent against a model and runs it.

    This class contains shortcuts, helpers, and sugar -- in addition to what QueryCompiler does.

    Example:
        class User(Base):
            __tablename__ = 'users'
            id = sa.Column(sa.Integer, primary_key=True)
            name = sa.Column(sa.String, info={'filter': 'order;search;match'})

        # From request parameters
        mf = ModelFilter({'_order': ['-name'], 'name': ['alice,carol']}, User)
        users = mf.fetchall(session)

        # Programmatically
        mf = ModelFilter(FilterIntent().match('name', 'tom').limit(1), User)
        mf.delete(session)
    """

    def __init__(self, intent: Optional[Union[FilterIntent, RequestParams]], Model: type, settings: FilterSettings = None):
        """ Prepare to filter the Model with this intent

        Args:
            intent: The Filter Intent, or request parameters to parse it from
            Model: The Model class to query

        Raises:
            exc.FilterIntentError: `intent` is neither an intent nor request parameters
            exc.InvalidColumnError: `Model.__filter__` mentions an invalid column (programming error)
        """
        settings = settings or self.DEFAULT_SETTINGS

        # Parse the Filter Intent
        intent = FilterIntent.ensure_filter_intent(intent, settings)

        # Proceed
        super().__init__(intent, describe(Model), settings=settings)

    @classmethod
    def prepare(cls, Model: type, settings: FilterSettings = None):
        """ Prepare to filter the provided model

        Example:
            filter_users = ModelFilter.prepare(models.User, settings)
            mf = filter_users(request_params)
        """
        return partial(cls, Model=Model, settings=settings)

    def fetchall(self, session: sa.orm.Session) -> list:
        """ Execute the query and load model instances """
        return list(session.scalars(self.statement()))

    def count(self, session: sa.orm.Session) -> int:
        """ Execute the query and return the number of matching rows only """
        return session.execute(self.count_statement()).scalar_one()

    def delete(self, session: sa.orm.Session) -> int:
        """ Delete matching rows. Returns the number of deleted rows

        Instances already loaded into the session are not updated.
        """
        res = session.execute(
            self.delete_statement(),
            execution_options={'synchronize_session': False},
        )
        return res.rowcount
