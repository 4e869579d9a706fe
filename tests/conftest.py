import os
import pytest
import sqlalchemy as sa
import sqlalchemy.orm

from modelfilter.testing import created_tables

from .util.models import Base, insert_test_data


@pytest.fixture(scope='function')
def engine() -> sa.engine.Engine:
    return sa.create_engine(DATABASE_URL)


@pytest.fixture(scope='function')
def connection(engine: sa.engine.Engine) -> sa.engine.Connection:
    with engine.connect() as conn:
        yield conn


@pytest.fixture(scope='function')
def session(connection: sa.engine.Connection) -> sa.orm.Session:
    """ A session over a database with the test models and some rows in it """
    with created_tables(connection, Base):
        insert_test_data(connection)

        with sa.orm.Session(bind=connection) as ssn:
            yield ssn


# URL of the database to connect to
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite://')
