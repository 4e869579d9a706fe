""" Create DB structure -- for testing"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Union

import sqlalchemy as sa
from sqlalchemy import MetaData


@contextmanager
def created_tables(bind: EngineOrConnection, metadata: Union[MetaData, type]):
    """ Temporarily create tables, drop them when the context is quit

    Example:
        Base = sa.orm.declarative_base()
        conn = engine.connect()

        with created_tables(conn, Base):
            ...

    Args:
        bind: A connectable: Engine or Connection
        metadata: MetaData, or a declarative base class
    """
    metadata = get_metadata(metadata)

    create_tables(bind, metadata)
    try:
        yield
    finally:
        drop_tables(bind, metadata)


def create_tables(bind: EngineOrConnection, metadata: MetaData):
    """ CREATE tables in the provided metadata """
    metadata.create_all(bind=bind)


def drop_tables(bind: EngineOrConnection, metadata: MetaData):
    """ DROP tables in the provided metadata """
    metadata.drop_all(
        bind=bind,
        tables=list(metadata.tables.values())
    )


def get_metadata(obj: Union[MetaData, type]) -> MetaData:
    """ Get metadata (DB structure) from an object """
    # MetaData object
    if isinstance(obj, MetaData):
        return obj
    # Declarative class
    elif isinstance(getattr(obj, 'metadata', None), MetaData):
        return obj.metadata  # type: ignore[union-attr]
    # Unsupported
    else:
        raise NotImplementedError(obj)


EngineOrConnection = Union[sa.engine.Engine, sa.engine.Connection]
