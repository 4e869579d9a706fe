import sqlalchemy as sa
import sqlalchemy.orm


def primary_key_columns(Model: type) -> tuple[sa.Column, ...]:
    """ Get the primary key columns of a model """
    return tuple(sa.orm.class_mapper(Model).primary_key)
