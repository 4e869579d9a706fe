from __future__ import annotations

from sqlalchemy.orm import ColumnProperty, QueryableAttribute

from modelfilter.sainfo.names import model_name
from modelfilter.typing import SAAttribute
from modelfilter import exc


def resolve_column_by_name(field_name: str, Model: type, *, where: str) -> QueryableAttribute:
    """ Get a column attribute of a model by name, or fail

    Raises:
        exc.InvalidColumnError
    """
    try:
        attribute = getattr(Model, field_name)
    except AttributeError as e:
        raise exc.InvalidColumnError(model_name(Model), field_name, where=where) from e

    # Check that it actually is a column
    if not is_column(attribute):
        raise exc.InvalidColumnError(model_name(Model), field_name, where=where)

    # Done
    return attribute


def is_column(attribute: SAAttribute) -> bool:
    return (
        isinstance(attribute, QueryableAttribute) and
        isinstance(attribute.property, ColumnProperty)
    )


def column_filter_tags(column_property: ColumnProperty) -> str:
    """ Get the capability tags string declared for a column: `info={'filter': 'order;search'}`

    Looks at the property first (`column_property(info=...)`), then at the column itself.
    """
    if 'filter' in column_property.info:
        return column_property.info['filter']

    for column in column_property.columns:
        if 'filter' in column.info:
            return column.info['filter']

    return ''
