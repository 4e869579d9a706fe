from __future__ import annotations

from sqlalchemy.orm import QueryableAttribute, RelationshipProperty

from modelfilter.sainfo.names import model_name
from modelfilter.typing import SAAttribute
from modelfilter import exc


def resolve_relation_by_name(field_name: str, Model: type, *, where: str) -> QueryableAttribute:
    """ Get a relationship attribute of a model by name, or fail

    Raises:
        exc.InvalidRelationError
    """
    try:
        attribute = getattr(Model, field_name)
    except AttributeError as e:
        raise exc.InvalidRelationError(model_name(Model), field_name, where=where) from e

    # Check that it actually is a relationship
    if not is_relation(attribute):
        raise exc.InvalidRelationError(model_name(Model), field_name, where=where)

    # Done
    return attribute


def resolve_relation_path(path: str, Model: type, *, where: str) -> list[QueryableAttribute]:
    """ Resolve a dot-notation path of relationships: 'articles.comments'

    Every next name is resolved against the target model of the previous relationship
    """
    attributes = []
    for name in path.split('.'):
        attribute = resolve_relation_by_name(name, Model, where=where)
        attributes.append(attribute)
        Model = target_model(attribute)
    return attributes


def is_relation(attribute: SAAttribute) -> bool:
    return (
        isinstance(attribute, QueryableAttribute) and
        isinstance(attribute.property, RelationshipProperty)
    )


def target_model(attribute: SAAttribute) -> type:
    return attribute.property.mapper.class_
