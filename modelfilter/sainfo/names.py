import re
from functools import cache

import sqlalchemy as sa
import sqlalchemy.orm


def model_name(Model: type) -> str:
    """ Get the name of the Model for this class """
    # We can't do `Model.__name__` because we can be given an aliased class
    return sa.orm.class_mapper(Model).class_.__name__


@cache
def snake_case(name: str) -> str:
    """ Convert a declared identifier into a snake_case field name

    Example:
        snake_case('name') #-> 'name'
        snake_case('userName') #-> 'user_name'
        snake_case('UserID') #-> 'user_id'
        snake_case('HTTPServer') #-> 'http_server'
    """
    return SNAKE_CASE_BOUNDARY.sub('_', name).lower()


# Word boundaries: "aB" and "ABc" (the end of an acronym)
SNAKE_CASE_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')
