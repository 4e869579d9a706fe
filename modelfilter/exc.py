class BaseModelFilterException(Exception):
    pass


class FilterIntentError(BaseModelFilterException):
    """ Invalid input provided as a Filter Intent

    Reported when something that is neither a Filter Intent nor a request parameter mapping is given
    """

    def __init__(self, err: str):
        super().__init__(f'Filter intent error: {err}')


class InvalidColumnError(BaseModelFilterException):
    """ A column mentioned by name is not found on the SqlAlchemy model

    This is a programming error: request parameters never raise it.
    Reported for `__filter__` declarations.
    """

    def __init__(self, model: str, column_name: str, where: str):
        self.model = model
        self.column_name = column_name
        self.where = where

        super().__init__(f'Invalid column "{column_name}" for "{model}" specified in {where}')


class InvalidRelationError(InvalidColumnError):
    """ A relation mentioned by name is not found on the SqlAlchemy model

    Reported for joins and preloads
    """
