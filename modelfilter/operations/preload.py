import sqlalchemy as sa
import sqlalchemy.orm

from modelfilter.sainfo.relations import resolve_relation_path

from .base import Operation


class PreloadOperation(Operation):
    """ Preload: eager-load relations

    Handles: FilterIntent.preloads
    When applied to a statement:
    * Adds selectinload() for every relation, with extra criteria if given

    Trusted input: applied as is.
    """

    def apply_to_statement(self, stmt: sa.sql.Select) -> sa.sql.Select:
        for path, criteria in self.intent.preloads.items():
            stmt = stmt.options(self.compile_loader_option(path, criteria))
        return stmt

    def compile_loader_option(self, path: str, criteria: tuple[sa.sql.ColumnElement, ...]) -> sa.orm.Load:
        """ Make a loader option for a relation path: 'articles', 'articles.comments'

        Criteria apply to the last relation in the path.

        Raises:
            exc.InvalidRelationError
        """
        attributes = resolve_relation_path(path, self.Model, where='preload')

        # Extra criteria for the last relation
        if criteria:
            attributes[-1] = attributes[-1].and_(*criteria)

        # Chain loaders
        option = sa.orm.selectinload(attributes[0])
        for attribute in attributes[1:]:
            option = option.selectinload(attribute)

        return option
