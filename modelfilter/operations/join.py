import sqlalchemy as sa

from modelfilter.intent.intent import JoinSpec
from modelfilter.sainfo.relations import resolve_relation_by_name

from .base import Operation


class JoinOperation(Operation):
    """ Join: add JOINs

    Handles: FilterIntent.joins
    Trusted input: applied as is, in order.
    """

    def apply_to_statement(self, stmt: sa.sql.Select) -> sa.sql.Select:
        for join in self.intent.joins:
            stmt = stmt.join(
                self._resolve_target(join),
                join.onclause,
                isouter=join.isouter,
                full=join.full,
            )
        return stmt

    def _resolve_target(self, join: JoinSpec):
        """ Relationship name? Get the attribute. Anything else goes to SqlAlchemy as is """
        if isinstance(join.target, str):
            return resolve_relation_by_name(join.target, self.Model, where='join')
        else:
            return join.target
