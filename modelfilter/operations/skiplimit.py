from typing import Optional

import sqlalchemy as sa

from .base import Operation


class SkipLimitOperation(Operation):
    """ Pagination: LIMIT and OFFSET

    Handles: FilterIntent.limit_value, FilterIntent.offset_value
    Always applied. A negative limit means "no limit", a non-positive offset means "no offset".
    """

    def apply_to_statement(self, stmt: sa.sql.Select) -> sa.sql.Select:
        stmt = stmt.limit(self.limit)
        stmt = stmt.offset(self.offset)
        return stmt

    @property
    def limit(self) -> Optional[int]:
        """ Get the final LIMIT. None for no limit """
        limit = self.intent.limit_value
        return limit if limit is not None and limit >= 0 else None

    @property
    def offset(self) -> Optional[int]:
        """ Get the final OFFSET. None for no offset """
        offset = self.intent.offset_value
        return offset if offset is not None and offset > 0 else None

    @property
    def is_paginated(self) -> bool:
        return self.limit is not None or self.offset is not None
