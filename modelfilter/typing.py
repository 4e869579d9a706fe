from typing import Union

import sqlalchemy as sa
import sqlalchemy.orm


# Annotation for SqlAlchemy models
SAModel = type

# An SqlAlchemy attribute
# That is, the instrumented attribute you get when accessing <model>.<attribute>
SAAttribute = Union[sa.orm.InstrumentedAttribute, sa.orm.MapperProperty]

# Statements that accept WHERE clauses: SELECT, SELECT count(*), DELETE
SAFilterableStatement = Union[sa.sql.Select, sa.sql.Delete]
