""" Operations that implement compilation stages

* join: explicit JOINs
* sort: ORDER BY an orderable field
* search: substring search over searchable fields
* match: equality & membership on matchable fields
* where: custom conditions
* skiplimit: paginate
* select: projection
* preload: eager loading of relations
"""

from .base import Operation
from .join import JoinOperation
from .sort import SortOperation
from .search import SearchOperation
from .match import MatchOperation
from .where import WhereOperation
from .skiplimit import SkipLimitOperation
from .select import SelectOperation
from .preload import PreloadOperation
