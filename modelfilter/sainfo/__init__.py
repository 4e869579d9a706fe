""" Information about SqlAlchemy models: columns, relations, capabilities """

from . import names
from . import columns
from . import relations
from . import models
from . import capabilities
