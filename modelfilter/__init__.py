from importlib.metadata import version
__version__ = version('modelfilter')

from .engine import ModelFilter, QueryCompiler, compile_filter_intent
from .engine import FilterSettings, DEFAULT_SETTINGS, RejectedFieldCounter
from .intent import FilterIntent, parse_request_params

from . import intent
from . import exc

from .sainfo.capabilities import Capability, EntityDescriptor, FieldCapabilities, describe
