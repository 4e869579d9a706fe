""" Compile a Filter Intent: everything needed to apply it to a statement

Overview:

* ModelFilter is the high-level interface: binds an intent to a model, runs queries
* QueryCompiler is the low-level interface: applies an intent to statements
"""

from .settings import FilterSettings, DEFAULT_SETTINGS
from .diagnostics import RejectedFieldCounter

from .compiler import QueryCompiler, compile_filter_intent
from .query import ModelFilter
