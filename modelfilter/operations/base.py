from __future__ import annotations

from typing import TYPE_CHECKING

from modelfilter.typing import SAFilterableStatement


if TYPE_CHECKING:
    from modelfilter.intent.intent import FilterIntent
    from modelfilter.engine.settings import FilterSettings
    from modelfilter.sainfo.capabilities import EntityDescriptor


class Operation:
    """ Base for all operations: a single stage of compilation. Defines the interface """
    intent: FilterIntent
    descriptor: EntityDescriptor
    settings: FilterSettings

    def __init__(self, intent: FilterIntent, descriptor: EntityDescriptor, settings: FilterSettings):
        self.intent = intent
        self.descriptor = descriptor
        self.settings = settings

    __slots__ = 'intent', 'descriptor', 'settings'

    @property
    def Model(self) -> type:
        return self.descriptor.Model

    def apply_to_statement(self, stmt: SAFilterableStatement) -> SAFilterableStatement:
        """ Modify the SQL statement """
        raise NotImplementedError
