"""
Definition Sources

Contracts for anything that answers "which definition is registered under
this name?", and SourceChain, which layers several sources.

Example::

    defaults = DefinitionRegistry({"db.host": "localhost"})
    overrides = DefinitionRegistry({"db.host": "db.internal"})

    chain = SourceChain([overrides, defaults])
    chain.get_definition("db.host").value  # "db.internal"
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .definition import Definition
from .exceptions import InvalidDefinitionError

logger = logging.getLogger(__name__)


class DefinitionSource(ABC):
    """Read access to definitions by entry name."""

    @abstractmethod
    def get_definition(self, name: str) -> Optional[Definition]:
        """Return the definition for ``name``, or None when there is none."""
        ...

    @abstractmethod
    def get_definitions(self) -> Dict[str, Definition]:
        """Return every concrete (non-wildcard) definition, keyed by entry name."""
        ...


class MutableDefinitionSource(DefinitionSource):
    """Definition source that accepts single definitions at runtime."""

    @abstractmethod
    def add_definition(self, definition: Definition) -> None:
        """Store ``definition`` under its name, replacing any previous entry."""
        ...


class SourceChain(MutableDefinitionSource):
    """Looks definitions up in several sources, first match wins.

    A mutable source may be set; it is consulted before every other source
    and receives all ``add_definition()`` calls.

    Attributes:
        sources: Sources in lookup order
    """

    def __init__(self, sources: List[DefinitionSource]):
        self.sources: List[DefinitionSource] = list(sources)
        self._mutable_source: Optional[MutableDefinitionSource] = None

    def get_definition(self, name: str) -> Optional[Definition]:
        for source in self.sources:
            definition = source.get_definition(name)
            if definition is not None:
                return definition
        return None

    def get_definitions(self) -> Dict[str, Definition]:
        definitions: Dict[str, Definition] = {}
        for source in self.sources:
            for name, definition in source.get_definitions().items():
                definitions.setdefault(name, definition)
        return definitions

    def add_definition(self, definition: Definition) -> None:
        if self._mutable_source is None:
            raise InvalidDefinitionError(
                f"Cannot add definition '{definition.name}': the source chain has "
                f"no mutable source. Call set_mutable_definition_source() first."
            )
        self._mutable_source.add_definition(definition)

    def set_mutable_definition_source(self, source: MutableDefinitionSource) -> None:
        """Put ``source`` at the front of the chain and route additions to it.

        A previously set mutable source is removed from the chain.
        """
        if self._mutable_source is not None:
            self.sources.remove(self._mutable_source)
        self._mutable_source = source
        self.sources.insert(0, source)
        logger.debug("Mutable definition source set to %r", source)
